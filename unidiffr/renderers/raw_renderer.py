#!/usr/bin/env python3

from typing import List

from unidiffr.models import Chunk, Diff
from unidiffr.renderers.base_renderer import BaseRenderer


class RawRenderer(BaseRenderer):
    """Human-readable dump of every field of a parsed diff."""

    def render(self, diff: Diff) -> str:
        header = diff.header
        out = [
            "Diff",
            "  header:",
            f"    from: {header.from_path} @ {header.from_timestamp.isoformat()}",
            f"    to:   {header.to_path} @ {header.to_timestamp.isoformat()}",
            f"  chunks: {len(diff.chunks)}",
        ]
        for index, chunk in enumerate(diff.chunks, start=1):
            out.extend(self._render_chunk(index, chunk))
        return "\n".join(out)

    def _render_chunk(self, index: int, chunk: Chunk) -> List[str]:
        out = [
            f"  chunk {index}: -{chunk.pre_start},{chunk.pre_count} "
            f"+{chunk.post_start},{chunk.post_count} ({len(chunk.lines)} lines)"
        ]
        # repr keeps leading/trailing whitespace visible
        for action, content in chunk.lines:
            out.append(f"    {action.value:<6} {content!r}")
        return out
