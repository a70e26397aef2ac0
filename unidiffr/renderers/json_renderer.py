#!/usr/bin/env python3

from unidiffr.models import Diff, DiffSchema
from unidiffr.renderers.base_renderer import BaseRenderer


class JsonRenderer(BaseRenderer):
    """Structured JSON output built from the pydantic schemas."""

    def render(self, diff: Diff) -> str:
        indent = self.config.get("json_indent", 2)
        return DiffSchema.from_diff(diff).model_dump_json(indent=indent if indent and indent > 0 else None)
