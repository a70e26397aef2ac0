#!/usr/bin/env python3

import logging
import re
from datetime import datetime, timedelta, timezone
from typing import List, Optional, Sequence, Tuple

from unidiffr.errors import FormatError, TimestampParseError
from unidiffr.line_reader import split_lines
from unidiffr.models import Action, Chunk, Diff, Header

logger = logging.getLogger(__name__)

FROM_PREFIX = "--- "
TO_PREFIX = "+++ "
CHUNK_PREFIX = "@@ "

# Path is the first token after the prefix; the rest, after one whitespace run, is the timestamp.
_HEADER_BODY_RE = re.compile(r"(\S+)(?:\s+(.*))?\Z", re.DOTALL)

_TIMESTAMP_RE = re.compile(
    r"(\d{4})-(\d{2})-(\d{2}) (\d{2}):(\d{2}):(\d{2})(?:\.(\d{1,9}))? ([+-])(\d{2})([0-5]\d)\Z",
    re.ASCII,
)

_CHUNK_HEADER_RE = re.compile(r"@@ -(\d+),(\d+) \+(\d+),(\d+) @@\Z", re.ASCII)


def parse_timestamp(text: str, line_number: Optional[int] = None) -> datetime:
    """
    Parses a header timestamp of the form ``YYYY-MM-DD HH:MM:SS[.fraction] +HHMM``.

    Fractions longer than microsecond precision are truncated.

    Args:
        text: Timestamp text exactly as it appears in the header line
        line_number: Input line the text came from, for error reporting

    Returns:
        Offset-aware datetime

    Raises:
        TimestampParseError: If the text does not match the pattern
    """
    match = _TIMESTAMP_RE.match(text)
    if not match:
        raise TimestampParseError(f"invalid timestamp {text!r}", text, line_number=line_number)

    year, month, day, hour, minute, second, fraction, sign, off_hours, off_minutes = match.groups()
    microsecond = int((fraction or "").ljust(6, "0")[:6])
    offset = timedelta(hours=int(off_hours), minutes=int(off_minutes))
    if sign == "-":
        offset = -offset

    try:
        return datetime(
            int(year), int(month), int(day),
            int(hour), int(minute), int(second), microsecond,
            tzinfo=timezone(offset),
        )
    except ValueError as e:
        raise TimestampParseError(
            f"invalid timestamp {text!r}: {e}", text, line_number=line_number
        ) from e


def _parse_file_line(line: str, prefix: str, line_number: int) -> Tuple[str, datetime]:
    if not line.startswith(prefix):
        raise FormatError(f"expected line starting with {prefix!r}", stage="header", line_number=line_number)

    match = _HEADER_BODY_RE.match(line[len(prefix):])
    if not match:
        raise FormatError(f"missing file path after {prefix!r}", stage="header", line_number=line_number)

    path, timestamp_text = match.group(1), match.group(2) or ""
    return path, parse_timestamp(timestamp_text, line_number=line_number)


def parse_header(from_line: str, to_line: str, first_line_number: int = 1) -> Header:
    """
    Parses the ``---``/``+++`` line pair of a unified diff.

    The path is the first whitespace-delimited token after the prefix, so paths
    containing whitespace are not supported.

    Args:
        from_line: Line starting with "--- "
        to_line: Line starting with "+++ "
        first_line_number: Input position of from_line, for error reporting

    Returns:
        Header with both paths and timestamps

    Raises:
        FormatError: If a prefix or a path is missing
        TimestampParseError: If a timestamp does not parse
    """
    from_path, from_timestamp = _parse_file_line(from_line, FROM_PREFIX, first_line_number)
    to_path, to_timestamp = _parse_file_line(to_line, TO_PREFIX, first_line_number + 1)
    return Header(from_path, from_timestamp, to_path, to_timestamp)


def parse_chunk_header(line: str, line_number: Optional[int] = None) -> Tuple[int, int, int, int]:
    """
    Parses an ``@@ -a,b +c,d @@`` line into (pre_start, pre_count, post_start, post_count).

    Raises:
        FormatError: If any delimiter is missing or a field is not an integer
    """
    match = _CHUNK_HEADER_RE.match(line)
    if not match:
        raise FormatError(f"malformed chunk header {line!r}", stage="chunk header", line_number=line_number)
    pre_start, pre_count, post_start, post_count = (int(field) for field in match.groups())
    return pre_start, pre_count, post_start, post_count


def classify_line(line: str, line_number: Optional[int] = None) -> Tuple[Action, str]:
    """Splits a chunk body line into its action and untouched content."""
    if not line:
        raise FormatError("empty chunk line", stage="line", line_number=line_number)
    try:
        action = Action.from_prefix(line[0])
    except ValueError:
        raise FormatError(f"bad line prefix {line[0]!r}", stage="line", line_number=line_number) from None
    return action, line[1:]


def _build_chunk(group: List[str], first_line_number: int) -> Chunk:
    if not group:
        raise FormatError("empty chunk", stage="chunk header", line_number=first_line_number)

    pre_start, pre_count, post_start, post_count = parse_chunk_header(group[0], first_line_number)
    lines = tuple(
        classify_line(line, first_line_number + offset)
        for offset, line in enumerate(group[1:], start=1)
    )
    logger.debug(
        "Parsed chunk -%d,%d +%d,%d with %d lines",
        pre_start, pre_count, post_start, post_count, len(lines),
    )
    return Chunk(pre_start, pre_count, post_start, post_count, lines)


def parse_diff(lines: Sequence[str]) -> Diff:
    """
    Parses a single-file unified diff.

    Args:
        lines: Diff lines with record separators already stripped

    Returns:
        Diff with the header and every chunk in input order

    Raises:
        FormatError: If the input is too short or any line is malformed
        TimestampParseError: If a header timestamp does not parse
    """
    if len(lines) < 2:
        raise FormatError("diff misformatted", stage="diff")

    header = parse_header(lines[0], lines[1])
    logger.debug("Parsed header: %s -> %s", header.from_path, header.to_path)

    chunks = []
    group: List[str] = []
    group_start = 3

    for line_number, line in enumerate(lines[2:], start=3):
        if line.startswith(CHUNK_PREFIX):
            if group:
                chunks.append(_build_chunk(group, group_start))
            group = [line]
            group_start = line_number
        else:
            group.append(line)

    if group:
        chunks.append(_build_chunk(group, group_start))

    logger.debug("Parsed %d chunks from %d lines", len(chunks), len(lines))
    return Diff(header, tuple(chunks))


class DiffParser:
    """Parser for single-file unified diff text."""

    parse_header = staticmethod(parse_header)
    parse_timestamp = staticmethod(parse_timestamp)
    parse_chunk_header = staticmethod(parse_chunk_header)
    classify_line = staticmethod(classify_line)
    parse_diff = staticmethod(parse_diff)

    @staticmethod
    def parse_text(diff_str: str) -> Diff:
        """
        Parses a whole diff document.

        Args:
            diff_str: Diff text, lines separated by "\\n" or "\\r\\n"

        Returns:
            Parsed Diff
        """
        return parse_diff(split_lines(diff_str))
