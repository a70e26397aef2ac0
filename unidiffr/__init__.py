"""Parser for single-file unified diff text."""

from unidiffr.diff_parser import (
    DiffParser,
    classify_line,
    parse_chunk_header,
    parse_diff,
    parse_header,
    parse_timestamp,
)
from unidiffr.errors import FormatError, TimestampParseError, UnidiffError
from unidiffr.models import Action, Chunk, Diff, Header

__version__ = "1.0.0"

__all__ = [
    "Action",
    "Chunk",
    "Diff",
    "DiffParser",
    "FormatError",
    "Header",
    "TimestampParseError",
    "UnidiffError",
    "classify_line",
    "parse_chunk_header",
    "parse_diff",
    "parse_header",
    "parse_timestamp",
]
