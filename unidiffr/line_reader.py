#!/usr/bin/env python3

import logging
from typing import IO, List

logger = logging.getLogger(__name__)


def _strip_separator(line: str) -> str:
    if line.endswith("\r"):
        line = line[:-1]
    return line


def split_lines(text: str) -> List[str]:
    """
    Splits diff text into lines, dropping only the record separator.

    Lines end at "\\n" (optionally preceded by "\\r"). A lone "\\r" and any
    other line-break character stay part of the line, and spaces and tabs at
    either end are kept, since they belong to the chunk body content.

    Args:
        text: Whole diff document

    Returns:
        List of lines without their trailing "\\n" or "\\r\\n"
    """
    if not text:
        return []
    lines = text.split("\n")
    if text.endswith("\n"):
        lines.pop()
    return [_strip_separator(line) for line in lines]


def read_lines(stream: IO[str]) -> List[str]:
    """
    Reads a text stream and splits it the same way as split_lines.

    The stream should be opened with ``newline=""`` so that carriage returns
    reach the splitter untranslated.
    """
    lines = split_lines(stream.read())
    logger.debug("Read %d lines from %s", len(lines), getattr(stream, "name", "<stream>"))
    return lines
