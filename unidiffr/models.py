#!/usr/bin/env python3

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import List, Tuple

from pydantic import BaseModel, Field


class Action(str, Enum):
    """Classification of a single chunk body line."""
    ADD = "add"
    REMOVE = "remove"
    KEEP = "keep"

    @property
    def prefix(self) -> str:
        return _PREFIXES[self]

    @classmethod
    def from_prefix(cls, prefix: str) -> "Action":
        """
        Resolves the action a line prefix stands for.

        Args:
            prefix: First character of a chunk body line

        Returns:
            The matching Action

        Raises:
            ValueError: If the prefix is not one of '+', '-' or ' '
        """
        for action, char in _PREFIXES.items():
            if char == prefix:
                return action
        raise ValueError(f"unknown line prefix {prefix!r}")


_PREFIXES = {
    Action.ADD: "+",
    Action.REMOVE: "-",
    Action.KEEP: " ",
}


@dataclass(frozen=True)
class Header:
    """Data class for the two file identifiers of a diff."""
    from_path: str
    from_timestamp: datetime
    to_path: str
    to_timestamp: datetime


@dataclass(frozen=True)
class Chunk:
    """Data class for one hunk; counts are taken verbatim from its header line."""
    pre_start: int
    pre_count: int
    post_start: int
    post_count: int
    lines: Tuple[Tuple[Action, str], ...] = ()


@dataclass(frozen=True)
class Diff:
    """Data class for a parsed single-file unified diff."""
    header: Header
    chunks: Tuple[Chunk, ...] = ()


class HeaderSchema(BaseModel):
    from_path: str = Field(..., description="Path of the original file")
    from_timestamp: datetime = Field(..., description="Modification time of the original file")
    to_path: str = Field(..., description="Path of the new file")
    to_timestamp: datetime = Field(..., description="Modification time of the new file")


class ChunkLineSchema(BaseModel):
    action: Action = Field(..., description="Line classification: add, remove or keep")
    content: str = Field(..., description="Line text without its prefix character")


class ChunkSchema(BaseModel):
    pre_start: int = Field(..., description="First line of the chunk in the original file")
    pre_count: int = Field(..., description="Line count of the chunk in the original file")
    post_start: int = Field(..., description="First line of the chunk in the new file")
    post_count: int = Field(..., description="Line count of the chunk in the new file")
    lines: List[ChunkLineSchema] = Field(..., description="Classified body lines in input order")


class DiffSchema(BaseModel):
    header: HeaderSchema = Field(..., description="File identifiers and timestamps")
    chunks: List[ChunkSchema] = Field(..., description="All chunks in input order")

    @classmethod
    def from_diff(cls, diff: Diff) -> "DiffSchema":
        """
        Builds the serializable form of a parsed diff.

        Args:
            diff: Parsed Diff value object

        Returns:
            DiffSchema mirroring every field of the diff
        """
        header = diff.header
        return cls(
            header=HeaderSchema(
                from_path=header.from_path,
                from_timestamp=header.from_timestamp,
                to_path=header.to_path,
                to_timestamp=header.to_timestamp,
            ),
            chunks=[
                ChunkSchema(
                    pre_start=chunk.pre_start,
                    pre_count=chunk.pre_count,
                    post_start=chunk.post_start,
                    post_count=chunk.post_count,
                    lines=[ChunkLineSchema(action=action, content=content) for action, content in chunk.lines],
                )
                for chunk in diff.chunks
            ],
        )
