"""Definitions shared by the line-level (LIR) and document-level (HIR) trees."""

from __future__ import annotations

from enum import Enum

MIN_HEADER_LEVEL = 1
MAX_HEADER_LEVEL = 6


class Emphasis(Enum):
    """Inline emphasis kinds, valued by their delimiter text."""

    BOLD = "**"
    ITALIC = "__"
    STRIKETHROUGH = "~~"

    @property
    def delimiter(self) -> str:
        return self.value

    @classmethod
    def from_delimiter(cls, delimiter: str) -> Emphasis:
        return cls(delimiter)


def check_header_level(level: int) -> None:
    if not MIN_HEADER_LEVEL <= level <= MAX_HEADER_LEVEL:
        raise ValueError(
            f"header level must be between {MIN_HEADER_LEVEL} and {MAX_HEADER_LEVEL}, got {level}"
        )
