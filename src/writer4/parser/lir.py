"""Line-level intermediate representation: one statement per source line."""

from __future__ import annotations

from dataclasses import dataclass

from .base import Emphasis, check_header_level


@dataclass(slots=True, frozen=True)
class Literal:
    text: str


@dataclass(slots=True, frozen=True)
class EmphasisMarker:
    """An unpaired ``**``, ``__`` or ``~~`` token."""

    emphasis: Emphasis


@dataclass(slots=True, frozen=True)
class LineBreak:
    """Boundary between two merged source lines, inserted during lowering."""


TextSegment = Literal | EmphasisMarker | LineBreak


@dataclass(slots=True, frozen=True)
class Text:
    segments: tuple[TextSegment, ...] = ()


@dataclass(slots=True, frozen=True)
class EmptyLine:
    pass


@dataclass(slots=True, frozen=True)
class Comment:
    text: str


@dataclass(slots=True, frozen=True)
class Header:
    level: int
    text: Text

    def __post_init__(self) -> None:
        check_header_level(self.level)


@dataclass(slots=True, frozen=True)
class Paragraph:
    text: Text


@dataclass(slots=True, frozen=True)
class ListItem:
    indentation: int
    text: Text

    def __post_init__(self) -> None:
        if self.indentation < 0:
            raise ValueError(f"list item indentation must be non-negative, got {self.indentation}")


Statement = EmptyLine | Comment | Header | Paragraph | ListItem


@dataclass(slots=True, frozen=True)
class Document:
    statements: tuple[Statement, ...] = ()
