"""Document-level intermediate representation with nested lists and resolved emphasis."""

from __future__ import annotations

from dataclasses import dataclass

from .base import Emphasis, check_header_level


@dataclass(slots=True, frozen=True)
class Literal:
    text: str


@dataclass(slots=True, frozen=True)
class LineBreak:
    pass


@dataclass(slots=True, frozen=True)
class Emphasised:
    emphasis: Emphasis
    inner: tuple[TextSegment, ...] = ()


TextSegment = Literal | LineBreak | Emphasised


@dataclass(slots=True, frozen=True)
class Text:
    segments: tuple[TextSegment, ...] = ()


@dataclass(slots=True, frozen=True)
class ListItem:
    text: Text
    child: List | None = None


@dataclass(slots=True, frozen=True)
class List:
    items: tuple[ListItem, ...]

    def __post_init__(self) -> None:
        if not self.items:
            raise ValueError("a list must contain at least one item")


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
class ListStatement:
    list: List


@dataclass(slots=True, frozen=True)
class HorizontalRule:
    pass


Statement = Header | Paragraph | ListStatement | HorizontalRule


@dataclass(slots=True, frozen=True)
class Document:
    statements: tuple[Statement, ...] = ()


def plain_text(text: Text) -> str:
    """Flatten *text* to its literal content; line breaks become a single space."""
    return "".join(_plain_segments(text.segments))


def _plain_segments(segments: tuple[TextSegment, ...]) -> list[str]:
    parts: list[str] = []
    for segment in segments:
        if isinstance(segment, Literal):
            parts.append(segment.text)
        elif isinstance(segment, LineBreak):
            parts.append(" ")
        else:
            parts.extend(_plain_segments(segment.inner))
    return parts
