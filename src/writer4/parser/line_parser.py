"""Line-shape grammar: classify source lines into LIR statements."""

from __future__ import annotations

import re

from loguru import logger

from ..errors import GrammarError
from . import lir
from .base import Emphasis

_HSPACE = " \t"

# Line shapes, tried in order.
_EMPTY_LINE_RE = re.compile(r"^[ \t]*$")
_COMMENT_RE = re.compile(r"^[ \t]*//(.*)$")
_HEADER_RE = re.compile(r"^(#{1,6})[ \t]+(.*)$")
_LIST_ITEM_RE = re.compile(r"^([ \t]*)-(?:[ \t]+|$)(.*)$")

_EMPHASIS_RE = re.compile(r"(\*\*|__|~~)")


def parse(source: str) -> lir.Document:
    """Parse *source* into a line-level document, one statement per line."""
    lines = source.split("\n")
    if lines[-1] == "":
        # A terminating newline does not open another line.
        lines.pop()

    statements = [
        parse_line(line.removesuffix("\r"), line_number)
        for line_number, line in enumerate(lines, start=1)
    ]
    logger.debug("Parsed {} line statements", len(statements))
    return lir.Document(statements=tuple(statements))


def parse_line(line: str, line_number: int = 1) -> lir.Statement:
    """Classify a single line (without its newline) into an LIR statement."""
    if _EMPTY_LINE_RE.match(line):
        return lir.EmptyLine()

    m = _COMMENT_RE.match(line)
    if m:
        return lir.Comment(text=m.group(1))

    m = _HEADER_RE.match(line)
    if m:
        return lir.Header(level=len(m.group(1)), text=parse_text(m.group(2)))

    m = _LIST_ITEM_RE.match(line)
    if m:
        return lir.ListItem(indentation=len(m.group(1)), text=parse_text(m.group(2)))

    text = line.lstrip(_HSPACE)
    if not text:  # pragma: no cover - empty lines are matched above
        raise GrammarError(line_number, line)
    return lir.Paragraph(text=parse_text(text))


def parse_text(text: str) -> lir.Text:
    """Tokenize free text into literal runs and unpaired emphasis markers."""
    segments: list[lir.TextSegment] = []
    for piece in _EMPHASIS_RE.split(text):
        if not piece:
            continue
        if _EMPHASIS_RE.fullmatch(piece):
            segments.append(lir.EmphasisMarker(Emphasis.from_delimiter(piece)))
        else:
            segments.append(lir.Literal(piece))

    if segments and isinstance(segments[-1], lir.Literal):
        trimmed = segments[-1].text.rstrip(_HSPACE)
        if trimmed:
            segments[-1] = lir.Literal(trimmed)
        else:
            segments.pop()

    return lir.Text(segments=tuple(segments))
