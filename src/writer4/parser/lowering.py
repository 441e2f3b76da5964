"""Lower the line-level tree into the document tree.

Three algorithms live here:

- statement grouping: paragraph lines are merged, and list items absorb the
  paragraph lines that follow them (lazy continuations);
- list nesting: a flat sequence of ``(indentation, text)`` items is rebuilt
  into nested lists, nesting only on indentation increases of 2 or more;
- emphasis resolution: each marker pairs with the nearest following marker of
  the same kind, unmatched markers fall back to their delimiter text.

Lowering never fails; any LIR document produces some HIR document.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from loguru import logger

from . import hir, lir
from .base import Emphasis

NESTING_INDENT = 2


@dataclass(slots=True)
class ListEntry:
    indentation: int
    text: hir.Text


def lower(document: lir.Document) -> hir.Document:
    """Group LIR statements into HIR statements."""
    source = document.statements
    statements: list[hir.Statement] = []

    idx = 0
    while idx < len(source):
        statement = source[idx]

        if isinstance(statement, (lir.EmptyLine, lir.Comment)):
            idx += 1
            continue

        if isinstance(statement, lir.Header):
            statements.append(
                hir.Header(level=statement.level, text=resolve_text(statement.text.segments))
            )
            idx += 1
            continue

        if isinstance(statement, lir.Paragraph):
            end = idx + 1
            while end < len(source) and isinstance(source[end], lir.Paragraph):
                end += 1
            statements.append(hir.Paragraph(text=resolve_text(_join_lines(source[idx:end]))))
            idx = end
            continue

        if isinstance(statement, lir.ListItem):
            entries, idx = _collect_list_run(source, idx)
            statements.append(hir.ListStatement(list=build_list(entries)))
            continue

        raise TypeError(f"unexpected LIR statement: {statement!r}")

    logger.debug("Lowered {} line statements into {} document statements", len(source), len(statements))
    return hir.Document(statements=tuple(statements))


# ---------------------------------------------------------------------------
# Statement grouping
# ---------------------------------------------------------------------------

def _join_lines(lines: Sequence[lir.Paragraph | lir.ListItem]) -> list[lir.TextSegment]:
    """Concatenate the segments of *lines*, with a line break between each pair."""
    segments: list[lir.TextSegment] = []
    for i, line in enumerate(lines):
        if i:
            segments.append(lir.LineBreak())
        segments.extend(line.text.segments)
    return segments


def _collect_list_run(source: Sequence[lir.Statement], start: int) -> tuple[list[ListEntry], int]:
    """Collect the list run beginning at *start*; return its entries and the next cursor."""
    groups: list[list[lir.ListItem | lir.Paragraph]] = []

    idx = start
    while idx < len(source):
        statement = source[idx]
        if isinstance(statement, lir.ListItem):
            groups.append([statement])
        elif isinstance(statement, lir.Paragraph):
            # A run always starts with an item, so there is a group to continue.
            groups[-1].append(statement)
        else:
            break
        idx += 1

    entries = [
        ListEntry(indentation=group[0].indentation, text=resolve_text(_join_lines(group)))
        for group in groups
    ]
    return entries, idx


# ---------------------------------------------------------------------------
# List nesting
# ---------------------------------------------------------------------------

@dataclass(slots=True)
class _OpenList:
    """A list still collecting items; the first item indented less than ``threshold`` closes it."""

    threshold: int
    items: list[tuple[ListEntry, hir.List | None]] = field(default_factory=list)

    def close(self) -> hir.List:
        return hir.List(items=tuple(hir.ListItem(text=entry.text, child=child) for entry, child in self.items))


def build_list(entries: Sequence[ListEntry]) -> hir.List:
    """Rebuild nested lists from a non-empty flat sequence of list entries.

    An item gets a child list when the next item is indented at least
    ``NESTING_INDENT`` columns deeper; the child list then extends over every
    following item indented at least as deep as that first child.

    Open lists are kept on an explicit stack, so nesting depth is not bounded
    by the interpreter's recursion limit.
    """
    stack = [_OpenList(threshold=-1)]

    for entry in entries:
        closed = False
        while len(stack) > 1 and entry.indentation < stack[-1].threshold:
            _attach_child(stack)
            closed = True

        current = stack[-1]
        # The last item of the current list may take a child only if it has none yet.
        if (
            not closed
            and current.items
            and entry.indentation >= current.items[-1][0].indentation + NESTING_INDENT
        ):
            stack.append(_OpenList(threshold=entry.indentation))

        stack[-1].items.append((entry, None))

    while len(stack) > 1:
        _attach_child(stack)
    return stack[0].close()


def _attach_child(stack: list[_OpenList]) -> None:
    """Close the innermost open list and hang it under its parent's last item."""
    child = stack.pop().close()
    parent = stack[-1]
    entry, _ = parent.items[-1]
    parent.items[-1] = (entry, child)


# ---------------------------------------------------------------------------
# Emphasis resolution
# ---------------------------------------------------------------------------

def resolve_text(segments: Sequence[lir.TextSegment]) -> hir.Text:
    return hir.Text(segments=tuple(resolve_emphasis(segments)))


def resolve_emphasis(segments: Sequence[lir.TextSegment]) -> list[hir.TextSegment]:
    """Pair emphasis markers in *segments* into nested emphasised spans."""
    resolved: list[hir.TextSegment] = []

    idx = 0
    while idx < len(segments):
        segment = segments[idx]

        if isinstance(segment, lir.Literal):
            _append_literal(resolved, segment.text)
            idx += 1
        elif isinstance(segment, lir.LineBreak):
            resolved.append(hir.LineBreak())
            idx += 1
        else:
            close = _find_marker(segments, segment.emphasis, idx + 1)
            if close is None:
                _append_literal(resolved, segment.emphasis.delimiter)
                idx += 1
            else:
                inner = resolve_emphasis(segments[idx + 1:close])
                resolved.append(hir.Emphasised(emphasis=segment.emphasis, inner=tuple(inner)))
                idx = close + 1

    return resolved


def _find_marker(segments: Sequence[lir.TextSegment], emphasis: Emphasis, start: int) -> int | None:
    for pos in range(start, len(segments)):
        segment = segments[pos]
        if isinstance(segment, lir.EmphasisMarker) and segment.emphasis is emphasis:
            return pos
    return None


def _append_literal(resolved: list[hir.TextSegment], text: str) -> None:
    """Append literal *text*, merging it into a directly preceding literal."""
    if resolved and isinstance(resolved[-1], hir.Literal):
        resolved[-1] = hir.Literal(resolved[-1].text + text)
    else:
        resolved.append(hir.Literal(text))
