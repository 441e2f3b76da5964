"""Exception hierarchy of the writer4 compiler."""

from __future__ import annotations


class Writer4Error(Exception):
    """Base class for all errors raised by writer4."""


class GrammarError(Writer4Error):
    """A source line matched none of the line-shape rules.

    The paragraph rule accepts any line, so this signals a defect in the
    front-end rather than a problem with the input document.
    """

    def __init__(self, line_number: int, line: str) -> None:
        super().__init__(f"cannot classify line {line_number}: {line!r}")
        self.line_number = line_number
        self.line = line


class BackendError(Writer4Error):
    """Base class for failures of an output backend."""
