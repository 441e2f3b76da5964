"""Parser package: line grammar (LIR) and lowering to the document tree (HIR)."""

from . import hir, lir
from .base import MAX_HEADER_LEVEL, MIN_HEADER_LEVEL, Emphasis
from .line_parser import parse, parse_line, parse_text
from .lowering import build_list, lower, resolve_emphasis

__all__ = [
    "hir",
    "lir",
    "Emphasis",
    "MIN_HEADER_LEVEL",
    "MAX_HEADER_LEVEL",
    "parse",
    "parse_line",
    "parse_text",
    "lower",
    "build_list",
    "resolve_emphasis",
]
