"""writer4: compile line-oriented plain-text markup into HTML."""

from loguru import logger

from .compiler import compile_document, compile_html
from .errors import BackendError, GrammarError, Writer4Error
from .parser import lower, parse
from .renderer import Backend, HTMLRenderer

__version__ = "0.1.0"

logger.disable("writer4")

__all__ = [
    "Backend",
    "BackendError",
    "GrammarError",
    "HTMLRenderer",
    "Writer4Error",
    "compile_document",
    "compile_html",
    "lower",
    "parse",
]
