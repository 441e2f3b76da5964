"""Full compilation pipeline: source text -> LIR -> HIR -> backend output."""

from __future__ import annotations

from loguru import logger

from writer4.parser.line_parser import parse
from writer4.parser.lowering import lower
from writer4.renderer.base import Backend
from writer4.renderer.html_renderer import DEFAULT_CSS_CLASS, HTMLRenderer


def compile_document(source: str, backend: Backend) -> str:
    """Compile *source* with *backend*.

    Raises :class:`~writer4.errors.GrammarError` if the front-end rejects a
    line; errors raised by the backend propagate unchanged. Nothing is
    returned on failure.
    """
    document = lower(parse(source))
    logger.debug("Rendering {} statements with {}", len(document.statements), type(backend).__name__)
    return backend.render(document)


def compile_html(source: str, *, css_class: str = DEFAULT_CSS_CLASS) -> str:
    """Compile *source* into an HTML fragment."""
    return compile_document(source, HTMLRenderer(css_class=css_class))
