"""Render the document tree (HIR) into HTML."""

from __future__ import annotations

import html
from pathlib import Path

from jinja2 import Environment, FileSystemLoader

from writer4.parser.base import Emphasis
from writer4.parser.hir import (
    Document,
    Emphasised,
    Header,
    HorizontalRule,
    LineBreak,
    List,
    ListStatement,
    Literal,
    Paragraph,
    Statement,
    Text,
    TextSegment,
)

DEFAULT_CSS_CLASS = "writer4-doc"

_EMPHASIS_TAGS = {
    Emphasis.BOLD: "b",
    Emphasis.ITALIC: "i",
    Emphasis.STRIKETHROUGH: "s",
}


class HTMLRenderer:
    """Render a lowered document into an HTML fragment or a standalone page."""

    def __init__(self, css_class: str = DEFAULT_CSS_CLASS, template_path: Path | None = None) -> None:
        if template_path is None:
            template_path = Path(__file__).resolve().parent.parent / "template" / "page.html"

        self.css_class = css_class
        loader = FileSystemLoader(str(template_path.parent))
        self._env = Environment(loader=loader, autoescape=True, trim_blocks=True, lstrip_blocks=True)
        self._template_name = template_path.name

    def render(self, document: Document) -> str:
        body = "".join(self._render_statement(statement) for statement in document.statements)
        return f'<div class="{html.escape(self.css_class)}">{body}</div>'

    def render_page(self, document: Document, *, title: str = "Untitled", lang: str = "en") -> str:
        template = self._env.get_template(self._template_name)
        return template.render(page_title=title, lang=lang, content=self.render(document))

    def _render_statement(self, statement: Statement) -> str:
        if isinstance(statement, Header):
            return f"<h{statement.level}>{self._render_text(statement.text)}</h{statement.level}>"

        if isinstance(statement, Paragraph):
            return f"<p>{self._render_text(statement.text)}</p>"

        if isinstance(statement, ListStatement):
            return self._render_list(statement.list)

        if isinstance(statement, HorizontalRule):
            return "<hr>"

        raise TypeError(f"unexpected document statement: {statement!r}")

    def _render_list(self, block: List) -> str:
        # Walk with an explicit stack of open lists; nesting depth is unbounded.
        parts = ["<ul>"]
        stack = [iter(block.items)]
        while stack:
            item = next(stack[-1], None)
            if item is None:
                stack.pop()
                parts.append("</ul>")
                if stack:
                    parts.append("</li>")
                continue

            parts.append("<li>")
            parts.append(self._render_text(item.text))
            if item.child is None:
                parts.append("</li>")
            else:
                parts.append("<ul>")
                stack.append(iter(item.child.items))
        return "".join(parts)

    def _render_text(self, text: Text) -> str:
        return "".join(self._render_segment(segment) for segment in text.segments)

    def _render_segment(self, segment: TextSegment) -> str:
        if isinstance(segment, Literal):
            return html.escape(segment.text)

        if isinstance(segment, LineBreak):
            return "<br>"

        tag = _EMPHASIS_TAGS[segment.emphasis]
        inner = "".join(self._render_segment(child) for child in segment.inner)
        return f"<{tag}>{inner}</{tag}>"
