"""writer4 CLI entrypoint."""

from __future__ import annotations

import sys
from pathlib import Path

import click
from loguru import logger

from writer4.errors import Writer4Error
from writer4.parser import hir
from writer4.parser.line_parser import parse
from writer4.parser.lowering import lower
from writer4.renderer.html_renderer import DEFAULT_CSS_CLASS, HTMLRenderer


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.argument(
    "input_path", type=click.Path(exists=True, dir_okay=False, allow_dash=True, path_type=Path)
)
@click.option("--output", "-o", type=click.Path(path_type=Path), default=None, help="Output path (default: stdout)")
@click.option(
    "--emit",
    type=click.Choice(["html", "lir", "hir"], case_sensitive=False),
    default="html",
    show_default=True,
    help="Stage to output: rendered HTML or one of the intermediate trees",
)
@click.option("--standalone", is_flag=True, help="Wrap the HTML fragment in a complete page")
@click.option("--title", type=str, default=None, help="Override the page title (with --standalone)")
@click.option("--lang", type=str, default="en", show_default=True, help="Page language attribute (with --standalone)")
@click.option("--css-class", type=str, default=DEFAULT_CSS_CLASS, show_default=True, help="Class of the root <div>")
@click.option("--verbose", "-v", is_flag=True, help="Log pipeline progress to stderr")
def main(
    input_path: Path,
    output: Path | None,
    emit: str,
    standalone: bool,
    title: str | None,
    lang: str,
    css_class: str,
    verbose: bool,
) -> None:
    """Compile a writer4 markup document into HTML."""
    _configure_logging(verbose)

    source = _read_source(input_path)
    try:
        result = _compile(source, input_path, emit.lower(), standalone, title, lang, css_class)
    except Writer4Error as exc:
        raise click.ClickException(str(exc)) from exc

    if output is None:
        click.echo(result)
        return

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(result, encoding="utf-8")

    click.echo(f"Rendered: {output}")


def _configure_logging(verbose: bool) -> None:
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if verbose else "WARNING")
    logger.enable("writer4")


def _read_source(input_path: Path) -> str:
    if str(input_path) == "-":
        return click.get_text_stream("stdin").read()
    try:
        return input_path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise click.ClickException(f"{input_path}: not valid UTF-8") from exc


def _compile(
    source: str,
    input_path: Path,
    emit: str,
    standalone: bool,
    title: str | None,
    lang: str,
    css_class: str,
) -> str:
    lir_document = parse(source)
    if emit == "lir":
        return "\n".join(repr(statement) for statement in lir_document.statements)

    document = lower(lir_document)
    if emit == "hir":
        return "\n".join(repr(statement) for statement in document.statements)

    renderer = HTMLRenderer(css_class=css_class)
    if not standalone:
        return renderer.render(document)

    page_title = title or _default_title(document, input_path)
    logger.debug("Rendering standalone page titled {!r}", page_title)
    return renderer.render_page(document, title=page_title, lang=lang)


def _default_title(document: hir.Document, input_path: Path) -> str:
    for statement in document.statements:
        if isinstance(statement, hir.Header):
            heading = hir.plain_text(statement.text).strip()
            if heading:
                return heading
    if str(input_path) != "-":
        return input_path.stem
    return "Untitled"


if __name__ == "__main__":  # pragma: no cover
    main()
