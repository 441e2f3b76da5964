from __future__ import annotations

from pathlib import Path

from click.testing import CliRunner
from loguru import logger

from writer4.cli import main


def _write(tmp_path: Path, text: str, name: str = "notes.txt") -> Path:
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return path


def test_cli_prints_html_fragment(tmp_path: Path) -> None:
    source = _write(tmp_path, "# Hi\n- a\n  - b\n")

    result = CliRunner().invoke(main, [str(source)])

    assert result.exit_code == 0, result.output
    assert result.output.strip() == '<div class="writer4-doc"><h1>Hi</h1><ul><li>a<ul><li>b</li></ul></li></ul></div>'


def test_cli_writes_output_file(tmp_path: Path) -> None:
    source = _write(tmp_path, "Foo\nBar")
    output = tmp_path / "out" / "notes.html"

    result = CliRunner().invoke(main, [str(source), "-o", str(output), "--css-class", "doc"])

    assert result.exit_code == 0, result.output
    assert f"Rendered: {output}" in result.output
    assert output.read_text(encoding="utf-8") == '<div class="doc"><p>Foo<br>Bar</p></div>'


def test_cli_standalone_title_from_first_header(tmp_path: Path) -> None:
    source = _write(tmp_path, "intro\n## The **Real** Title\n")

    result = CliRunner().invoke(main, [str(source), "--standalone"])

    assert result.exit_code == 0, result.output
    assert "<title>The Real Title</title>" in result.output
    assert "<h2>The <b>Real</b> Title</h2>" in result.output


def test_cli_standalone_title_falls_back_to_stem(tmp_path: Path) -> None:
    source = _write(tmp_path, "no headers here", name="my_notes.txt")

    result = CliRunner().invoke(main, [str(source), "--standalone"])

    assert "<title>my_notes</title>" in result.output


def test_cli_title_override(tmp_path: Path) -> None:
    source = _write(tmp_path, "# Ignored")

    result = CliRunner().invoke(main, [str(source), "--standalone", "--title", "Chosen"])

    assert "<title>Chosen</title>" in result.output


def test_cli_reads_stdin() -> None:
    result = CliRunner().invoke(main, ["-"], input="**x**")

    assert result.exit_code == 0, result.output
    assert result.output.strip() == '<div class="writer4-doc"><p><b>x</b></p></div>'


def test_cli_emit_intermediate_trees(tmp_path: Path) -> None:
    source = _write(tmp_path, "a\n\nb")

    lir_result = CliRunner().invoke(main, [str(source), "--emit", "lir"])
    hir_result = CliRunner().invoke(main, [str(source), "--emit", "hir"])

    assert lir_result.exit_code == 0, lir_result.output
    assert lir_result.output.splitlines() == [
        "Paragraph(text=Text(segments=(Literal(text='a'),)))",
        "EmptyLine()",
        "Paragraph(text=Text(segments=(Literal(text='b'),)))",
    ]
    assert len(hir_result.output.splitlines()) == 2


def test_cli_rejects_missing_input(tmp_path: Path) -> None:
    result = CliRunner().invoke(main, [str(tmp_path / "missing.txt")])

    assert result.exit_code != 0


def test_cli_rejects_non_utf8_input(tmp_path: Path) -> None:
    source = tmp_path / "latin1.txt"
    source.write_bytes(b"caf\xe9 \xff\xfe")

    result = CliRunner().invoke(main, [str(source)])

    assert result.exit_code == 1
    assert f"{source}: not valid UTF-8" in result.output
    assert not isinstance(result.exception, UnicodeDecodeError)


def test_cli_verbose_logs_pipeline_stages() -> None:
    try:
        result = CliRunner().invoke(main, ["-", "--verbose"], input="a\n- b")

        assert result.exit_code == 0, result.output
        assert "Parsed 2 line statements" in result.output
        assert "Lowered 2 line statements into 2 document statements" in result.output
    finally:
        # The sink was bound to the runner's captured stream.
        logger.remove()


def test_cli_standalone_lang(tmp_path: Path) -> None:
    source = _write(tmp_path, "# Titel")

    result = CliRunner().invoke(main, [str(source), "--standalone", "--lang", "de"])

    assert result.exit_code == 0, result.output
    assert '<html lang="de">' in result.output
