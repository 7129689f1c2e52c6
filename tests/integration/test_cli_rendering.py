#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/integration/test_cli_rendering.py
"""Integration tests for the ast2latex command-line interface.

The CLI is driven in-process through ``main()``; output is captured with
``capsys`` and files are written under ``tmp_path``.
"""

import io
import json
from pathlib import Path

import pytest

from ast2latex import __version__
from ast2latex.ast import Code, DocumentBuilder, Emphasis, Paragraph, Text, ast_to_json
from ast2latex.cli import build_options, create_parser, get_exit_code_for_exception, main
from ast2latex.constants import (
    EXIT_ERROR,
    EXIT_FILE_ERROR,
    EXIT_PARSING_ERROR,
    EXIT_RENDERING_ERROR,
    EXIT_SUCCESS,
    EXIT_VALIDATION_ERROR,
)
from ast2latex.exceptions import (
    DelimiterError,
    InvalidOptionsError,
    OutputWriteError,
    ParsingError,
    UnsupportedNodeError,
)

ALL_DELIMITERS = "".join(chr(c) for c in range(ord("!"), ord("*"))) + "".join(chr(c) for c in range(ord("+"), 128))


def _write_document(path: Path, builder: DocumentBuilder) -> Path:
    path.write_text(ast_to_json(builder.get_document()), encoding="utf-8")
    return path


@pytest.fixture
def section_json(tmp_path: Path) -> Path:
    """AST JSON file holding a heading and one paragraph."""
    builder = (
        DocumentBuilder()
        .add_heading(1, "Section")
        .add_paragraph([Text(content="Some "), Emphasis(children=[Text(content="Markdown")]), Text(content=" text.")])
    )
    return _write_document(tmp_path / "doc.json", builder)


@pytest.fixture
def titled_json(tmp_path: Path) -> Path:
    """AST JSON file with a title block, a footnote and a body paragraph."""
    builder = DocumentBuilder()
    note = builder.footnote("A note.")
    builder.add_title_block("My Title").add_paragraph([Text(content="Body"), note])
    return _write_document(tmp_path / "titled.json", builder)


@pytest.mark.integration
@pytest.mark.cli
class TestCliRendering:
    """Tests for successful CLI runs."""

    def test_fragment_to_stdout(self, section_json: Path, capsys: pytest.CaptureFixture) -> None:
        """Test the default fragment rendering to stdout."""
        assert main([str(section_json)]) == EXIT_SUCCESS
        assert capsys.readouterr().out == "\\section{Section}\nSome \\emph{Markdown} text.\n"

    def test_output_file(self, section_json: Path, tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
        """Test writing to the -o destination."""
        target = tmp_path / "doc.tex"
        assert main([str(section_json), "-o", str(target)]) == EXIT_SUCCESS
        assert target.read_text(encoding="utf-8").startswith("\\section{Section}")
        assert capsys.readouterr().out == ""

    def test_full_document(self, titled_json: Path, capsys: pytest.CaptureFixture) -> None:
        """Test full mode with author and languages."""
        exit_code = main([str(titled_json), "--mode", "full", "--author", "Jane Doe", "--languages", "english"])
        out = capsys.readouterr().out
        assert exit_code == EXIT_SUCCESS
        assert out.startswith("\\documentclass{article}\n")
        assert "\\usepackage[english]{babel}" in out
        assert "\\title{My Title}\n\\author{Jane Doe}\n" in out
        assert "Body\\footnote{A note.\n}" in out
        assert out.endswith("\\end{document}\n")

    def test_chapter_mode(self, titled_json: Path, capsys: pytest.CaptureFixture) -> None:
        """Test chapter mode."""
        assert main([str(titled_json), "--mode", "chapter"]) == EXIT_SUCCESS
        assert capsys.readouterr().out.startswith("\\chapter{My Title}\n\n")

    def test_extension_flags(self, titled_json: Path, capsys: pytest.CaptureFixture) -> None:
        """Test that --no-* flags deactivate extensions."""
        assert main([str(titled_json), "--mode", "full", "--no-toc", "--no-footnotes"]) == EXIT_SUCCESS
        out = capsys.readouterr().out
        assert "\\maketitle" in out
        assert "\\tableofcontents" not in out
        assert "\\footnote" not in out

    def test_no_title_block_flag(self, titled_json: Path, capsys: pytest.CaptureFixture) -> None:
        """Test that --no-title-block drops the title."""
        assert main([str(titled_json), "--mode", "chapter", "--no-title-block"]) == EXIT_SUCCESS
        assert "\\chapter" not in capsys.readouterr().out

    def test_inline_math_marker_flag(self, tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
        """Test that a custom marker turns matching inline code into math."""
        source = _write_document(
            tmp_path / "math.json", DocumentBuilder().add_node(Paragraph(children=[Code(content="math:a+b")]))
        )
        assert main([str(source), "--inline-math-marker", "math:"]) == EXIT_SUCCESS
        assert capsys.readouterr().out == "$a+b$\n"

    def test_empty_inline_math_marker_disables_math(self, tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
        """Test that an empty marker leaves the default marker as inline code."""
        source = _write_document(
            tmp_path / "math.json", DocumentBuilder().add_node(Paragraph(children=[Code(content="$$ x")]))
        )
        assert main([str(source), "--inline-math-marker", ""]) == EXIT_SUCCESS
        output = capsys.readouterr().out
        assert output.startswith("\\lstinline")
        assert "$x$" not in output

    def test_stdin_input(
        self, section_json: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture
    ) -> None:
        """Test reading the tree from stdin."""
        monkeypatch.setattr("sys.stdin", io.StringIO(section_json.read_text(encoding="utf-8")))
        assert main(["-"]) == EXIT_SUCCESS
        assert capsys.readouterr().out.startswith("\\section{Section}")

    def test_delimiter_warning_logged(self, tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
        """Test that the missing delimiter is reported but not fatal."""
        source = _write_document(
            tmp_path / "code.json", DocumentBuilder().add_node(Paragraph(children=[Code(content=ALL_DELIMITERS)]))
        )
        assert main([str(source)]) == EXIT_SUCCESS
        captured = capsys.readouterr()
        assert "<RENDERING ERROR: no delimiter found>" in captured.out
        assert "No delimiter available" in captured.err

    def test_log_file(self, section_json: Path, tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
        """Test that --log-file receives log records."""
        log_file = tmp_path / "run.log"
        assert main([str(section_json), "--verbose", "--log-file", str(log_file)]) == EXIT_SUCCESS
        assert "Rendering Document to LaTeX" in log_file.read_text(encoding="utf-8")

    def test_version(self, capsys: pytest.CaptureFixture) -> None:
        """Test --version output."""
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0
        assert __version__ in capsys.readouterr().out


@pytest.mark.integration
@pytest.mark.cli
class TestCliExitCodes:
    """Tests for CLI failure exit codes."""

    def test_missing_input_file(self, tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
        """Test exit code 4 for an unreadable input."""
        assert main([str(tmp_path / "missing.json")]) == EXIT_FILE_ERROR
        assert "Error: Cannot read" in capsys.readouterr().err

    def test_invalid_json(self, tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
        """Test exit code 6 for malformed JSON."""
        source = tmp_path / "bad.json"
        source.write_text("{ not json", encoding="utf-8")
        assert main([str(source)]) == EXIT_PARSING_ERROR
        assert "Invalid AST JSON" in capsys.readouterr().err

    def test_non_document_root(self, tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
        """Test exit code 6 when the root is not a Document."""
        source = tmp_path / "para.json"
        source.write_text(json.dumps({"node_type": "Text", "content": "hi"}), encoding="utf-8")
        assert main([str(source)]) == EXIT_PARSING_ERROR
        assert "Top-level node must be a Document" in capsys.readouterr().err

    @pytest.mark.parametrize(
        "child, message",
        [
            (
                {"node_type": "Heading", "level": "2", "children": []},
                "Heading field 'level' must be integer, got string",
            ),
            (
                {"node_type": "Paragraph", "children": [{"node_type": "Text", "content": 5}]},
                "Text field 'content' must be string, got integer",
            ),
            ({"node_type": "Paragraph", "children": "abc"}, "Paragraph field 'children' must be array"),
        ],
    )
    def test_wrongly_typed_field(
        self, tmp_path: Path, capsys: pytest.CaptureFixture, child: dict, message: str
    ) -> None:
        """Test exit code 6 when a node field has the wrong JSON type."""
        source = tmp_path / "typed.json"
        source.write_text(json.dumps({"node_type": "Document", "children": [child]}), encoding="utf-8")
        assert main([str(source)]) == EXIT_PARSING_ERROR
        captured = capsys.readouterr()
        assert message in captured.err
        assert "Traceback" not in captured.err
        assert captured.out == ""

    def test_invalid_option_value(self, section_json: Path, capsys: pytest.CaptureFixture) -> None:
        """Test exit code 3 when options fail validation."""
        assert main([str(section_json), "--document-class", ""]) == EXIT_VALIDATION_ERROR
        assert "document_class" in capsys.readouterr().err

    def test_strict_delimiter_failure(self, tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
        """Test exit code 7 for a strict-mode rendering failure."""
        source = _write_document(
            tmp_path / "code.json", DocumentBuilder().add_node(Paragraph(children=[Code(content=ALL_DELIMITERS)]))
        )
        assert main([str(source), "--strict"]) == EXIT_RENDERING_ERROR
        assert capsys.readouterr().out == ""

    def test_unwritable_output(self, section_json: Path, tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
        """Test exit code 4 when the output path is a directory."""
        assert main([str(section_json), "-o", str(tmp_path)]) == EXIT_FILE_ERROR
        assert "Failed to write output file" in capsys.readouterr().err

    def test_invalid_choice_exits_through_argparse(self, section_json: Path) -> None:
        """Test that argparse rejects unknown modes."""
        with pytest.raises(SystemExit) as exc_info:
            main([str(section_json), "--mode", "book"])
        assert exc_info.value.code == 2


@pytest.mark.unit
@pytest.mark.cli
class TestCliHelpers:
    """Tests for parser construction and option building."""

    def test_defaults_match_options(self) -> None:
        """Test that parser defaults produce the default options."""
        options = build_options(create_parser().parse_args(["doc.json"]))
        assert options.document_mode == "fragment"
        assert options.extensions == frozenset({"footnotes", "title_block", "toc"})
        assert options.paragraph_indent is True
        assert options.strict_mode is False
        assert options.inline_math_marker == "$$ "

    def test_all_flags(self) -> None:
        """Test that every flag reaches the options."""
        parsed = create_parser().parse_args(
            [
                "doc.json",
                "--mode",
                "full",
                "--document-class",
                "report",
                "--author",
                "A",
                "--languages",
                "german",
                "--no-footnotes",
                "--no-paragraph-indent",
                "--escape-mode",
                "basic",
                "--soft-break",
                "space",
                "--inline-math-marker",
                "math:",
                "--strict",
            ]
        )
        options = build_options(parsed)
        assert options.document_mode == "full"
        assert options.document_class == "report"
        assert options.author == "A"
        assert options.babel_languages == "german"
        assert options.extensions == frozenset({"title_block", "toc"})
        assert options.paragraph_indent is False
        assert options.escape_mode == "basic"
        assert options.soft_break == "space"
        assert options.inline_math_marker == "math:"
        assert options.strict_mode is True

    @pytest.mark.parametrize(
        "exception,expected",
        [
            (InvalidOptionsError("latex", dict, list), EXIT_VALIDATION_ERROR),
            (OutputWriteError("out.tex"), EXIT_FILE_ERROR),
            (FileNotFoundError("x"), EXIT_FILE_ERROR),
            (ParsingError("bad"), EXIT_PARSING_ERROR),
            (DelimiterError("!"), EXIT_RENDERING_ERROR),
            (UnsupportedNodeError("Custom"), EXIT_RENDERING_ERROR),
            (RuntimeError("boom"), EXIT_ERROR),
        ],
    )
    def test_exit_code_mapping(self, exception: Exception, expected: int) -> None:
        """Test the exception to exit code mapping."""
        assert get_exit_code_for_exception(exception) == expected
