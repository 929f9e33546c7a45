"""Tests for the mdhtml command-line interface."""

from __future__ import annotations

import json
import os
import subprocess
import sys
from pathlib import Path

import pytest

from mdhtml.cli import main


@pytest.fixture
def sample_md(tmp_path: Path) -> Path:
    path = tmp_path / "doc.md"
    path.write_text("# Hello\n\nSome **bold** text\n", encoding="utf-8")
    return path


class TestCliConversion:
    """Successful runs."""

    def test_no_arguments_prints_help(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main([]) == 0
        out = capsys.readouterr().out
        assert "usage: mdhtml" in out
        assert "--no-doctype" in out

    def test_default_output(self, sample_md: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert main([str(sample_md)]) == 0
        output = sample_md.with_suffix(".html")
        assert output.exists()
        assert "<h1>Hello</h1>" in output.read_text(encoding="utf-8")
        assert str(output) in capsys.readouterr().out

    def test_explicit_output_and_options(self, sample_md: Path, tmp_path: Path) -> None:
        target = tmp_path / "site" / "index.html"
        status = main(
            [str(sample_md), str(target), "--title", "My Doc", "--no-doctype", "--no-metadata"]
        )
        assert status == 0
        html = target.read_text(encoding="utf-8")
        assert "<title>My Doc</title>" in html
        assert "<!DOCTYPE" not in html
        assert "<meta" not in html

    def test_title_equals_form(self, sample_md: Path) -> None:
        assert main([str(sample_md), "--title=Eq"]) == 0
        assert "<title>Eq</title>" in sample_md.with_suffix(".html").read_text(encoding="utf-8")

    def test_fragment(self, sample_md: Path) -> None:
        assert main([str(sample_md), "--fragment"]) == 0
        html = sample_md.with_suffix(".html").read_text(encoding="utf-8")
        assert html == "<h1>Hello</h1>\n<p>Some <strong>bold</strong> text</p>"

    def test_ast_dump(self, sample_md: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert main([str(sample_md), "--ast"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert [block["kind"] for block in data] == ["Heading1", "Paragraph"]
        assert not sample_md.with_suffix(".html").exists()


class TestCliErrors:
    """Failures exit with status 1 and a message on stderr."""

    def test_missing_file(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert main([str(tmp_path / "missing.md")]) == 1
        err = capsys.readouterr().err
        assert err.startswith("error: Conversion failed: File not found")

    def test_wrong_extension(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        path = tmp_path / "doc.txt"
        path.write_text("# x", encoding="utf-8")
        assert main([str(path)]) == 1
        assert "Unsupported file format" in capsys.readouterr().err

    def test_ast_missing_file(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert main([str(tmp_path / "missing.md"), "--ast"]) == 1
        assert "File not found" in capsys.readouterr().err

    def test_ast_wrong_extension(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """--ast validates its input like a normal conversion."""
        path = tmp_path / "doc.txt"
        path.write_text("# x", encoding="utf-8")
        assert main([str(path), "--ast"]) == 1
        captured = capsys.readouterr()
        assert "Unsupported file format: .txt" in captured.err
        assert captured.out == ""


class TestModuleEntryPoint:
    """python -m mdhtml."""

    def test_runs_as_module(self, sample_md: Path) -> None:
        src = Path(__file__).resolve().parent.parent / "src"
        paths = [str(src), os.environ.get("PYTHONPATH", "")]
        env = {**os.environ, "PYTHONPATH": os.pathsep.join(p for p in paths if p)}
        proc = subprocess.run(
            [sys.executable, "-m", "mdhtml", str(sample_md), "--fragment"],
            capture_output=True,
            text=True,
            check=False,
            env=env,
        )
        assert proc.returncode == 0, proc.stderr
        assert sample_md.with_suffix(".html").exists()
