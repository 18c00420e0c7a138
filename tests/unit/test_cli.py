"""Test the slidec command line."""

import json

import pytest

from slide_compiler import IR_SCHEMA_VERSION, __version__
from slide_compiler.cli import main

SOURCE = "\\title{CLI}\n\\slide{First}{\\note{hello}\\algorithm{A}{x, y}}"


def test_compiles_to_json_on_stdout(tmp_path, capsys):
    path = tmp_path / "deck.tex"
    path.write_text(SOURCE, encoding="utf-8")

    assert main([str(path)]) == 0

    payload = json.loads(capsys.readouterr().out)
    assert payload["meta"] == {"title": "CLI"}
    assert payload["slides"][0]["id"] == "slide-first"
    assert payload["slides"][0]["content"][1] == {"type": "algorithm", "name": "A", "steps": ["x", "y"]}


def test_writes_output_file(tmp_path):
    path = tmp_path / "deck.tex"
    path.write_text(SOURCE, encoding="utf-8")
    out = tmp_path / "build" / "deck.json"

    assert main([str(path), "-o", str(out)]) == 0
    assert json.loads(out.read_text(encoding="utf-8"))["meta"]["title"] == "CLI"


def test_outline(tmp_path, capsys):
    path = tmp_path / "deck.tex"
    path.write_text(SOURCE, encoding="utf-8")

    assert main([str(path), "--outline"]) == 0
    out = capsys.readouterr().out
    assert "1. First [slide-first]" in out
    assert "algorithm: A (2 steps)" in out


def test_parse_error_exit_code(tmp_path, capsys):
    path = tmp_path / "bad.tex"
    path.write_text("\\slide{S}{\\unknown{x}}", encoding="utf-8")

    assert main([str(path)]) == 1
    err = capsys.readouterr().err
    assert "Parse Error" in err
    assert "Line 1, Column 11" in err


def test_validation_error_exit_code(tmp_path, capsys):
    path = tmp_path / "bad.json"
    path.write_text(json.dumps({"meta": {"title": "x"}, "slides": [{"type": "slide"}]}), encoding="utf-8")

    assert main([str(path)]) == 1
    err = capsys.readouterr().err
    assert "IR Validation Failed" in err
    assert "slides.0.id" in err


def test_strict_params_flag(tmp_path, capsys):
    path = tmp_path / "deck.tex"
    path.write_text("\\slide{S}{\\equation[animate=spin]{x}}", encoding="utf-8")

    assert main([str(path)]) == 0
    capsys.readouterr()
    assert main([str(path), "--strict-params"]) == 1


def test_unique_ids_flag(tmp_path):
    path = tmp_path / "deck.tex"
    path.write_text("\\slide{Same}{}\\slide{same}{}", encoding="utf-8")

    assert main([str(path)]) == 0
    assert main([str(path), "--unique-ids"]) == 1


def test_missing_file(tmp_path):
    assert main([str(tmp_path / "nope.tex")]) == 1


def test_version_reports_schema_version(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["--version"])
    assert excinfo.value.code == 0
    out = capsys.readouterr().out
    assert __version__ in out
    assert f"IR schema {IR_SCHEMA_VERSION}" in out


def test_directory_input_exits_cleanly(tmp_path):
    folder = tmp_path / "deck.tex"
    folder.mkdir()
    assert main([str(folder)]) == 1


def test_non_utf8_input_exits_cleanly(tmp_path):
    path = tmp_path / "deck.tex"
    path.write_bytes(b"\\title{\xff\xfe broken}")
    assert main([str(path)]) == 1
