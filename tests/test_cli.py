"""Tests for the typomd CLI."""

import io
import json

import pytest
import yaml

from typomd.cli import main


def run_cli(args, monkeypatch, stdin=""):
    monkeypatch.setattr("sys.stdin", io.StringIO(stdin))
    with pytest.raises(SystemExit) as exc:
        main(args)
    return exc.value.code


def test_parse_json_from_file(tmp_path, monkeypatch, capsys):
    """Test parse dumps JSON for a file."""
    monkeypatch.chdir(tmp_path)
    src = tmp_path / "in.md"
    src.write_text("## Title\n\n1. one\n", encoding="utf-8")

    code = run_cli(["parse", str(src)], monkeypatch)
    assert code == 0
    data = json.loads(capsys.readouterr().out)
    assert [b["kind"] for b in data["blocks"]] == ["heading", "numbered"]
    assert data["blocks"][1]["marker"] == "1."


def test_parse_yaml_from_stdin(tmp_path, monkeypatch, capsys):
    """Test parse reads stdin and dumps YAML."""
    monkeypatch.chdir(tmp_path)
    code = run_cli(["parse", "-", "--format", "yaml"], monkeypatch, stdin="`x`")
    assert code == 0
    data = yaml.safe_load(capsys.readouterr().out)
    assert data["blocks"][0]["spans"] == [{"text": "x", "kind": "code"}]


def test_render_html_to_file(tmp_path, monkeypatch):
    """Test render writes HTML to --out."""
    monkeypatch.chdir(tmp_path)
    out = tmp_path / "out.html"
    code = run_cli(["render", "-", "--out", str(out)], monkeypatch, stdin="**hi**")
    assert code == 0
    assert out.read_text(encoding="utf-8") == "<p><strong>hi</strong></p>\n"


def test_render_uses_config_format(tmp_path, monkeypatch, capsys):
    """Test render falls back to render.format from typomd.toml."""
    monkeypatch.chdir(tmp_path)
    (tmp_path / "typomd.toml").write_text('[render]\nformat = "text"\n')
    code = run_cli(["render", "-"], monkeypatch, stdin="- a\n- b")
    assert code == 0
    assert capsys.readouterr().out == "• a\n• b\n"


def test_missing_input_file(tmp_path, monkeypatch, capsys):
    """Test a missing file exits 1 with an error on stderr."""
    monkeypatch.chdir(tmp_path)
    code = run_cli(["parse", str(tmp_path / "missing.md")], monkeypatch)
    assert code == 1
    assert "Error:" in capsys.readouterr().err


def test_bad_config(tmp_path, monkeypatch, capsys):
    """Test an invalid config exits 1."""
    monkeypatch.chdir(tmp_path)
    (tmp_path / "typomd.toml").write_text('[render]\nformat = "pdf"\n')
    code = run_cli(["render", "-"], monkeypatch, stdin="x")
    assert code == 1
    assert "render.format" in capsys.readouterr().err
