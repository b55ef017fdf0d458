"""Tests for CLI commands."""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from locc.cli import _CONFIG_TEMPLATE, main


@pytest.fixture
def project(tmp_path):
    (tmp_path / "app.py").write_text("# app\nx = 1\n\n")
    (tmp_path / "lib.c").write_text("int f(void); /* decl */\n")
    (tmp_path / "build").mkdir()
    (tmp_path / "build" / "gen.c").write_text("int g;\n")
    return tmp_path


# ── count ──


class TestCount:
    def test_json_report(self, project):
        runner = CliRunner()
        result = runner.invoke(main, ["count", str(project), "-f", "json", "--project-name", "demo"])
        assert result.exit_code == 0, result.output
        doc = json.loads(result.output)
        assert doc["projectName"] == "demo"
        assert doc["numFiles"] == 3
        assert doc["codeLines"] == 3
        assert [f["pathname"] for f in doc["files"]] == ["app.py", "build/gen.c", "lib.c"]

    def test_exclude(self, project):
        runner = CliRunner()
        result = runner.invoke(main, ["count", str(project), "-x", "build", "-f", "JSON"])
        assert result.exit_code == 0, result.output
        assert json.loads(result.output)["numFiles"] == 2

    def test_config_file(self, project, tmp_path_factory):
        config = tmp_path_factory.mktemp("cfg") / "locc.json"
        config.write_text(json.dumps({"include": ["**/*.py"], "formats": ["csv"]}))
        runner = CliRunner()
        result = runner.invoke(main, ["count", str(project), "-c", str(config)])
        assert result.exit_code == 0, result.output
        assert "ALL,All languages,1,3,1,1,1" in result.output

    def test_console_default(self, project):
        runner = CliRunner()
        result = runner.invoke(main, ["count", str(project)])
        assert result.exit_code == 0, result.output
        assert "Python" in result.output
        assert "Total" in result.output

    def test_unknown_language(self, project):
        runner = CliRunner()
        result = runner.invoke(main, ["count", str(project), "-l", "klingon"])
        assert result.exit_code == 1
        assert "Unknown language 'klingon'" in result.output

    def test_forced_language(self, project):
        runner = CliRunner()
        result = runner.invoke(main, ["count", str(project / "lib.c"), "-l", "text", "-f", "json"])
        assert result.exit_code == 0, result.output
        doc = json.loads(result.output)
        assert doc["files"][0]["language"] == "text"
        assert doc["commentLines"] == 0

    def test_invalid_format(self, project):
        runner = CliRunner()
        result = runner.invoke(main, ["count", str(project), "-f", "pdf"])
        assert result.exit_code == 2

    def test_invalid_config(self, project, tmp_path_factory):
        config = tmp_path_factory.mktemp("cfg") / "locc.json"
        config.write_text('{"workers": 0}')
        runner = CliRunner()
        result = runner.invoke(main, ["count", str(project), "-c", str(config)])
        assert result.exit_code == 1
        assert "Invalid config file" in result.output


# ── languages / detect / init-config ──


class TestLanguages:
    def test_lists_languages(self):
        runner = CliRunner()
        result = runner.invoke(main, ["languages"])
        assert result.exit_code == 0
        assert "python" in result.output
        assert ".rs" in result.output


class TestDetect:
    def test_detect(self, tmp_path):
        script = tmp_path / "tool"
        script.write_text("#!/usr/bin/env python3\nprint(1)\n")
        notes = tmp_path / "notes"
        notes.write_text("hello\n")
        runner = CliRunner()
        result = runner.invoke(main, ["detect", str(script), str(notes)])
        assert result.exit_code == 0
        assert f"{script}: python" in result.output
        assert f"{notes}: unknown" in result.output


class TestInitConfig:
    def test_writes_template(self, tmp_path):
        output = tmp_path / "locc.json"
        runner = CliRunner()
        result = runner.invoke(main, ["init-config", "-o", str(output)])
        assert result.exit_code == 0
        assert json.loads(output.read_text()) == _CONFIG_TEMPLATE
        assert "Config template written to" in result.output
