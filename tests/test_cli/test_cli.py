"""Tests for the spellbook CLI commands."""
from __future__ import annotations

import json
from pathlib import Path

from click.testing import CliRunner

from spellbook import __version__
from spellbook.cli.main import cli


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


class TestCLIGroup:
    def test_cli_group_help(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "parse and check compact styling spells" in result.output

    def test_cli_lists_commands(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["--help"])
        assert "parse" in result.output
        assert "check" in result.output

    def test_version(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output


# ---------------------------------------------------------------------------
# parse command
# ---------------------------------------------------------------------------


class TestParseCommand:
    def test_parse_text(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["parse", "md__hover,active:color=red"])
        assert result.exit_code == 0
        assert "breakpoint md" in result.output
        assert "Effect:    hover, active" in result.output
        assert "Component: color" in result.output
        assert "Value:     red" in result.output

    def test_parse_variables(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["parse", "btn=8px_grey"])
        assert result.exit_code == 0
        assert "Variables: 8px, grey" in result.output

    def test_parse_json(self) -> None:
        runner = CliRunner()
        result = runner.invoke(
            cli, ["parse", "(width>=768px)__br=0.375rem", "--format", "json"]
        )
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["area"] == {"media_query": "width>=768px"}
        assert data["target"] == {"css_value": "0.375rem"}

    def test_parse_error(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["parse", "md__color"])
        assert result.exit_code == 1
        assert "MissingAssignmentError" in result.output


# ---------------------------------------------------------------------------
# check command
# ---------------------------------------------------------------------------


class TestCheckCommand:
    def test_check_clean(self, tmp_path: Path) -> None:
        sheet = tmp_path / "card.spells"
        sheet.write_text("# card\nborder-radius=8px\nmd__hover:color=red\n")
        runner = CliRunner()
        result = runner.invoke(cli, ["check", str(sheet)])
        assert result.exit_code == 0
        assert "OK: card.spells is valid (2 spell(s), 0 diagnostics)" in result.output

    def test_check_errors(self, tmp_path: Path) -> None:
        sheet = tmp_path / "bad.spells"
        sheet.write_text("color=red\nxs__color=blue\n")
        runner = CliRunner()
        result = runner.invoke(cli, ["check", str(sheet)])
        assert result.exit_code == 1
        assert "ERROR [line 2]" in result.output
        assert "Summary: 1 error(s), 0 warning(s), 0 info" in result.output

    def test_warnings_pass_unless_strict(self, tmp_path: Path) -> None:
        sheet = tmp_path / "dup.spells"
        sheet.write_text("color=red\ncolor=red\n")
        runner = CliRunner()
        result = runner.invoke(cli, ["check", str(sheet)])
        assert result.exit_code == 0
        assert "WARNING [line 2]" in result.output

        result = runner.invoke(cli, ["check", str(sheet), "--strict"])
        assert result.exit_code == 1

    def test_check_json(self, tmp_path: Path) -> None:
        sheet = tmp_path / "bad.spells"
        sheet.write_text("color=red\nbroken\n")
        runner = CliRunner()
        result = runner.invoke(cli, ["check", str(sheet), "--format", "json"])
        assert result.exit_code == 1
        data = json.loads(result.output)
        assert data["spells"] == 1
        assert data["diagnostics"][0]["rule"] == "parse"
        assert data["diagnostics"][0]["line"] == 2

    def test_check_nonexistent_file(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["check", "/nonexistent/file.spells"])
        assert result.exit_code != 0

    def test_log_level_option(self, tmp_path: Path) -> None:
        sheet = tmp_path / "card.spells"
        sheet.write_text("color=red\n")
        runner = CliRunner()
        result = runner.invoke(cli, ["--log-level", "debug", "check", str(sheet)])
        assert result.exit_code == 0
