"""Tests for CLI commands."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

import tokenbuild
from tokenbuild.cli import app


@pytest.fixture
def cli_runner() -> CliRunner:
    """Return a CLI test runner."""
    return CliRunner()


class TestBuildCommand:
    def test_build(self, cli_runner: CliRunner, light_dark_project: Path) -> None:
        result = cli_runner.invoke(app, ["build", "--project", str(light_dark_project)])

        assert result.exit_code == 0, result.output
        assert "Build completed!" in result.output
        assert (light_dark_project / "build/css/base/colors.css").exists()
        assert (light_dark_project / "build/css/semantic/colors.css").exists()

    def test_reports_skipped_files(self, cli_runner: CliRunner, light_dark_project: Path) -> None:
        (light_dark_project / "tokens/base/broken.json").write_text("{", encoding="utf-8")

        result = cli_runner.invoke(app, ["build", "-p", str(light_dark_project)])

        assert result.exit_code == 0, result.output
        assert "Skipped unreadable token file" in result.output

    def test_invalid_manifest(self, cli_runner: CliRunner, light_dark_project: Path) -> None:
        (light_dark_project / "tokens.toml").write_text("[project\n", encoding="utf-8")

        result = cli_runner.invoke(app, ["build", "-p", str(light_dark_project)])

        assert result.exit_code == 1
        assert "Error loading manifest" in result.output

    def test_badly_typed_manifest(self, cli_runner: CliRunner, light_dark_project: Path) -> None:
        (light_dark_project / "tokens.toml").write_text(
            "[[platforms]]\n[[platforms.files]]\ndestination = 'a.css'\nfilter = 'base'\n",
            encoding="utf-8",
        )

        result = cli_runner.invoke(app, ["build", "-p", str(light_dark_project)])

        assert result.exit_code == 1
        assert "must be a table" in result.output

    def test_explicit_config(self, cli_runner: CliRunner, light_dark_project: Path) -> None:
        config = light_dark_project / "alt.toml"
        config.write_text(
            """
[[platforms]]
name = "only"
build_path = "alt/"

[[platforms.files]]
destination = "all.css"
""",
            encoding="utf-8",
        )

        result = cli_runner.invoke(
            app, ["build", "-p", str(light_dark_project), "-c", str(config)]
        )

        assert result.exit_code == 0, result.output
        assert (light_dark_project / "alt/all.css").exists()
        assert not (light_dark_project / "build").exists()


class TestTokensCommand:
    def test_lists_tokens(self, cli_runner: CliRunner, light_dark_project: Path) -> None:
        result = cli_runner.invoke(app, ["tokens", "-p", str(light_dark_project)])

        assert result.exit_code == 0, result.output
        assert "--color-bg" in result.output
        assert "--surface" in result.output
        assert "5 token(s)" in result.output

    def test_filters(self, cli_runner: CliRunner, light_dark_project: Path) -> None:
        result = cli_runner.invoke(
            app,
            ["tokens", "-p", str(light_dark_project), "--layer", "base", "--scheme", "dark"],
        )

        assert result.exit_code == 0, result.output
        assert "--color-bg" in result.output
        assert "--surface" not in result.output
        assert "1 token(s)" in result.output

    def test_empty_project(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        result = cli_runner.invoke(app, ["tokens", "-p", str(tmp_path)])

        assert result.exit_code == 0
        assert "No tokens found." in result.output

    def test_markup_in_names_is_literal(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        (tmp_path / "tokens").mkdir()
        (tmp_path / "tokens/light.json").write_text(
            json.dumps({"x[b]": {"$value": "#fff"}}), encoding="utf-8"
        )

        result = cli_runner.invoke(app, ["tokens", "-p", str(tmp_path)])

        assert result.exit_code == 0, result.output
        assert "--x[b]" in result.output


class TestVersion:
    def test_version(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert f"tokenbuild version {tokenbuild.__version__}\n" in result.output
