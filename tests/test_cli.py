"""Tests for the CLI interface."""

import json
from pathlib import Path
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from shorthand.cli import app, parse_attribute
from shorthand.config import Settings
from shorthand.formatting.escaping import get_caret_placeholder


runner = CliRunner()


class TestParseAttribute:
    """Tests for name=value parsing."""

    def test_simple_pair(self):
        """Test a plain name=value pair."""
        attribute = parse_attribute("href=#top")

        assert attribute.name == "href"
        assert attribute.value == "#top"

    def test_value_may_contain_equals(self):
        """Test that only the first '=' separates name and value."""
        assert parse_attribute("data-q=a=b").value == "a=b"

    def test_empty_value(self):
        """Test a name with an empty value."""
        assert parse_attribute("disabled=").value == ""

    @pytest.mark.parametrize("raw", ["novalue", "=x", " =x"])
    def test_malformed(self, raw: str):
        """Test pairs without a name or separator."""
        with pytest.raises(ValueError, match="Expected name=value"):
            parse_attribute(raw)


class TestCLI:
    """Tests for CLI commands."""

    def test_version_flag(self):
        """Test --version flag."""
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert "Shorthand" in result.stdout

    def test_help_flag(self):
        """Test --help flag."""
        result = runner.invoke(app, ["--help"])

        assert result.exit_code == 0
        assert "Resolve NAME" in result.stdout

    def test_resolve_tag_as_json(self, tmp_resources_file: Path):
        """Test resolving a tag element to JSON."""
        result = runner.invoke(
            app,
            ["btn", "-r", str(tmp_resources_file), "-a", "class=primary", "--json"],
        )

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["name"] == "button"
        assert data["real_name"] == "btn"
        assert {"name": "class", "value": "btn primary"} in data["attributes"]
        assert data["value"] is None

    def test_resolve_snippet_as_json(self, tmp_resources_file: Path):
        """Test resolving a snippet element to JSON."""
        result = runner.invoke(
            app,
            ["doctype", "--snippet", "-r", str(tmp_resources_file), "--json"],
        )

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["value"] == "<!DOCTYPE html>"
        assert data["attributes"][0] == {"name": "id", "value": get_caret_placeholder()}

    def test_count_and_text(self, tmp_resources_file: Path):
        """Test node count and text options."""
        result = runner.invoke(
            app,
            ["li", "-r", str(tmp_resources_file), "-c", "3", "-t", "item", "--json"],
        )

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["count"] == 3
        assert data["is_repeating"] is True
        assert data["content"] == "item"

    def test_syntax_option(self, tmp_resources_file: Path):
        """Test resolving against another syntax."""
        result = runner.invoke(
            app, ["tm", "-s", "xsl", "-r", str(tmp_resources_file), "--json"]
        )

        assert result.exit_code == 0
        assert json.loads(result.stdout)["name"] == "xsl:template"

    def test_tree_output(self, tmp_resources_file: Path):
        """Test the default rich tree output."""
        result = runner.invoke(app, ["bq", "-r", str(tmp_resources_file)])

        assert result.exit_code == 0
        assert "blockquote" in result.stdout
        assert "(bq)" in result.stdout

    def test_without_resources(self):
        """Test that names resolve to themselves without a resource file."""
        with patch("shorthand.cli.get_settings", return_value=Settings()):
            result = runner.invoke(app, ["section", "--json"])

        assert result.exit_code == 0
        assert json.loads(result.stdout)["name"] == "section"

    def test_missing_resource_file(self, tmp_path: Path):
        """Test error when the resource file doesn't exist."""
        result = runner.invoke(app, ["a", "-r", str(tmp_path / "missing.json")])

        assert result.exit_code == 1
        assert "not found" in result.stdout

    def test_unreadable_resource_file(self, tmp_path: Path):
        """Test error when the resource path is a directory."""
        result = runner.invoke(app, ["a", "-r", str(tmp_path)])

        assert result.exit_code == 1
        assert result.exception is None or isinstance(result.exception, SystemExit)
        assert "Cannot read resource file" in result.stdout

    def test_malformed_attribute(self, tmp_resources_file: Path):
        """Test error for an attribute without a value."""
        result = runner.invoke(
            app, ["a", "-r", str(tmp_resources_file), "-a", "novalue"]
        )

        assert result.exit_code == 1
        assert "Expected name=value" in result.stdout
