"""Tests for CLI commands."""

import json

import pytest
from click.testing import CliRunner


def test_version_command():
    from semantic_memory.cli import main

    runner = CliRunner()
    result = runner.invoke(main, ["version"])

    assert result.exit_code == 0
    assert "semantic-memory v" in result.output


def test_clusters_command():
    from semantic_memory.cli import main

    runner = CliRunner()
    result = runner.invoke(main, ["clusters"])

    assert result.exit_code == 0
    assert "branding" in result.output
    assert "embroidery_design" in result.output


def test_rules_command_filters_by_type():
    from semantic_memory.cli import main

    runner = CliRunner()
    result = runner.invoke(main, ["rules", "--type", "embroidery"])

    assert result.exit_code == 0
    assert "convert_to_dst" in result.output
    assert "vectorize" not in result.output


def test_rules_command_unknown_type():
    from semantic_memory.cli import main

    runner = CliRunner()
    result = runner.invoke(main, ["rules", "--type", "pottery"])

    assert result.exit_code == 0
    assert "No rules for type" in result.output


def test_modules_command_json():
    from semantic_memory.cli import main

    runner = CliRunner()
    result = runner.invoke(main, ["modules", "--json"])

    assert result.exit_code == 0
    assert '"name": "cluster_classifier"' in result.output
    assert '"available": true' in result.output


def test_analyze_command():
    from semantic_memory.cli import main

    runner = CliRunner()
    result = runner.invoke(main, ["analyze", "--text", "создай логотип для кофейни"])

    assert result.exit_code == 0
    assert "branding" in result.output
    assert "Next steps" in result.output


def test_analyze_command_json_with_context():
    from semantic_memory.cli import main

    runner = CliRunner()
    context = json.dumps({"previousCategory": "character_design"})
    result = runner.invoke(main, ["analyze", "-t", "что дальше", "-s", "cli", "-c", context, "--json"])

    assert result.exit_code == 0
    assert '"concept": "character_design"' in result.output
    assert '"session_id": "cli"' in result.output


def test_analyze_command_rejects_bad_context():
    from semantic_memory.cli import main

    runner = CliRunner()
    result = runner.invoke(main, ["analyze", "-t", "логотип", "-c", "[1, 2]"])

    assert result.exit_code != 0
    assert "JSON object" in result.output


def test_analyze_command_rejects_empty_text():
    from semantic_memory.cli import main

    runner = CliRunner()
    result = runner.invoke(main, ["analyze", "-t", "   "])

    assert result.exit_code == 1
    assert "Error" in result.output
