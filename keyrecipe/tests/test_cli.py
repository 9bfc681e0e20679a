"""
Tests for the keyrecipe command line.
"""

import json

from typer.testing import CliRunner

from cli.main import app

runner = CliRunner()


def test_resolve_json_operator():
    result = runner.invoke(
        app, ["resolve", "--pre", "d", "--operator-pre", "2w", "--operator-post", "2w", "--json"]
    )

    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert data["keys"] == ["d", "2", "w"]
    assert data["count"] == 1
    assert data["description"] == "d 2 w"


def test_resolve_json_count_and_record():
    result = runner.invoke(app, ["resolve", "--pre", "3w", "--json", "--show-record"])

    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert data["count"] == 3
    assert data["record"]["keys-count"] == 3
    assert data["record"]["keys-pre"] == ["3", "w"]


def test_resolve_named_keys():
    result = runner.invoke(app, ["resolve", "--pre", "C-a <escape>", "--json"])

    assert result.exit_code == 0
    assert json.loads(result.stdout)["keys"] == ["C-a", "<escape>"]


def test_resolve_table_output():
    result = runner.invoke(app, ["resolve", "--pre", "d", "--operator-pre", "t", "--operator-post", "t"])

    assert result.exit_code == 0
    assert "d t t" in result.stdout


def test_version():
    result = runner.invoke(app, ["version"])

    assert result.exit_code == 0
    assert "keyrecipe CLI" in result.stdout
