"""Tests for the prayerwall command line interface."""

import pytest
from click.testing import CliRunner

from prayerwall.cli import main


@pytest.fixture
def run(tmp_path):
    runner = CliRunner()
    config = str(tmp_path / "config.yaml")

    def _run(*args):
        return runner.invoke(main, ["--config", config, *args])

    return _run


def test_check_clean(run):
    result = run("check", "Please pray for my grandmother's recovery")
    assert result.exit_code == 0
    assert "Clean" in result.output


def test_check_rejected(run):
    result = run("check", "this is fucking terrible pray for me")
    assert result.exit_code == 1
    assert "respectful" in result.output
    assert "profanity" in result.output


def test_quick(run):
    assert run("quick", "Please pray for us").exit_code == 0
    result = run("quick", "oh damn")
    assert result.exit_code == 1
    assert "respectful" in result.output


def test_validate_length_override(run):
    result = run("validate", "Please pray for my family", "--max-length", "10")
    assert result.exit_code == 1
    assert "no more than 10 characters" in result.output
    assert run("validate", "Please pray for my family").exit_code == 0


def test_zip_and_user_id(run):
    assert run("zip", "12345").exit_code == 0
    assert run("zip", "1234").exit_code == 1
    assert run("user-id", "BraveEagle42").exit_code == 0
    assert run("user-id", "ab").exit_code == 1


def test_stats(run):
    result = run("stats")
    assert result.exit_code == 0
    assert "500" in result.output


def test_batch(run, tmp_path):
    requests = tmp_path / "requests.txt"
    requests.write_text(
        "Please pray for my grandmother's recovery\n"
        "\n"
        "help\n"
        "check out www.example.com for prayer help\n"
    )
    result = run("batch", str(requests))
    assert result.exit_code == 0
    assert "1 clean, 2 rejected" in result.output


def test_bad_config(tmp_path):
    config = tmp_path / "bad.yaml"
    config.write_text("moderation:\n  strictness: paranoid\n")
    result = CliRunner().invoke(main, ["--config", str(config), "stats"])
    assert result.exit_code == 2
