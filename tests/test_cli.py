"""
Tests for the command line interface (mock mode, no network).
"""

import pytest
from typer.testing import CliRunner

from nexus_scheduling import __version__
from nexus_scheduling.cli.app import app

runner = CliRunner()


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("timezone: UTC\ndefault_pathway_id: 1\n", encoding="utf-8")
    return str(path)


def test_slots_lists_mock_availability(config_file):
    result = runner.invoke(app, ["slots", "--mock", "--config", config_file])

    assert result.exit_code == 0
    assert "Available Time Slots" in result.output
    assert "slot(s) available" in result.output


def test_slots_for_empty_pathway(config_file):
    result = runner.invoke(app, ["slots", "--mock", "--pathway", "999", "--config", config_file])

    assert result.exit_code == 0
    assert "No available slots found" in result.output


def test_book_first_slot(config_file):
    result = runner.invoke(app, ["book", "disco-alice", "--slot", "1", "--mock", "--config", config_file])

    assert result.exit_code == 0
    assert "Booking confirmed" in result.output


def test_book_banned_student_fails(config_file):
    result = runner.invoke(app, ["book", "disco-bob", "--slot", "1", "--mock", "--config", config_file])

    assert result.exit_code == 1
    assert "not allowed to book" in result.output


def test_book_unknown_slot_number(config_file):
    result = runner.invoke(app, ["book", "disco-alice", "--slot", "999", "--mock", "--config", config_file])

    assert result.exit_code == 1
    assert "does not exist" in result.output


def test_list_ssms(config_file):
    result = runner.invoke(app, ["list-ssms", "--mock", "--config", config_file])

    assert result.exit_code == 0
    assert "Dana Reyes" in result.output


def test_missing_config_file(tmp_path):
    result = runner.invoke(app, ["slots", "--mock", "--config", str(tmp_path / "nope.yaml")])

    assert result.exit_code == 1
    assert "Config file not found" in result.output


def test_version():
    result = runner.invoke(app, ["version"])

    assert result.exit_code == 0
    assert __version__ in result.output
