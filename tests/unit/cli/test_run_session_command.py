"""Unit tests for the run-session CLI command."""

from __future__ import annotations

import pytest

from cli.main import main
from tests.fixture_paths import fixture_path


def test_run_session_prints_step_output(capsys: pytest.CaptureFixture[str]) -> None:
    """Each step output line should be printed in order."""
    exit_code = main(["run-session", str(fixture_path("session/valid_session.yaml"))])

    lines = capsys.readouterr().out.splitlines()
    assert exit_code == 0
    assert lines[0] == "loaded 4 products from parts_full.csv"
    assert lines[-2] == "UPDATE FIL-001"


def test_run_session_invalid_script_exits_with_error(
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Schema errors should be reported on stderr with exit code 1."""
    exit_code = main(["run-session", str(fixture_path("session/invalid_command.yaml"))])

    assert exit_code == 1
    assert "Unsupported command 'delete'" in capsys.readouterr().err
