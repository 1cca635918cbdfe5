"""Tests for scripts/check_option_alerts.py exit codes."""

import runpy
import sys
from pathlib import Path

import pytest
from loguru import logger

SCRIPT = Path(__file__).parent.parent / "scripts" / "check_option_alerts.py"


@pytest.fixture
def run_script(monkeypatch):
    """Run the script's main() with the given arguments."""
    main = runpy.run_path(str(SCRIPT))["main"]

    def _run(*args):
        monkeypatch.setattr(sys, "argv", ["check_option_alerts.py", *args])
        try:
            return main()
        finally:
            logger.remove()

    return _run


def test_danger_alert_exit_code(run_script, tmp_path):
    positions = tmp_path / "positions.yaml"
    positions.write_text(
        "positions:\n"
        "  - ticker: AAPL\n"
        "    option_type: call\n"
        "    position: long\n"
        "    strike: 150\n"
        "    contracts: 2\n"
        "    expiration_date: 2025-01-17\n"
        "    spot_price: 160\n"
    )

    assert run_script(str(positions), "--as-of", "2025-01-10") == 1


def test_quiet_positions_exit_code(run_script, tmp_path):
    positions = tmp_path / "positions.yaml"
    positions.write_text(
        "positions:\n"
        "  - ticker: SPY\n"
        "    option_type: put\n"
        "    position: short\n"
        "    strike: 400\n"
        "    contracts: 1\n"
        "    expiration_date: 2025-06-20\n"
        "    spot_price: 450\n"
    )

    assert run_script(str(positions), "--as-of", "2025-01-10") == 0


def test_invalid_input_exit_code(run_script, tmp_path):
    positions = tmp_path / "positions.yaml"
    positions.write_text("positions:\n  - ticker: AAPL\n    option_type: call\n")

    assert run_script(str(positions)) == 2


def test_missing_file_exit_code(run_script, tmp_path):
    assert run_script(str(tmp_path / "missing.yaml")) == 2


@pytest.mark.parametrize(
    "content",
    [
        "positions:\n",
        "just some text\n",
        "- AAPL\n- MSFT\n",
        "positions: AAPL\n",
        "positions:\n"
        "  - ticker: AAPL\n"
        "    option_type: call\n"
        "    position: long\n"
        "    strike: [1]\n"
        "    contracts: 1\n"
        "    expiration_date: 2025-01-17\n",
    ],
    ids=["null-positions", "scalar-file", "list-of-scalars", "scalar-positions", "list-strike"],
)
def test_malformed_positions_exit_code(run_script, tmp_path, content):
    """Test malformed files report invalid input, not a danger alert."""
    positions = tmp_path / "positions.yaml"
    positions.write_text(content)

    assert run_script(str(positions), "--as-of", "2025-01-10") == 2


def test_bare_list_of_positions(run_script, tmp_path):
    positions = tmp_path / "positions.yaml"
    positions.write_text(
        "- ticker: AAPL\n"
        "  option_type: call\n"
        "  position: long\n"
        "  strike: 150\n"
        "  contracts: 1\n"
        "  expiration_date: 2025-01-12\n"
    )

    assert run_script(str(positions), "--as-of", "2025-01-10") == 1
