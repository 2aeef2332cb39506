"""Shared test fixtures and configuration.

Provides infrastructure to isolate tests from real filesystem state.
"""

from __future__ import annotations

from unittest.mock import patch

import pytest

from pomotask_cli.config import reset_config_manager
from pomotask_cli.models.focus.clock import SecondClock
from pomotask_cli.models.focus.state import SnapshotGateway
from pomotask_cli.services.session_service import SessionController
from pomotask_cli.utils.logger import reset_logger

# ---------------------------------------------------------------------------
# Filesystem isolation
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def isolated_dirs(tmp_path):
    """Send config, data and log files into *tmp_path* for every test."""
    config_dir = str(tmp_path / "config")
    data_dir = str(tmp_path / "data")
    log_dir = str(tmp_path / "logs")

    reset_config_manager()
    reset_logger()
    with patch("pomotask_cli.config.user_config_dir", return_value=config_dir):
        with patch("platformdirs.user_data_dir", return_value=data_dir):
            with patch("pomotask_cli.utils.logger.user_log_dir", return_value=log_dir):
                yield tmp_path
    reset_config_manager()
    reset_logger()


# ---------------------------------------------------------------------------
# Clock / controller helpers
# ---------------------------------------------------------------------------


class FakeTime:
    """Manually advanced time source for SecondClock."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture()
def fake_time() -> FakeTime:
    return FakeTime()


@pytest.fixture()
def gateway(tmp_path) -> SnapshotGateway:
    return SnapshotGateway(tmp_path / "state")


@pytest.fixture()
def controller(gateway, fake_time, mocker) -> SessionController:
    """A controller with a fake clock and a mocked alert player."""
    alert = mocker.MagicMock()
    return SessionController(gateway, alert=alert, clock=SecondClock(fake_time))
