"""Tests for the target command runner (infra/command_runner.py).

``subprocess.run`` is mocked except for the smoke tests that launch
the current Python interpreter or a name that cannot exist.
"""

from __future__ import annotations

import subprocess
import sys
from unittest.mock import MagicMock, patch

import pytest

from timequiz.exceptions import TargetCommandError
from timequiz.infra.command_runner import run_target_command


def _completed(returncode: int) -> subprocess.CompletedProcess[bytes]:
    return subprocess.CompletedProcess(args=[], returncode=returncode)


# ---------------------------------------------------------------------------
# No-op path
# ---------------------------------------------------------------------------

class TestNoCommand:
    @patch("timequiz.infra.command_runner.subprocess.run")
    def test_empty_argv_spawns_nothing(self, mock_run: MagicMock) -> None:
        assert run_target_command([]) is None
        mock_run.assert_not_called()


# ---------------------------------------------------------------------------
# Spawning
# ---------------------------------------------------------------------------

class TestSpawn:
    @patch("timequiz.infra.command_runner.subprocess.run")
    def test_passes_arguments_verbatim(self, mock_run: MagicMock) -> None:
        mock_run.return_value = _completed(0)

        assert run_target_command(["echo", "hi"]) == 0
        mock_run.assert_called_once_with(["echo", "hi"], check=False)

    @patch("timequiz.infra.command_runner.subprocess.run")
    def test_does_not_capture_streams(self, mock_run: MagicMock) -> None:
        mock_run.return_value = _completed(0)
        run_target_command(["ls", "-la"])

        _args, kwargs = mock_run.call_args
        assert "stdout" not in kwargs
        assert "stderr" not in kwargs
        assert "stdin" not in kwargs
        assert "shell" not in kwargs

    @patch("timequiz.infra.command_runner.subprocess.run")
    def test_returns_child_status(self, mock_run: MagicMock) -> None:
        mock_run.return_value = _completed(5)
        assert run_target_command(["false"]) == 5

    @patch("timequiz.infra.command_runner.subprocess.run")
    def test_signal_maps_to_128_plus_n(self, mock_run: MagicMock) -> None:
        mock_run.return_value = _completed(-9)
        assert run_target_command(["sleep", "100"]) == 137

    def test_real_child_exit_status(self) -> None:
        code = run_target_command([sys.executable, "-c", "import sys; sys.exit(3)"])
        assert code == 3


# ---------------------------------------------------------------------------
# Launch failures
# ---------------------------------------------------------------------------

class TestLaunchFailure:
    def test_missing_program(self) -> None:
        with pytest.raises(TargetCommandError, match="Cannot start") as exc_info:
            run_target_command(["timequiz-no-such-program-xyz"])
        assert exc_info.value.hint is not None
        assert "PATH" in exc_info.value.hint

    @patch("timequiz.infra.command_runner.shutil.which", return_value="/usr/bin/tool")
    @patch("timequiz.infra.command_runner.subprocess.run")
    def test_permission_denied(self, mock_run: MagicMock, _mock_which: MagicMock) -> None:
        mock_run.side_effect = PermissionError(13, "Permission denied")

        with pytest.raises(TargetCommandError, match="Permission denied") as exc_info:
            run_target_command(["tool"])
        assert exc_info.value.hint is not None
        assert "executable" in exc_info.value.hint
        assert isinstance(exc_info.value.__cause__, PermissionError)
