"""Unit tests for installer process execution."""

import os
from unittest.mock import MagicMock, patch

import pytest
from pkgwhisper.core.errors import LaunchError
from pkgwhisper.core.runner import run_process
from pkgwhisper.utils.shell import SubprocessController


class TestRunProcess:
    """Tests for run_process()."""

    def test_returns_exit_code_unmodified(self) -> None:
        """The process exit code is passed through."""
        controller = MagicMock()
        controller.wait_for_exit.return_value = 3010

        assert run_process(controller, "msiexec", "/i setup.msi") == 3010
        controller.start.assert_called_once_with("msiexec", "/i setup.msi")
        controller.wait_for_exit.assert_called_once_with(controller.start.return_value)

    def test_missing_executable_is_launch_error(self) -> None:
        """Spawn failures surface as LaunchError, not an exit code."""
        controller = MagicMock()
        controller.start.side_effect = FileNotFoundError(2, "No such file", "setup.exe")

        with pytest.raises(LaunchError, match="setup.exe") as exc_info:
            run_process(controller, "setup.exe", "/S")

        assert isinstance(exc_info.value.__cause__, FileNotFoundError)
        controller.wait_for_exit.assert_not_called()

    def test_permission_denied_is_launch_error(self) -> None:
        """Permission errors also surface as LaunchError."""
        controller = MagicMock()
        controller.start.side_effect = PermissionError("denied")

        with pytest.raises(LaunchError):
            run_process(controller, "setup.exe", "")

    def test_does_not_retry(self) -> None:
        """A failing exit code is returned after a single start."""
        controller = MagicMock()
        controller.wait_for_exit.return_value = 1

        run_process(controller, "setup.exe", "/S")

        assert controller.start.call_count == 1

    def test_unsplittable_arguments_are_launch_error(self) -> None:
        """A command line that cannot be built surfaces as LaunchError."""
        controller = MagicMock()
        controller.start.side_effect = ValueError("No closing quotation")

        with pytest.raises(LaunchError, match="No closing quotation"):
            run_process(controller, "setup.exe", '/D="C:\\Program Files\\App')

        controller.wait_for_exit.assert_not_called()

    @pytest.mark.skipif(os.name == "nt", reason="Windows passes the command line verbatim")
    def test_unbalanced_quote_with_subprocess_controller(self) -> None:
        """The real controller's split error is not leaked as ValueError."""
        with patch("pkgwhisper.utils.shell.subprocess.Popen") as mock_popen:
            with pytest.raises(LaunchError) as exc_info:
                run_process(SubprocessController(), "setup.exe", '/D="C:\\Program Files\\App')

        assert isinstance(exc_info.value.__cause__, ValueError)
        mock_popen.assert_not_called()
