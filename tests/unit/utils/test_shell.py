"""Unit tests for process spawning utilities."""

import subprocess
from unittest.mock import MagicMock, patch

import pytest
from pkgwhisper.utils.shell import SubprocessController, build_command


class TestBuildCommand:
    """Tests for build_command()."""

    def test_posix_splits_arguments(self) -> None:
        """Quoted arguments stay together on POSIX."""
        with patch("pkgwhisper.utils.shell.os.name", "posix"):
            command = build_command("msiexec", '/i "/tmp/my app.msi" /qn')

        assert command == ["msiexec", "/i", "/tmp/my app.msi", "/qn"]

    def test_posix_empty_arguments(self) -> None:
        """No arguments gives just the executable."""
        with patch("pkgwhisper.utils.shell.os.name", "posix"):
            assert build_command("setup.exe", "") == ["setup.exe"]

    def test_windows_passes_command_line(self) -> None:
        """Windows gets a single command line string."""
        with patch("pkgwhisper.utils.shell.os.name", "nt"):
            command = build_command("C:\\dl\\setup.exe", "/S /D=C:\\Apps")

        assert command == '"C:\\dl\\setup.exe" /S /D=C:\\Apps'


class TestSubprocessController:
    """Tests for SubprocessController class."""

    def test_start_and_wait(self) -> None:
        """start() spawns with Popen and wait_for_exit() returns its code."""
        controller = SubprocessController()
        process = MagicMock(spec=subprocess.Popen)
        process.wait.return_value = 1603

        with (
            patch("pkgwhisper.utils.shell.os.name", "posix"),
            patch("pkgwhisper.utils.shell.subprocess.Popen", return_value=process) as mock_popen,
        ):
            handle = controller.start("setup.exe", "/S")

        mock_popen.assert_called_once_with(["setup.exe", "/S"])
        assert controller.wait_for_exit(handle) == 1603

    def test_start_missing_executable(self) -> None:
        """A missing executable raises FileNotFoundError."""
        with (
            patch("pkgwhisper.utils.shell.os.name", "posix"),
            pytest.raises(FileNotFoundError),
        ):
            SubprocessController().start("/nonexistent/pkgwhisper-setup.exe", "/S")
