"""Unit tests for installer argument assembly."""

from pathlib import Path

from pkgwhisper.adapters.base import AdapterTarget, InstallerAdapter, PreparedAdapter
from pkgwhisper.core.arguments import build_arguments, logging_arguments, select_arguments
from pkgwhisper.core.interactivity import resolve_interactivity
from pkgwhisper.models.package import InstallerArgs, InstallMethod, InteractivityLevel

LOG_PATH = Path("/var/log/pkgwhisper/vlc.log")


class TestSelectArguments:
    """Tests for select_arguments()."""

    def test_adapter_tokens_precede_package_tokens(self, full_adapter: PreparedAdapter) -> None:
        """Adapter arguments come first for every level."""
        package_args = InstallerArgs(silent="--s", interactive="--i", passive="--p")

        assert select_arguments(InteractivityLevel.SILENT, package_args, full_adapter) == "/S --s"
        assert select_arguments(InteractivityLevel.PASSIVE, package_args, full_adapter) == "/P --p"
        assert select_arguments(InteractivityLevel.INTERACTIVE, package_args, full_adapter) == "/I --i"

    def test_without_package_args(self, full_adapter: PreparedAdapter) -> None:
        """Only adapter tokens are used when the package has no overrides."""
        assert select_arguments(InteractivityLevel.SILENT, None, full_adapter) == "/S"

    def test_only_package_args(self, interactive_only_adapter: PreparedAdapter) -> None:
        """Package tokens alone are trimmed."""
        result = select_arguments(InteractivityLevel.SILENT, InstallerArgs(silent="  /quiet  "), interactive_only_adapter)
        assert result == "/quiet"

    def test_nothing_declared_is_empty(self) -> None:
        """No templates produce an empty string."""
        adapter = InstallerAdapter(install_method=InstallMethod.NSIS).initialize(
            AdapterTarget(installer_path=Path("setup.exe"))
        )
        assert select_arguments(InteractivityLevel.INTERACTIVE, None, adapter) == ""


class TestLoggingArguments:
    """Tests for logging_arguments()."""

    def test_adapter_template(self, full_adapter: PreparedAdapter) -> None:
        """The log path is quoted into the adapter template."""
        assert logging_arguments(None, full_adapter, LOG_PATH) == f'/log "{LOG_PATH}"'

    def test_package_template_wins(self, full_adapter: PreparedAdapter) -> None:
        """A package logging template replaces the adapter's."""
        result = logging_arguments(InstallerArgs(log="--logfile={path}"), full_adapter, LOG_PATH)
        assert result == f'--logfile="{LOG_PATH}"'

    def test_no_template(self, interactive_only_adapter: PreparedAdapter) -> None:
        """No template means no logging arguments."""
        assert logging_arguments(InstallerArgs(), interactive_only_adapter, LOG_PATH) is None


class TestBuildArguments:
    """Tests for build_arguments()."""

    def test_appends_logging_arguments(self, full_adapter: PreparedAdapter) -> None:
        """Logging arguments are appended and the log path reported."""
        command = build_arguments(InteractivityLevel.SILENT, InstallerArgs(silent="--s"), full_adapter, LOG_PATH)

        assert command.arguments == f'/S --s /log "{LOG_PATH}"'
        assert command.log_path == LOG_PATH

    def test_no_log_path_without_template(self, interactive_only_adapter: PreparedAdapter) -> None:
        """Without a logging template no log path is reported."""
        command = build_arguments(InteractivityLevel.INTERACTIVE, None, interactive_only_adapter, LOG_PATH)

        assert command.arguments == "/I"
        assert command.log_path is None

    def test_silent_request_on_interactive_only_adapter(self, interactive_only_adapter: PreparedAdapter) -> None:
        """Silent on an interactive-only installer ends up with the interactive arguments."""
        package_args = InstallerArgs(interactive="--lang=en")

        level = resolve_interactivity(InteractivityLevel.SILENT, package_args, interactive_only_adapter)
        command = build_arguments(level, package_args, interactive_only_adapter, LOG_PATH)

        assert level == InteractivityLevel.INTERACTIVE
        assert command.arguments == "/I --lang=en"
