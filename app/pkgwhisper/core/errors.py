"""Exception hierarchy for installer operations."""

from pathlib import Path

from pkgwhisper.models.package import InstallMethod


class InstallerError(Exception):
    """Base exception for installer operation errors."""


class AdapterNotFoundError(InstallerError):
    """Raised when no registered adapter handles an install method."""

    def __init__(self, install_method: InstallMethod) -> None:
        self.install_method = install_method
        super().__init__(f"No installer adapter registered for install method '{install_method.value}'")


class AdapterConflictError(InstallerError):
    """Raised when two adapters claim the same install method."""

    def __init__(self, install_method: InstallMethod) -> None:
        self.install_method = install_method
        super().__init__(f"An adapter for install method '{install_method.value}' is already registered")


class LaunchError(InstallerError):
    """Raised when the installer process cannot be started."""

    def __init__(self, executable: str, cause: Exception) -> None:
        self.executable = executable
        super().__init__(f"Failed to start installer '{executable}': {cause}")


class InstallerExecutionError(InstallerError):
    """Raised when the installer process exits with a non-zero code.

    Attributes:
        exit_code: Exit code of the installer process.
        package_id: Package the installer was run for.
        reason: Human-readable reason from the adapter's exit-code table.
        log_path: Installer log file, if logging was requested.
    """

    def __init__(
        self,
        exit_code: int,
        package_id: str,
        reason: str | None = None,
        log_path: Path | None = None,
    ) -> None:
        self.exit_code = exit_code
        self.package_id = package_id
        self.reason = reason
        self.log_path = log_path

        msg = f"Installer for '{package_id}' failed with exit code {exit_code}"
        if reason:
            msg = f"{msg}: {reason}"
        if log_path is not None:
            msg = f"{msg} (log: {log_path})"
        super().__init__(msg)


class LogDirectoryError(InstallerError):
    """Raised when the installer log directory cannot be created."""


class TransferError(InstallerError):
    """Raised when an installer cannot be transferred to the host."""


class IntegrityError(TransferError):
    """Raised when a transferred installer fails checksum verification."""
