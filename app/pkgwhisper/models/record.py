"""Installed-software record models.

Records are produced by an external enumeration source and are
read-only to the orchestrator.
"""

from dataclasses import dataclass
from pathlib import Path

from pkgwhisper.models.package import InstallMethod


@dataclass(frozen=True, slots=True)
class InstalledRecord:
    """A piece of software currently installed on the host.

    Attributes:
        record_id: Source-specific identifier, used to look up the uninstall key.
        display_name: Name shown to the user.
        install_method: Installer technology that produced the installation.
        display_version: Installed version, if known.
        installation_path: Installation directory, if known.
        package_id: Package id the record belongs to, if known.
    """

    record_id: str
    display_name: str
    install_method: InstallMethod
    display_version: str | None = None
    installation_path: Path | None = None
    package_id: str | None = None

    def __post_init__(self) -> None:
        """Validate record data after initialization."""
        if not self.record_id:
            msg = "Record id cannot be empty"
            raise ValueError(msg)

    def __str__(self) -> str:
        if self.display_version:
            return f"{self.display_name} {self.display_version}"
        return self.display_name


@dataclass(frozen=True, slots=True)
class PriorInstallation:
    """An earlier installation of a package that may hold file locks."""

    installation_path: Path | None = None
