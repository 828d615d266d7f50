"""Collaborator interfaces consumed by the install service.

Concrete implementations live elsewhere (see :mod:`pkgwhisper.core.inventory`,
:mod:`pkgwhisper.core.transfer`, :mod:`pkgwhisper.utils.shell` and
:mod:`pkgwhisper.core.events`); tests substitute mocks.
"""

from pathlib import Path
from typing import Any, Protocol

from pkgwhisper.models.events import InstallerEvent
from pkgwhisper.models.package import InstallerCandidate, InstallMethod
from pkgwhisper.models.record import InstalledRecord, PriorInstallation


class InstallerSelector(Protocol):
    """Chooses the installer to use among a package's candidates."""

    def best_installer(self, candidates: list[InstallerCandidate]) -> InstallerCandidate:
        """Return the best candidate. Deterministic for the same input."""
        ...


class TransferService(Protocol):
    """Makes an installer available locally."""

    def fetch(self, location: str, destination_dir: Path, expected_hash: str | None) -> Path:
        """Transfer an installer and return its verified local path."""
        ...


class ProcessController(Protocol):
    """Starts external processes and waits for them."""

    def start(self, path: str, arguments: str) -> Any:
        """Start a process and return an opaque handle."""
        ...

    def wait_for_exit(self, handle: Any) -> int:
        """Block until the process exits and return its exit code."""
        ...


class PriorInstallationLookup(Protocol):
    """Finds earlier installations of a package."""

    def updates_for(self, package_id: str) -> list[PriorInstallation]:
        """Return prior installations of a package, possibly empty."""
        ...


class Unlocker(Protocol):
    """Releases file locks held on an installation directory."""

    def unlock(self, path: Path, install_method: InstallMethod) -> None:
        """Unlock a directory. Safe to call on an already-unlocked path."""
        ...


class InstalledRecordSource(Protocol):
    """Enumerates installed software."""

    def records(self) -> list[InstalledRecord]:
        """Return all installed records."""
        ...

    def key(self, record_id: str) -> str:
        """Return the opaque uninstall key for a record."""
        ...


class RecordMatcher(Protocol):
    """Matches a caller-supplied package id against installed records."""

    def match_for(self, records: list[InstalledRecord], target_id: str) -> list[InstalledRecord]:
        """Return the records matching the target, possibly empty or several."""
        ...


class EventSink(Protocol):
    """Fire-and-forget destination for lifecycle events."""

    def publish(self, event: InstallerEvent) -> None:
        """Publish an event."""
        ...
