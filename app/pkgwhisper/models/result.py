"""Installer run outcome model."""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class RunResult:
    """Classified outcome of one installer process.

    Attributes:
        exit_code: Exit code reported by the installer process.
        reason: Human-readable failure reason from the adapter's table.
        log_path: Installer log file, only set on failure when logging was requested.
    """

    exit_code: int
    reason: str | None = None
    log_path: Path | None = None

    @property
    def success(self) -> bool:
        """Check if the installer exited cleanly."""
        return self.exit_code == 0

    @property
    def failed(self) -> bool:
        """Check if the installer failed."""
        return not self.success
