"""Installer exit-code classification."""

from pathlib import Path

from pkgwhisper.adapters.base import PreparedAdapter
from pkgwhisper.models.result import RunResult


def classify(exit_code: int, adapter: PreparedAdapter, log_path: Path | None = None) -> RunResult:
    """Turn an exit code into a structured result.

    Args:
        exit_code: Exit code of the installer process.
        adapter: Adapter whose exit-code table explains failures.
        log_path: Log file the installer was told to write, or None if no
            logging arguments were applied.

    Returns:
        RunResult. Successful results never carry a reason or log path;
        unknown failure codes carry no reason but are still failures.
    """
    if exit_code == 0:
        return RunResult(exit_code=0)

    return RunResult(
        exit_code=exit_code,
        reason=adapter.exit_codes.get(exit_code),
        log_path=log_path,
    )
