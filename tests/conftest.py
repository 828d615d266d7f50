"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from pathlib import Path
from unittest.mock import MagicMock

import pytest
from pkgwhisper.adapters.base import AdapterTarget, InstallerAdapter, PreparedAdapter
from pkgwhisper.adapters.registry import AdapterRegistry
from pkgwhisper.core.installer import InstallService
from pkgwhisper.models.package import InstallerCandidate, InstallMethod, PackageManifest


@pytest.fixture
def installer_file(tmp_path: Path) -> Path:
    """A fake installer binary on disk."""
    path = tmp_path / "source" / "setup.exe"
    path.parent.mkdir()
    path.write_bytes(b"MZ fake installer")
    return path


@pytest.fixture
def nsis_manifest() -> PackageManifest:
    """A minimal NSIS package manifest."""
    return PackageManifest(
        id="vlc",
        version="3.0.20",
        install_method=InstallMethod.NSIS,
        installers=[InstallerCandidate(location="C:/dl/vlc.exe", sha256="abc")],
    )


@pytest.fixture
def full_adapter() -> PreparedAdapter:
    """Adapter supporting every interactivity level and logging."""
    return InstallerAdapter(
        install_method=InstallMethod.CUSTOM,
        silent_args="/S",
        interactive_args="/I",
        passive_args="/P",
        log_args="/log {path}",
        exit_codes={1603: "fatal error during installation"},
    ).initialize(AdapterTarget(installer_path=Path("setup.exe")))


@pytest.fixture
def interactive_only_adapter() -> PreparedAdapter:
    """Adapter that only knows its interactive arguments."""
    return InstallerAdapter(
        install_method=InstallMethod.CUSTOM,
        interactive_args="/I",
    ).initialize(AdapterTarget(installer_path=Path("setup.exe")))


@pytest.fixture
def collaborators(tmp_path: Path) -> dict[str, MagicMock]:
    """Mocked collaborators for InstallService."""
    selector = MagicMock()
    selector.best_installer.side_effect = lambda candidates: candidates[0]

    transfer = MagicMock()
    transfer.fetch.return_value = tmp_path / "downloads" / "setup.exe"

    processes = MagicMock()
    processes.wait_for_exit.return_value = 0

    updates = MagicMock()
    updates.updates_for.return_value = []

    records = MagicMock()
    records.records.return_value = []
    records.key.return_value = "{PRODUCT-CODE}"

    matcher = MagicMock()
    matcher.match_for.return_value = []

    return {
        "selector": selector,
        "transfer": transfer,
        "processes": processes,
        "updates": updates,
        "unlocker": MagicMock(),
        "records": records,
        "matcher": matcher,
        "events": MagicMock(),
    }


@pytest.fixture
def make_service(tmp_path: Path, collaborators: dict[str, MagicMock]):
    """Factory building an InstallService from mocks and the given adapters."""

    def _make(
        install_adapters: list[InstallerAdapter] | None = None,
        uninstall_adapters: list[InstallerAdapter] | None = None,
    ) -> InstallService:
        return InstallService(
            **collaborators,
            install_adapters=AdapterRegistry(install_adapters or []),
            uninstall_adapters=AdapterRegistry(uninstall_adapters or []),
            download_dir=tmp_path / "downloads",
            log_dir=tmp_path / "logs",
        )

    return _make
