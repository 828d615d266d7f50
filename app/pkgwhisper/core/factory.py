"""Wiring of the default collaborators into an install service."""

from pkgwhisper.adapters.builtin import create_install_registry, create_uninstall_registry
from pkgwhisper.core.config import AppConfig
from pkgwhisper.core.events import EventHub
from pkgwhisper.core.installer import InstallService
from pkgwhisper.core.inventory import (
    InventoryRecordSource,
    InventoryUpdateLookup,
    NameRecordMatcher,
    NullUnlocker,
)
from pkgwhisper.core.selection import FirstInstallerSelector
from pkgwhisper.core.transfer import LocalTransferService
from pkgwhisper.utils.shell import SubprocessController


def create_install_service(config: AppConfig, events: EventHub | None = None) -> InstallService:
    """Build an InstallService from configuration.

    Args:
        config: Application configuration.
        events: Event hub to publish lifecycle events to. A private hub
            is created when omitted.

    Returns:
        Ready-to-use InstallService.

    Raises:
        AdapterConflictError: If a configured adapter claims a built-in install method.
    """
    records = InventoryRecordSource(config.effective_inventory)

    return InstallService(
        selector=FirstInstallerSelector(),
        transfer=LocalTransferService(),
        processes=SubprocessController(),
        updates=InventoryUpdateLookup(records),
        unlocker=NullUnlocker(),
        records=records,
        matcher=NameRecordMatcher(),
        events=events or EventHub(),
        install_adapters=create_install_registry(config.extra_install_adapters()),
        uninstall_adapters=create_uninstall_registry(config.extra_uninstall_adapters()),
        download_dir=config.effective_download_dir,
        log_dir=config.effective_log_dir,
    )
