"""Installer adapters ("whisperers") for each installer technology.

This module exports the adapter record type, the registry and the
built-in adapter sets.
"""

from pkgwhisper.adapters.base import (
    AdapterTarget,
    InstallerAdapter,
    PreparedAdapter,
    fixed,
    from_installer,
    from_key,
    split_uninstall_string,
)
from pkgwhisper.adapters.builtin import (
    create_install_registry,
    create_uninstall_registry,
    install_adapters,
    uninstall_adapters,
)
from pkgwhisper.adapters.registry import AdapterRegistry

__all__ = [
    "AdapterRegistry",
    "AdapterTarget",
    "InstallerAdapter",
    "PreparedAdapter",
    "create_install_registry",
    "create_uninstall_registry",
    "fixed",
    "from_installer",
    "from_key",
    "install_adapters",
    "split_uninstall_string",
    "uninstall_adapters",
]
