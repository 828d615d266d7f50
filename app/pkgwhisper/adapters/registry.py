"""Adapter registry keyed by install method."""

import logging
from collections.abc import Iterable, Iterator

from pkgwhisper.adapters.base import InstallerAdapter
from pkgwhisper.core.errors import AdapterConflictError, AdapterNotFoundError
from pkgwhisper.models.package import InstallMethod

logger = logging.getLogger(__name__)


class AdapterRegistry:
    """Holds at most one adapter per install method.

    Adapters are registered once at startup and never mutated afterwards.

    Example:
        >>> registry = AdapterRegistry([msi_adapter])
        >>> registry.find(InstallMethod.MSI) is msi_adapter
        True
    """

    def __init__(self, adapters: Iterable[InstallerAdapter] = ()) -> None:
        self._adapters: dict[InstallMethod, InstallerAdapter] = {}
        for adapter in adapters:
            self.register(adapter)

    def register(self, adapter: InstallerAdapter) -> None:
        """Register an adapter.

        Raises:
            AdapterConflictError: If the install method is already claimed.
        """
        if adapter.install_method in self._adapters:
            raise AdapterConflictError(adapter.install_method)
        self._adapters[adapter.install_method] = adapter
        logger.debug("Registered adapter for %s", adapter.install_method.value)

    def find(self, install_method: InstallMethod) -> InstallerAdapter:
        """Return the adapter for an install method.

        Raises:
            AdapterNotFoundError: If no adapter handles the install method.
        """
        try:
            return self._adapters[install_method]
        except KeyError:
            raise AdapterNotFoundError(install_method) from None

    def __contains__(self, install_method: object) -> bool:
        return install_method in self._adapters

    def __iter__(self) -> Iterator[InstallerAdapter]:
        return iter(self._adapters.values())

    def __len__(self) -> int:
        return len(self._adapters)
