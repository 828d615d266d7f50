"""Install and uninstall orchestration.

:class:`InstallService` runs one install or uninstall operation as a
single sequential pipeline: locate and transfer the installer (install
only), release locks held by earlier installations, select and
initialize the adapter, negotiate interactivity, build arguments, run
the installer and classify its exit code.
"""

import logging
from pathlib import Path

from pkgwhisper.adapters.base import AdapterTarget, PreparedAdapter
from pkgwhisper.adapters.registry import AdapterRegistry
from pkgwhisper.core.arguments import build_arguments
from pkgwhisper.core.errors import InstallerExecutionError, LogDirectoryError
from pkgwhisper.core.interactivity import resolve_interactivity
from pkgwhisper.core.interfaces import (
    EventSink,
    InstalledRecordSource,
    InstallerSelector,
    PriorInstallationLookup,
    ProcessController,
    RecordMatcher,
    TransferService,
    Unlocker,
)
from pkgwhisper.core.outcome import classify
from pkgwhisper.core.paths import ensure_dir, get_installer_log_path
from pkgwhisper.core.runner import run_process
from pkgwhisper.models.events import (
    ExecutingInstallerEvent,
    InitializationEvent,
    InstallationSuccessfulEvent,
)
from pkgwhisper.models.options import InstallOptions, UninstallOptions
from pkgwhisper.models.package import InstallerArgs, InteractivityLevel, PackageManifest
from pkgwhisper.models.result import RunResult

logger = logging.getLogger(__name__)


class InstallService:
    """Orchestrates installer runs for packages and installed records.

    The service holds no state between operations; concurrent calls for
    different packages only share the injected collaborators.

    Example:
        >>> service = InstallService(...)
        >>> service.install(manifest, InstallOptions(InteractivityLevel.SILENT))
    """

    def __init__(
        self,
        *,
        selector: InstallerSelector,
        transfer: TransferService,
        processes: ProcessController,
        updates: PriorInstallationLookup,
        unlocker: Unlocker,
        records: InstalledRecordSource,
        matcher: RecordMatcher,
        events: EventSink,
        install_adapters: AdapterRegistry,
        uninstall_adapters: AdapterRegistry,
        download_dir: Path,
        log_dir: Path | None = None,
    ) -> None:
        self._selector = selector
        self._transfer = transfer
        self._processes = processes
        self._updates = updates
        self._unlocker = unlocker
        self._records = records
        self._matcher = matcher
        self._events = events
        self._install_adapters = install_adapters
        self._uninstall_adapters = uninstall_adapters
        self._download_dir = download_dir
        self._log_dir = log_dir

    def install(self, package: PackageManifest, options: InstallOptions) -> None:
        """Install a package.

        Args:
            package: Package to install.
            options: Requested interactivity.

        Raises:
            AdapterNotFoundError: If no adapter handles the package's install method.
            TransferError: If the installer cannot be transferred or verified.
            LaunchError: If the installer process cannot be started.
            LogDirectoryError: If the installer log directory cannot be created.
            InstallerExecutionError: If the installer exits with a non-zero code.
        """
        logger.info("Beginning installation of '%s'", package)
        self._events.publish(InitializationEvent(package_id=package.id))

        candidate = self._selector.best_installer(package.installers)
        installer_path = self._transfer.fetch(candidate.location, self._download_dir, candidate.sha256)

        for update in self._updates.updates_for(package.id):
            if update is not None and update.installation_path is not None:
                self._unlocker.unlock(update.installation_path, package.install_method)

        adapter = self._install_adapters.find(package.install_method)
        prepared = adapter.initialize(AdapterTarget(installer_path=installer_path))

        self._run_installer(options.interactivity, package.id, package.args, prepared)

        logger.info("Installation completed successfully for '%s'", package)
        self._events.publish(InstallationSuccessfulEvent(package_id=package.id))

    def uninstall(self, options: UninstallOptions) -> None:
        """Uninstall the installed software matching a package id.

        Nothing is uninstalled when no record or more than one record
        matches; both cases are logged as warnings, not raised.

        Args:
            options: Target package id and requested interactivity.

        Raises:
            AdapterNotFoundError: If no uninstall adapter handles the record's install method.
            LaunchError: If the uninstaller process cannot be started.
            LogDirectoryError: If the installer log directory cannot be created.
            InstallerExecutionError: If the uninstaller exits with a non-zero code.
        """
        logger.info("Beginning uninstallation of '%s'", options.package_id)

        installed = self._records.records()
        candidates = self._matcher.match_for(installed, options.package_id)

        if not candidates:
            logger.warning("Couldn't find an installed package matching '%s'", options.package_id)
            return

        if len(candidates) > 1:
            logger.warning("Found more than one installed package for '%s'", options.package_id)
            for record in candidates:
                logger.warning("%s %s", record.display_name, record.display_version or "")
            return

        record = candidates[0]

        if record.installation_path is not None:
            self._unlocker.unlock(record.installation_path, record.install_method)

        key = self._records.key(record.record_id)

        adapter = self._uninstall_adapters.find(record.install_method)
        prepared = adapter.initialize(AdapterTarget(key=key))

        self._run_installer(options.interactivity, options.package_id, None, prepared)

        logger.info("Uninstallation completed successfully for '%s'", record)

    def _run_installer(
        self,
        interactivity: InteractivityLevel,
        package_id: str,
        package_args: InstallerArgs | None,
        adapter: PreparedAdapter,
    ) -> RunResult:
        level = resolve_interactivity(interactivity, package_args, adapter)
        log_path = get_installer_log_path(package_id, self._log_dir)
        command = build_arguments(level, package_args, adapter, log_path)

        if command.log_path is not None:
            try:
                ensure_dir(command.log_path.parent, "installer log")
            except RuntimeError as e:
                raise LogDirectoryError(str(e)) from e

        self._events.publish(ExecutingInstallerEvent(package_id=package_id))
        exit_code = run_process(self._processes, adapter.executable, command.arguments)
        result = classify(exit_code, adapter, command.log_path)

        if result.failed:
            raise InstallerExecutionError(
                exit_code=result.exit_code,
                package_id=package_id,
                reason=result.reason,
                log_path=result.log_path,
            )

        return result
