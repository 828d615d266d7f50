"""Built-in adapters for common Windows installer technologies.

Exit-code tables follow the vendors' published codes.
"""

from collections.abc import Iterable

from pkgwhisper.adapters.base import InstallerAdapter, fixed, from_key
from pkgwhisper.adapters.registry import AdapterRegistry
from pkgwhisper.models.package import InstallMethod

MSI_EXIT_CODES: dict[int, str] = {
    1601: "The Windows Installer service could not be accessed",
    1602: "User cancelled installation",
    1603: "Fatal error during installation",
    1605: "This action is only valid for products that are currently installed",
    1618: "Another installation is already in progress",
    1619: "Installation package could not be opened",
    1620: "Installation package is not a valid Windows Installer package",
    1625: "Installation is forbidden by system policy",
    1633: "Installation package is not supported on this platform",
    1638: "Another version of this product is already installed",
    1641: "The installer has initiated a restart",
    3010: "A restart is required to complete the install",
}

NSIS_EXIT_CODES: dict[int, str] = {
    1: "Installation aborted by user (cancel button)",
    2: "Installation aborted by script",
}

INNO_EXIT_CODES: dict[int, str] = {
    1: "Setup failed to initialize",
    2: "The user clicked Cancel in the wizard before the actual installation started",
    3: "A fatal error occurred while preparing to move to the next installation phase",
    4: "A fatal error occurred during the actual installation process",
    5: "The user clicked Cancel during the actual installation process",
    6: "The Setup process was forcefully terminated by the debugger",
    7: "The Preparing to Install stage determined that Setup cannot proceed",
    8: "Setup cannot proceed until the system is restarted",
}

MSI_LOG_ARGS = "/l*v {path}"
INNO_LOG_ARGS = "/LOG={path}"


def install_adapters() -> list[InstallerAdapter]:
    """Return the built-in install adapters."""
    return [
        InstallerAdapter(
            install_method=InstallMethod.MSI,
            silent_args="/i {installer} /qn /norestart",
            interactive_args="/i {installer}",
            passive_args="/i {installer} /passive /norestart",
            log_args=MSI_LOG_ARGS,
            exit_codes=MSI_EXIT_CODES,
            executable=fixed("msiexec"),
        ),
        InstallerAdapter(
            install_method=InstallMethod.NSIS,
            silent_args="/S",
            exit_codes=NSIS_EXIT_CODES,
        ),
        InstallerAdapter(
            install_method=InstallMethod.INNO,
            silent_args="/VERYSILENT /SUPPRESSMSGBOXES /NORESTART /SP-",
            passive_args="/SILENT /SUPPRESSMSGBOXES /NORESTART /SP-",
            log_args=INNO_LOG_ARGS,
            exit_codes=INNO_EXIT_CODES,
        ),
        InstallerAdapter(
            install_method=InstallMethod.INSTALL_SHIELD,
            silent_args="/s",
        ),
    ]


def uninstall_adapters() -> list[InstallerAdapter]:
    """Return the built-in uninstall adapters."""
    return [
        InstallerAdapter(
            install_method=InstallMethod.MSI,
            silent_args="/x {key} /qn /norestart",
            interactive_args="/x {key}",
            passive_args="/x {key} /passive /norestart",
            log_args=MSI_LOG_ARGS,
            exit_codes=MSI_EXIT_CODES,
            executable=fixed("msiexec"),
        ),
        InstallerAdapter(
            install_method=InstallMethod.NSIS,
            silent_args="{key_args} /S",
            interactive_args="{key_args}",
            exit_codes=NSIS_EXIT_CODES,
            executable=from_key,
        ),
        InstallerAdapter(
            install_method=InstallMethod.INNO,
            silent_args="{key_args} /VERYSILENT /SUPPRESSMSGBOXES /NORESTART",
            interactive_args="{key_args}",
            passive_args="{key_args} /SILENT /SUPPRESSMSGBOXES /NORESTART",
            log_args=INNO_LOG_ARGS,
            exit_codes=INNO_EXIT_CODES,
            executable=from_key,
        ),
    ]


def create_install_registry(extra: Iterable[InstallerAdapter] = ()) -> AdapterRegistry:
    """Build the install registry from built-in and extra adapters.

    Raises:
        AdapterConflictError: If an extra adapter claims a built-in install method.
    """
    return AdapterRegistry([*install_adapters(), *extra])


def create_uninstall_registry(extra: Iterable[InstallerAdapter] = ()) -> AdapterRegistry:
    """Build the uninstall registry from built-in and extra adapters.

    Raises:
        AdapterConflictError: If an extra adapter claims a built-in install method.
    """
    return AdapterRegistry([*uninstall_adapters(), *extra])
