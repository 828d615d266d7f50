"""Installer adapter records.

An adapter describes one installer technology as data: argument templates
per interactivity level, a logging template, an exit-code table and a
resolver for the executable to launch. Adding a technology means
registering a new record, not subclassing.

Templates may reference placeholders that are filled in by
:meth:`InstallerAdapter.initialize`:

- ``{installer}``: the quoted path of the downloaded installer.
- ``{key}``: the technology-specific uninstall key of an installed record.
- ``{key_args}``: arguments that follow a quoted executable in the
  uninstall key, e.g. ``/allusers`` in ``"C:\\App\\uninst.exe" /allusers``.

The logging template uses one more placeholder, ``{path}``, which is
substituted later with the resolved log file path.
"""

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType

from pkgwhisper.models.package import InstallMethod, InteractivityLevel


@dataclass(frozen=True, slots=True)
class AdapterTarget:
    """What an adapter is being initialized against.

    Attributes:
        installer_path: Local path of the downloaded installer (install side).
        key: Uninstall key of the installed record (uninstall side).
    """

    installer_path: Path | None = None
    key: str | None = None


ExecutableResolver = Callable[[AdapterTarget], str]


def from_installer(target: AdapterTarget) -> str:
    """Run the downloaded installer itself."""
    if target.installer_path is None:
        msg = "Adapter target has no installer path"
        raise ValueError(msg)
    return str(target.installer_path)


def split_uninstall_string(key: str) -> tuple[str, str]:
    """Split an uninstall string into its executable and trailing arguments.

    A leading double-quoted path is the executable and whatever follows the
    closing quote is returned as arguments. An unquoted string is taken
    whole as the executable, since uninstaller paths often contain spaces.

    Example:
        >>> split_uninstall_string('"C:/App/uninst.exe" /allusers')
        ('C:/App/uninst.exe', '/allusers')
    """
    key = key.strip()
    if key.startswith('"'):
        end = key.find('"', 1)
        if end != -1:
            return key[1:end], key[end + 1 :].strip()
        return key.strip('"'), ""
    return key, ""


def from_key(target: AdapterTarget) -> str:
    """Run the uninstaller the record's key points to."""
    if not target.key:
        msg = "Adapter target has no uninstall key"
        raise ValueError(msg)
    executable, _ = split_uninstall_string(target.key)
    return executable


def fixed(executable: str) -> ExecutableResolver:
    """Always run the same executable (e.g. ``msiexec``)."""

    def resolve(target: AdapterTarget) -> str:
        return executable

    return resolve


def _substitute(template: str | None, target: AdapterTarget) -> str | None:
    if template is None:
        return None
    if target.installer_path is not None:
        template = template.replace("{installer}", f'"{target.installer_path}"')
    if target.key is not None:
        if "{key_args}" in template:
            _, key_args = split_uninstall_string(target.key)
            template = template.replace("{key_args}", key_args).strip()
        template = template.replace("{key}", target.key)
    return template


@dataclass(frozen=True, slots=True)
class InstallerAdapter:
    """Installer technology description.

    Attributes:
        install_method: Tag this adapter handles. Unique within a registry.
        silent_args: Arguments for a silent run, or None if unsupported.
        interactive_args: Arguments for an interactive run.
        passive_args: Arguments for a passive run, or None if unsupported.
        log_args: Logging template with a ``{path}`` placeholder, or None.
        exit_codes: Map of exit code to human-readable reason.
        executable: Resolves the process to launch for a target.

    Example:
        >>> adapter = InstallerAdapter(InstallMethod.NSIS, silent_args="/S")
        >>> prepared = adapter.initialize(AdapterTarget(installer_path=Path("setup.exe")))
        >>> prepared.executable
        'setup.exe'
    """

    install_method: InstallMethod
    silent_args: str | None = None
    interactive_args: str | None = None
    passive_args: str | None = None
    log_args: str | None = None
    exit_codes: Mapping[int, str] = field(default_factory=dict)
    executable: ExecutableResolver = from_installer

    def __post_init__(self) -> None:
        """Freeze the exit-code table."""
        object.__setattr__(self, "exit_codes", MappingProxyType(dict(self.exit_codes)))

    def initialize(self, target: AdapterTarget) -> "PreparedAdapter":
        """Bind this adapter to a concrete installer or installed record.

        Args:
            target: The installer path or uninstall key to run against.

        Returns:
            PreparedAdapter with placeholders substituted and the
            executable resolved.

        Raises:
            ValueError: If the target lacks what the resolver needs.
        """
        return PreparedAdapter(
            install_method=self.install_method,
            executable=self.executable(target),
            silent_args=_substitute(self.silent_args, target),
            interactive_args=_substitute(self.interactive_args, target),
            passive_args=_substitute(self.passive_args, target),
            log_args=self.log_args,
            exit_codes=self.exit_codes,
        )


@dataclass(frozen=True, slots=True)
class PreparedAdapter:
    """An adapter bound to one operation, ready to build a command line."""

    install_method: InstallMethod
    executable: str
    silent_args: str | None
    interactive_args: str | None
    passive_args: str | None
    log_args: str | None
    exit_codes: Mapping[int, str]

    def args_for(self, level: InteractivityLevel) -> str | None:
        """Return the argument template for an interactivity level."""
        if level == InteractivityLevel.SILENT:
            return self.silent_args
        if level == InteractivityLevel.PASSIVE:
            return self.passive_args
        return self.interactive_args
