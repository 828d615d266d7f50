"""Per-invocation operation options."""

from dataclasses import dataclass

from pkgwhisper.models.package import InteractivityLevel


@dataclass(frozen=True, slots=True)
class InstallOptions:
    """Options for a single install operation.

    Attributes:
        interactivity: Requested interactivity level.
    """

    interactivity: InteractivityLevel = InteractivityLevel.INTERACTIVE


@dataclass(frozen=True, slots=True)
class UninstallOptions:
    """Options for a single uninstall operation.

    Attributes:
        package_id: Identity of the package the caller wants removed.
        interactivity: Requested interactivity level.
    """

    package_id: str
    interactivity: InteractivityLevel = InteractivityLevel.INTERACTIVE

    def __post_init__(self) -> None:
        """Validate options after initialization."""
        if not self.package_id:
            msg = "Package id cannot be empty"
            raise ValueError(msg)
