"""Package models for installer orchestration.

This module defines the enums shared by packages, adapters and installed
records, and the Pydantic models describing a package manifest.
"""

from enum import Enum
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field


class InteractivityLevel(str, Enum):
    """How much user-facing UI the external installer shows.

    Attributes:
        SILENT: No UI at all.
        PASSIVE: Progress UI only, no prompts.
        INTERACTIVE: Full installer UI. Always supported.
    """

    SILENT = "silent"
    PASSIVE = "passive"
    INTERACTIVE = "interactive"


class InstallMethod(str, Enum):
    """Installer technology tag used to select an adapter."""

    MSI = "msi"
    NSIS = "nsis"
    INNO = "inno"
    INSTALL_SHIELD = "installshield"
    SQUIRREL = "squirrel"
    CUSTOM = "custom"


class InstallerArgs(BaseModel):
    """Package-specific argument overrides.

    Each value is appended after the adapter's own template for the same
    level. ``log`` replaces the adapter's logging template entirely and
    may contain the ``{path}`` placeholder.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    silent: Annotated[str | None, Field(description="Silent install arguments")] = None
    interactive: Annotated[str | None, Field(description="Interactive install arguments")] = None
    passive: Annotated[str | None, Field(description="Passive install arguments")] = None
    log: Annotated[str | None, Field(description="Logging arguments template")] = None


class InstallerCandidate(BaseModel):
    """A downloadable installer declared by a package."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    location: Annotated[str, Field(min_length=1, description="Path or URL of the installer")]
    sha256: Annotated[str | None, Field(description="Expected SHA-256 hex digest")] = None
    architecture: Annotated[str | None, Field(description="Target CPU architecture")] = None


class PackageManifest(BaseModel):
    """Descriptor of a package to install.

    Immutable for the duration of one operation.

    Attributes:
        id: Package identifier (e.g., "vlc").
        name: Optional display name.
        version: Optional package version.
        install_method: Installer technology of the package's installers.
        installers: Installer candidates, at least one.
        args: Optional per-level argument overrides.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    id: Annotated[str, Field(min_length=1, description="Package identifier")]
    name: Annotated[str | None, Field(description="Display name")] = None
    version: Annotated[str | None, Field(description="Package version")] = None
    install_method: Annotated[InstallMethod, Field(description="Installer technology")]
    installers: Annotated[list[InstallerCandidate], Field(min_length=1)]
    args: Annotated[InstallerArgs | None, Field(description="Argument overrides")] = None

    def __str__(self) -> str:
        if self.version:
            return f"{self.id} {self.version}"
        return self.id
