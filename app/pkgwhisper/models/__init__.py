"""Data models for pkgwhisper.

This module exports the core data structures used throughout the application.
"""

from pkgwhisper.models.events import (
    ExecutingInstallerEvent,
    InitializationEvent,
    InstallationSuccessfulEvent,
    InstallerEvent,
)
from pkgwhisper.models.options import InstallOptions, UninstallOptions
from pkgwhisper.models.package import (
    InstallerArgs,
    InstallerCandidate,
    InstallMethod,
    InteractivityLevel,
    PackageManifest,
)
from pkgwhisper.models.record import InstalledRecord, PriorInstallation
from pkgwhisper.models.result import RunResult

__all__ = [
    "ExecutingInstallerEvent",
    "InitializationEvent",
    "InstallationSuccessfulEvent",
    "InstallerArgs",
    "InstallerCandidate",
    "InstallerEvent",
    "InstallMethod",
    "InstallOptions",
    "InstalledRecord",
    "InteractivityLevel",
    "PackageManifest",
    "PriorInstallation",
    "RunResult",
    "UninstallOptions",
]
