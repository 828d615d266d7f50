"""Unit tests for package models."""

import pytest
from pkgwhisper.models.package import (
    InstallerArgs,
    InstallerCandidate,
    InstallMethod,
    InteractivityLevel,
    PackageManifest,
)
from pydantic import ValidationError


class TestPackageManifest:
    """Tests for PackageManifest model."""

    def test_minimal(self) -> None:
        """Only id, install method and an installer are required."""
        manifest = PackageManifest(
            id="vlc",
            install_method=InstallMethod.NSIS,
            installers=[InstallerCandidate(location="vlc.exe")],
        )

        assert manifest.args is None
        assert str(manifest) == "vlc"

    def test_from_strings(self) -> None:
        """Enum fields accept their string values."""
        manifest = PackageManifest.model_validate(
            {"id": "7zip", "install_method": "msi", "installers": [{"location": "7z.msi"}]}
        )

        assert manifest.install_method == InstallMethod.MSI

    def test_empty_id_rejected(self) -> None:
        """An empty id is invalid."""
        with pytest.raises(ValidationError):
            PackageManifest(id="", install_method=InstallMethod.MSI, installers=[InstallerCandidate(location="x")])

    def test_frozen(self) -> None:
        """Manifests are immutable."""
        manifest = PackageManifest(
            id="vlc", install_method=InstallMethod.NSIS, installers=[InstallerCandidate(location="vlc.exe")]
        )

        with pytest.raises(ValidationError):
            manifest.id = "other"  # type: ignore[misc]

    def test_extra_args_rejected(self) -> None:
        """Unknown argument keys are rejected."""
        with pytest.raises(ValidationError):
            InstallerArgs.model_validate({"quiet": "/q"})


class TestInteractivityLevel:
    """Tests for InteractivityLevel enum."""

    def test_values(self) -> None:
        """Levels serialize to lowercase names."""
        assert [level.value for level in InteractivityLevel] == ["silent", "passive", "interactive"]
