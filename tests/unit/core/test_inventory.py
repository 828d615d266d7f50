"""Unit tests for the file-backed inventory."""

import logging
from pathlib import Path

import pytest
from pkgwhisper.core.inventory import (
    InventoryError,
    InventoryRecordSource,
    InventoryUpdateLookup,
    NameRecordMatcher,
    NullUnlocker,
    load_inventory,
    normalize_name,
)
from pkgwhisper.models.package import InstallMethod
from pkgwhisper.models.record import InstalledRecord, PriorInstallation

INVENTORY = """\
[[records]]
id = "7zip-msi"
display_name = "7-Zip 23.01 (x64 edition)"
display_version = "23.01.00.0"
install_method = "msi"
installation_path = "/opt/7-Zip"
key = "{23170F69-40C1-2702-2301-000001000000}"
package_id = "7zip"

[[records]]
id = "vlc"
display_name = "VLC media player"
install_method = "nsis"
key = "/opt/VLC/uninstall.exe"
package_id = "vlc"
"""


@pytest.fixture
def inventory_path(tmp_path: Path) -> Path:
    """Inventory file with two records."""
    path = tmp_path / "inventory.toml"
    path.write_text(INVENTORY)
    return path


def _record(name: str, package_id: str | None = None) -> InstalledRecord:
    return InstalledRecord(
        record_id=name,
        display_name=name,
        install_method=InstallMethod.MSI,
        package_id=package_id,
    )


class TestLoadInventory:
    """Tests for load_inventory()."""

    def test_missing_is_empty(self, tmp_path: Path) -> None:
        """A missing inventory has no records."""
        assert load_inventory(tmp_path / "none.toml").records == []

    def test_invalid(self, tmp_path: Path) -> None:
        """Invalid content raises InventoryError."""
        path = tmp_path / "inventory.toml"
        path.write_text('[[records]]\nid = "x"\n')

        with pytest.raises(InventoryError):
            load_inventory(path)


class TestInventoryRecordSource:
    """Tests for InventoryRecordSource class."""

    def test_records(self, inventory_path: Path) -> None:
        """Records are converted to InstalledRecord."""
        records = InventoryRecordSource(inventory_path).records()

        assert [r.record_id for r in records] == ["7zip-msi", "vlc"]
        assert records[0].installation_path == Path("/opt/7-Zip")
        assert records[1].install_method == InstallMethod.NSIS
        assert str(records[0]) == "7-Zip 23.01 (x64 edition) 23.01.00.0"

    def test_key(self, inventory_path: Path) -> None:
        """key() returns the stored uninstall key."""
        source = InventoryRecordSource(inventory_path)

        assert source.key("vlc") == "/opt/VLC/uninstall.exe"

    def test_unknown_key(self, inventory_path: Path) -> None:
        """Unknown record ids raise InventoryError."""
        with pytest.raises(InventoryError, match="Unknown"):
            InventoryRecordSource(inventory_path).key("nope")


class TestInventoryUpdateLookup:
    """Tests for InventoryUpdateLookup class."""

    def test_updates_for(self, inventory_path: Path) -> None:
        """Prior installations are the records of the package."""
        lookup = InventoryUpdateLookup(InventoryRecordSource(inventory_path))

        assert lookup.updates_for("7zip") == [PriorInstallation(installation_path=Path("/opt/7-Zip"))]
        assert lookup.updates_for("vlc") == [PriorInstallation()]
        assert lookup.updates_for("firefox") == []


class TestNameRecordMatcher:
    """Tests for NameRecordMatcher class."""

    def test_normalize_name(self) -> None:
        """Case, spaces and punctuation are ignored."""
        assert normalize_name("Notepad++ (x64)") == "notepadx64"

    def test_loose_prefix_match(self) -> None:
        """A target matches every display name it prefixes."""
        records = [_record("foo-beta"), _record("Foo"), _record("bar")]

        matches = NameRecordMatcher().match_for(records, "foo")

        assert [r.display_name for r in matches] == ["foo-beta", "Foo"]

    def test_package_id_match(self) -> None:
        """Records tagged with the package id match regardless of name."""
        records = [_record("7-Zip 23.01", package_id="7zip"), _record("Other")]

        matches = NameRecordMatcher().match_for(records, "7zip")

        assert [r.display_name for r in matches] == ["7-Zip 23.01"]

    def test_no_match(self) -> None:
        """Unrelated targets match nothing."""
        assert NameRecordMatcher().match_for([_record("Foo")], "bar") == []

    def test_punctuation_only_target(self) -> None:
        """A target that normalizes to nothing matches nothing."""
        assert NameRecordMatcher().match_for([_record("Foo")], "--") == []


class TestNullUnlocker:
    """Tests for NullUnlocker class."""

    def test_unlock_is_idempotent(self, caplog: pytest.LogCaptureFixture) -> None:
        """Unlocking twice is harmless and logged."""
        unlocker = NullUnlocker()

        with caplog.at_level(logging.INFO):
            unlocker.unlock(Path("/opt/app"), InstallMethod.NSIS)
            unlocker.unlock(Path("/opt/app"), InstallMethod.NSIS)

        assert caplog.text.count("Unlocking /opt/app") == 2
