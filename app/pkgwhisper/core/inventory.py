"""File-backed installed-software inventory.

The inventory is a TOML file listing installed records::

    [[records]]
    id = "{23170F69-40C1-2702-2301-000001000000}"
    display_name = "7-Zip 23.01 (x64 edition)"
    display_version = "23.01.00.0"
    install_method = "msi"
    installation_path = "C:\\\\Program Files\\\\7-Zip"
    key = "{23170F69-40C1-2702-2301-000001000000}"
    package_id = "7zip"

It backs the installed-record source, the prior-installation lookup and
the record matcher used by the install service.
"""

import logging
import re
import tomllib
from functools import cached_property
from pathlib import Path
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from pkgwhisper.models.package import InstallMethod
from pkgwhisper.models.record import InstalledRecord, PriorInstallation

logger = logging.getLogger(__name__)

_NON_ALNUM = re.compile(r"[^0-9a-z]+")


class InventoryError(Exception):
    """Raised when the inventory cannot be loaded or queried."""


class InventoryEntry(BaseModel):
    """A single installed record as stored in the inventory file."""

    model_config = ConfigDict(extra="forbid")

    id: Annotated[str, Field(min_length=1)]
    display_name: Annotated[str, Field(min_length=1)]
    display_version: str | None = None
    install_method: InstallMethod
    installation_path: Path | None = None
    key: Annotated[str, Field(min_length=1)]
    package_id: str | None = None

    def to_record(self) -> InstalledRecord:
        """Convert to the read-only record model."""
        return InstalledRecord(
            record_id=self.id,
            display_name=self.display_name,
            display_version=self.display_version,
            install_method=self.install_method,
            installation_path=self.installation_path,
            package_id=self.package_id,
        )


class Inventory(BaseModel):
    """Inventory file contents."""

    model_config = ConfigDict(extra="forbid")

    records: list[InventoryEntry] = Field(default_factory=list)


def load_inventory(path: Path) -> Inventory:
    """Load the inventory file.

    A missing file is an empty inventory.

    Raises:
        InventoryError: If the file cannot be read, parsed or validated.
    """
    if not path.exists():
        logger.debug("No inventory at %s", path)
        return Inventory()

    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except (tomllib.TOMLDecodeError, OSError) as e:
        raise InventoryError(f"Failed to read inventory {path}: {e}") from e

    try:
        return Inventory.model_validate(data)
    except ValidationError as e:
        raise InventoryError(f"Invalid inventory content: {e}") from e


class InventoryRecordSource:
    """Installed-record source backed by an inventory file."""

    def __init__(self, path: Path) -> None:
        self._path = path

    @cached_property
    def _inventory(self) -> Inventory:
        return load_inventory(self._path)

    def records(self) -> list[InstalledRecord]:
        """Return all installed records."""
        return [entry.to_record() for entry in self._inventory.records]

    def key(self, record_id: str) -> str:
        """Return the uninstall key of a record.

        Raises:
            InventoryError: If the record is unknown.
        """
        for entry in self._inventory.records:
            if entry.id == record_id:
                return entry.key
        raise InventoryError(f"Unknown installed record: {record_id}")


class InventoryUpdateLookup:
    """Prior-installation lookup backed by an inventory file."""

    def __init__(self, source: InventoryRecordSource) -> None:
        self._source = source

    def updates_for(self, package_id: str) -> list[PriorInstallation]:
        """Return installations recorded for a package id."""
        return [
            PriorInstallation(installation_path=record.installation_path)
            for record in self._source.records()
            if record.package_id == package_id
        ]


def normalize_name(value: str) -> str:
    """Lower-case a name and strip punctuation and whitespace."""
    return _NON_ALNUM.sub("", value.casefold())


class NameRecordMatcher:
    """Loose matcher on package id and display name.

    A record matches when its package id equals the target, or when its
    normalized display name starts with the normalized target. The match
    is deliberately loose: "foo" matches both "Foo" and "Foo Beta".
    """

    def match_for(self, records: list[InstalledRecord], target_id: str) -> list[InstalledRecord]:
        """Return every record matching the target id."""
        target = normalize_name(target_id)
        if not target:
            return []

        return [
            record
            for record in records
            if record.package_id == target_id or normalize_name(record.display_name).startswith(target)
        ]


class NullUnlocker:
    """Unlocker that logs the request and releases nothing."""

    def unlock(self, path: Path, install_method: InstallMethod) -> None:
        """Log the unlock request."""
        logger.info("Unlocking %s (%s)", path, install_method.value)
