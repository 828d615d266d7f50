"""Local installer transfer with checksum verification.

Only local paths and ``file://`` URLs are supported; remote downloads are
left to other transfer services implementing the same interface.
"""

import hashlib
import logging
import shutil
from pathlib import Path
from urllib.parse import unquote, urlparse

from pkgwhisper.core.errors import IntegrityError, TransferError
from pkgwhisper.core.paths import ensure_dir

logger = logging.getLogger(__name__)

_CHUNK_SIZE = 1024 * 1024


def sha256_file(path: Path) -> str:
    """Compute the SHA-256 hex digest of a file."""
    digest = hashlib.sha256()
    with open(path, "rb") as f:
        for chunk in iter(lambda: f.read(_CHUNK_SIZE), b""):
            digest.update(chunk)
    return digest.hexdigest()


def _local_source(location: str) -> Path:
    parsed = urlparse(location)
    if parsed.scheme == "file":
        return Path(unquote(parsed.path))
    # Single letters are Windows drive letters, not schemes
    if parsed.scheme and len(parsed.scheme) > 1:
        msg = f"Unsupported installer location scheme '{parsed.scheme}': {location}"
        raise TransferError(msg)
    return Path(location)


class LocalTransferService:
    """Copies installers from the local filesystem into a working directory."""

    def fetch(self, location: str, destination_dir: Path, expected_hash: str | None) -> Path:
        """Copy an installer and verify its checksum.

        Args:
            location: Local path or ``file://`` URL of the installer.
            destination_dir: Directory to copy the installer into.
            expected_hash: Expected SHA-256 hex digest, or None to skip verification.

        Returns:
            Path of the verified local copy.

        Raises:
            TransferError: If the source is missing, remote, or cannot be copied.
            IntegrityError: If the checksum does not match.
        """
        source = _local_source(location)
        if not source.is_file():
            raise TransferError(f"Installer not found: {source}")

        try:
            ensure_dir(destination_dir, "download")
        except RuntimeError as e:
            raise TransferError(str(e)) from e

        destination = destination_dir / source.name
        try:
            shutil.copy2(source, destination)
        except OSError as e:
            raise TransferError(f"Failed to copy installer {source}: {e}") from e

        logger.info("Transferred installer to %s", destination)

        if expected_hash is None:
            logger.warning("No checksum declared for %s, skipping verification", source.name)
            return destination

        actual = sha256_file(destination)
        if actual.lower() != expected_hash.strip().lower():
            destination.unlink(missing_ok=True)
            msg = f"Checksum mismatch for {source.name}: expected {expected_hash}, got {actual}"
            raise IntegrityError(msg)

        return destination
