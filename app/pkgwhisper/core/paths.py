"""XDG-compliant path management for pkgwhisper.

XDG defaults:
- Config: ~/.config/pkgwhisper/
- State: ~/.local/state/pkgwhisper/
- Cache: ~/.cache/pkgwhisper/
"""

import os
import re
from datetime import UTC, datetime
from pathlib import Path

# Application identifier for directory naming
APP_NAME = "pkgwhisper"

_UNSAFE_FILENAME_CHARS = re.compile(r"[^A-Za-z0-9._-]+")


def _get_xdg_dir(env_var: str, default_subdir: str) -> Path:
    """Get XDG directory respecting environment variable override."""
    base = os.environ.get(env_var)
    if base:
        return Path(base) / APP_NAME
    return Path.home() / default_subdir / APP_NAME


def get_config_dir() -> Path:
    """Get the configuration directory path.

    Returns:
        Path to ~/.config/pkgwhisper/ (or XDG_CONFIG_HOME/pkgwhisper/).
    """
    return _get_xdg_dir("XDG_CONFIG_HOME", ".config")


def get_state_dir() -> Path:
    """Get the state directory path.

    Returns:
        Path to ~/.local/state/pkgwhisper/ (or XDG_STATE_HOME/pkgwhisper/).
    """
    return _get_xdg_dir("XDG_STATE_HOME", ".local/state")


def get_cache_dir() -> Path:
    """Get the cache directory path.

    Returns:
        Path to ~/.cache/pkgwhisper/ (or XDG_CACHE_HOME/pkgwhisper/).
    """
    return _get_xdg_dir("XDG_CACHE_HOME", ".cache")


def get_config_path() -> Path:
    """Get the default configuration file path."""
    return get_config_dir() / "config.toml"


def get_inventory_path() -> Path:
    """Get the default installed-records inventory path."""
    return get_state_dir() / "inventory.toml"


def get_download_dir() -> Path:
    """Get the default directory installers are transferred to."""
    return get_cache_dir() / "installers"


def get_log_dir() -> Path:
    """Get the default installer log directory."""
    return get_state_dir() / "logs"


def get_installer_log_path(package_id: str, log_dir: Path | None = None) -> Path:
    """Get a fresh installer log file path for a package.

    Args:
        package_id: Package the installer runs for.
        log_dir: Directory to place the log in. Defaults to the state log dir.

    Returns:
        Path like ``<log_dir>/<package-id>-<UTC timestamp>.log``.
    """
    name = _UNSAFE_FILENAME_CHARS.sub("_", package_id).strip("_") or "installer"
    stamp = datetime.now(UTC).strftime("%Y%m%dT%H%M%S")
    return (log_dir or get_log_dir()) / f"{name}-{stamp}.log"


def ensure_dir(path: Path, name: str) -> Path:
    """Create directory if it doesn't exist.

    Args:
        path: Directory path to create.
        name: Human-readable name for error messages.

    Returns:
        The created/existing directory path.

    Raises:
        RuntimeError: If directory cannot be created.
    """
    try:
        path.mkdir(parents=True, exist_ok=True)
    except PermissionError as e:
        msg = f"Cannot create {name} directory {path}: Permission denied"
        raise RuntimeError(msg) from e
    except OSError as e:
        msg = f"Cannot create {name} directory {path}: {e}"
        raise RuntimeError(msg) from e
    return path
