"""Application configuration.

Loads ``config.toml`` from the XDG config directory and validates it with
Pydantic. A missing file yields the defaults.

Example config.toml::

    interactivity = "silent"
    log_dir = "/var/log/pkgwhisper"

    [install_adapters.custom]
    executable = "installer"
    silent = "--quiet"
    log = "--log-file {path}"

    [install_adapters.custom.exit_codes]
    17 = "Unsupported operating system"
"""

import logging
import os
import tomllib
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Annotated, Any

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from pkgwhisper.adapters.base import InstallerAdapter, fixed, from_installer, from_key
from pkgwhisper.core.paths import (
    get_config_path,
    get_download_dir,
    get_inventory_path,
    get_log_dir,
)
from pkgwhisper.models.package import InstallMethod, InteractivityLevel

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigParseError(ConfigError):
    """Raised when the configuration file cannot be parsed."""


class ConfigValidationError(ConfigError):
    """Raised when the configuration content is invalid."""


class AdapterConfig(BaseModel):
    """User-defined adapter for an install method.

    Attributes:
        executable: ``"installer"`` to run the downloaded installer,
            ``"key"`` to run the path stored as uninstall key, or any
            other value as a fixed executable name.
        silent: Silent arguments template.
        interactive: Interactive arguments template.
        passive: Passive arguments template.
        log: Logging arguments template with a ``{path}`` placeholder.
        exit_codes: Map of exit code to failure reason.
    """

    model_config = ConfigDict(extra="forbid")

    executable: Annotated[str, Field(min_length=1)] = "installer"
    silent: str | None = None
    interactive: str | None = None
    passive: str | None = None
    log: str | None = None
    exit_codes: dict[int, str] = Field(default_factory=dict)

    def to_adapter(self, install_method: InstallMethod) -> InstallerAdapter:
        """Convert this entry into an adapter record."""
        if self.executable == "installer":
            resolver = from_installer
        elif self.executable == "key":
            resolver = from_key
        else:
            resolver = fixed(self.executable)

        return InstallerAdapter(
            install_method=install_method,
            silent_args=self.silent,
            interactive_args=self.interactive,
            passive_args=self.passive,
            log_args=self.log,
            exit_codes=self.exit_codes,
            executable=resolver,
        )


class AppConfig(BaseModel):
    """Top-level application configuration.

    Attributes:
        interactivity: Default interactivity level for CLI operations.
        download_dir: Where installers are transferred to.
        log_dir: Where installer log files are written.
        inventory: Installed-records inventory file.
        install_adapters: Additional install adapters by install method.
        uninstall_adapters: Additional uninstall adapters by install method.
    """

    model_config = ConfigDict(extra="forbid")

    interactivity: InteractivityLevel = InteractivityLevel.INTERACTIVE
    download_dir: Path | None = None
    log_dir: Path | None = None
    inventory: Path | None = None
    install_adapters: dict[InstallMethod, AdapterConfig] = Field(default_factory=dict)
    uninstall_adapters: dict[InstallMethod, AdapterConfig] = Field(default_factory=dict)

    @property
    def effective_download_dir(self) -> Path:
        """Configured download dir, or the XDG cache default."""
        return self.download_dir or get_download_dir()

    @property
    def effective_log_dir(self) -> Path:
        """Configured log dir, or the XDG state default."""
        return self.log_dir or get_log_dir()

    @property
    def effective_inventory(self) -> Path:
        """Configured inventory file, or the XDG state default."""
        return self.inventory or get_inventory_path()

    def extra_install_adapters(self) -> list[InstallerAdapter]:
        """Build the user-defined install adapters."""
        return [entry.to_adapter(method) for method, entry in self.install_adapters.items()]

    def extra_uninstall_adapters(self) -> list[InstallerAdapter]:
        """Build the user-defined uninstall adapters."""
        return [entry.to_adapter(method) for method, entry in self.uninstall_adapters.items()]


def load_config(path: Path | None = None) -> AppConfig:
    """Load and validate the configuration file.

    Args:
        path: Path to the config file. If None, uses the default path.

    Returns:
        Validated AppConfig; defaults when the file does not exist.

    Raises:
        ConfigParseError: If the TOML syntax is invalid.
        ConfigValidationError: If the content doesn't match the schema.
        ConfigError: If the file cannot be read.
    """
    config_path = path or get_config_path()

    if not config_path.exists():
        logger.debug("No config file at %s, using defaults", config_path)
        return AppConfig()

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(f"Invalid TOML syntax in {config_path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read config: {e}") from e

    try:
        return AppConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigValidationError(f"Invalid config content: {e}") from e


def _config_to_dict(config: AppConfig) -> dict[str, Any]:
    data = config.model_dump(mode="json", exclude_none=True)
    # TOML table keys must be strings
    for section in ("install_adapters", "uninstall_adapters"):
        for entry in data.get(section, {}).values():
            entry["exit_codes"] = {str(code): reason for code, reason in entry["exit_codes"].items()}
    return data


def save_config(config: AppConfig, path: Path | None = None) -> Path:
    """Save the configuration atomically.

    Args:
        config: Configuration to save.
        path: Destination. If None, uses the default path.

    Returns:
        Path where the configuration was saved.

    Raises:
        ConfigError: If the file cannot be written.
    """
    config_path = path or get_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)

    tmp_path: Path | None = None
    try:
        with NamedTemporaryFile(mode="wb", dir=config_path.parent, delete=False, suffix=".tmp") as f:
            tmp_path = Path(f.name)
            tomli_w.dump(_config_to_dict(config), f)
        os.replace(tmp_path, config_path)
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise ConfigError(f"Failed to write config: {e}") from e

    return config_path
