"""
Pydantic Settings for cryptohash configuration.

Provides settings loading from TOML files, environment variables, and defaults.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

try:
    import tomllib
except ImportError:
    import tomli as tomllib

from pydantic import Field, PrivateAttr
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from .di import get_logger
from .exceptions import ConfigFileError
from .models.config import DigestConfig, LoggingConfig

CONFIG_DIR_NAME = ".cryptohash"
CONFIG_FILE_NAME = "config.toml"


def find_config_file(start_dir: str | Path | None = None) -> Path | None:
    """
    Find .cryptohash/config.toml by walking up from start_dir (or cwd).

    A pyproject.toml with a [tool.cryptohash] table also counts.

    Returns:
        Path to config file, or None if not found.
    """
    start = Path(start_dir) if start_dir else Path.cwd()

    for parent in [start, *list(start.parents)]:
        config_path = parent / CONFIG_DIR_NAME / CONFIG_FILE_NAME
        if config_path.exists():
            return config_path

        pyproject = parent / "pyproject.toml"
        if pyproject.exists():
            try:
                with open(pyproject, "rb") as f:
                    data = tomllib.load(f)
                if "cryptohash" in data.get("tool", {}):
                    return pyproject
            except tomllib.TOMLDecodeError as e:
                get_logger().debug("Failed to parse pyproject.toml at %s: %s", pyproject, e)
            except OSError as e:
                get_logger().debug("Failed to read pyproject.toml at %s: %s", pyproject, e)

    return None


class TomlConfigSource(PydanticBaseSettingsSource):
    """Custom settings source that loads from TOML config files."""

    def __init__(
        self,
        settings_cls: type[BaseSettings],
        config_path: str | Path | None = None,
        start_dir: str | Path | None = None,
    ):
        super().__init__(settings_cls)
        self._config_path = config_path
        self._start_dir = start_dir
        self._data: dict[str, Any] | None = None
        self.config_file: str | None = None
        self.config_error: str | None = None
        self.error_path: str | None = None

    def _load_toml(self) -> dict[str, Any]:
        """Load and cache TOML data."""
        if self._data is not None:
            return self._data

        self._data = {}

        path = Path(self._config_path) if self._config_path is not None else None
        if path is None:
            path = find_config_file(self._start_dir)

        if path is None:
            return self._data

        try:
            with open(path, "rb") as f:
                data = tomllib.load(f)

            if path.name == "pyproject.toml":
                data = data.get("tool", {}).get("cryptohash", {})

            self._data = data
            self.config_file = str(path)

        except tomllib.TOMLDecodeError as e:
            get_logger().warning("Failed to parse config file %s: %s", path, e)
            self.config_error = f"Failed to parse config file: {e}"
            self.error_path = str(path)
        except OSError as e:
            get_logger().warning("Failed to read config file %s: %s", path, e)
            self.config_error = f"Failed to read config file: {e}"
            self.error_path = str(path)

        return self._data

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Get field value from TOML data."""
        data = self._load_toml()
        return data.get(field_name), field_name, False

    def __call__(self) -> dict[str, Any]:
        """Return all TOML data for settings initialization."""
        return dict(self._load_toml())


class CryptoHashSettings(BaseSettings):
    """cryptohash settings with TOML and environment variable support.

    Priority (highest to lowest):
    1. Explicit init values
    2. Environment variables (CRYPTOHASH_<section>__<field>)
    3. TOML config file (.cryptohash/config.toml or pyproject.toml [tool.cryptohash])
    4. Model defaults
    """

    model_config = {
        "env_prefix": "CRYPTOHASH_",
        "env_nested_delimiter": "__",
        "extra": "ignore",
    }

    digest: DigestConfig = Field(default_factory=DigestConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    _config_file: str | None = PrivateAttr(default=None)
    _config_error: str | None = PrivateAttr(default=None)

    @property
    def config_file(self) -> str | None:
        """Path of the TOML file the settings were read from, if any."""
        return self._config_file

    @property
    def config_error(self) -> str | None:
        """Reason the TOML file was skipped, if it could not be loaded."""
        return self._config_error

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Customize settings sources to add TOML loading.

        The TOML source is taken from the module-level slot set by
        load_settings(), since this hook cannot receive arguments.
        """
        toml_source = _current_toml_source
        if toml_source is None:
            toml_source = TomlConfigSource(settings_cls)
        return (
            init_settings,
            env_settings,
            toml_source,
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert settings to a JSON-friendly nested dict."""
        result: dict[str, Any] = {
            "digest": self.digest.model_dump(mode="json"),
            "logging": self.logging.model_dump(mode="json"),
        }
        if self._config_file:
            result["_config_file"] = self._config_file
        if self._config_error:
            result["_config_error"] = self._config_error
        return result


# Module-level slot read by settings_customise_sources
_current_toml_source: TomlConfigSource | None = None


def load_settings(
    config_path: str | Path | None = None,
    start_dir: str | Path | None = None,
    strict: bool = False,
    **overrides: Any,
) -> CryptoHashSettings:
    """Load cryptohash settings from config file and environment.

    Args:
        config_path: Explicit path to config file
        start_dir: Directory to start searching from (if config_path not given)
        strict: Raise instead of falling back to defaults when the config
            file cannot be read or parsed
        **overrides: Explicit values, highest priority (e.g., digest={"chunk_size": 8192})

    Returns:
        CryptoHashSettings instance with all sources merged

    Raises:
        ConfigFileError: If strict and the config file is unreadable or malformed
        pydantic.ValidationError: If a configured value is invalid
    """
    global _current_toml_source

    toml_source = TomlConfigSource(CryptoHashSettings, config_path, start_dir)
    _current_toml_source = toml_source
    try:
        settings = CryptoHashSettings(**overrides)
    finally:
        _current_toml_source = None

    if strict and toml_source.config_error:
        raise ConfigFileError(toml_source.config_error, file_path=toml_source.error_path)

    settings._config_file = toml_source.config_file
    settings._config_error = toml_source.config_error
    return settings
