"""Configuration management for geolocator.

Loads and validates TOML configuration files with dataclass-based structure.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any
import tomllib  # Python 3.11+ stdlib

from geolocator.geo.database import DatabaseIdentifier, get_database_path


def get_default_target_dir() -> Path:
    """Get default directory holding the database files."""
    return Path.home() / ".geolocator" / "databases"


@dataclass(frozen=True)
class ResolverConfig:
    """Configuration for LocationResolver.

    Attributes:
        target_dir: Directory containing asn.mmdb, city.mmdb and country.mmdb
    """
    target_dir: Path

    def __post_init__(self):
        value = self.target_dir
        # Path("") collapses to Path("."), so check before coercion
        if (
            value is None
            or (isinstance(value, str) and value.strip() == "")
            or (isinstance(value, Path) and value == Path(""))
        ):
            raise ValueError("target_dir must not be empty")

        target_dir = Path(self.target_dir).expanduser()
        if target_dir.exists() and not target_dir.is_dir():
            raise ValueError(f"target_dir is not a directory: {target_dir}")

        # Frozen dataclass, so bypass __setattr__ for the normalized value
        object.__setattr__(self, "target_dir", target_dir)


def load_config(path: Path | str | None = None) -> ResolverConfig:
    """Load config from TOML file, or return defaults if not found.

    The file is expected to hold a ``[geoip]`` table:

        [geoip]
        target_dir = "/var/lib/geoip"

    Args:
        path: Path to TOML config file. If None, returns default config.

    Returns:
        ResolverConfig instance with loaded or default values.

    Raises:
        FileNotFoundError: If path is provided but file doesn't exist.
        ValueError: If TOML parsing fails or config is invalid.
    """
    if path is None:
        return ResolverConfig(target_dir=get_default_target_dir())

    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except Exception as e:
        raise ValueError(f"Failed to parse TOML config: {e}") from e

    return _build_config(data)


def _build_config(data: dict[str, Any]) -> ResolverConfig:
    """Build ResolverConfig from parsed TOML data."""
    geoip = data.get("geoip", {})
    if not isinstance(geoip, dict):
        raise ValueError("[geoip] must be a table")

    target_dir = geoip.get("target_dir", str(get_default_target_dir()))
    if not isinstance(target_dir, str):
        raise ValueError(f"geoip.target_dir must be a string, got {type(target_dir).__name__}")

    if target_dir.strip() == "":
        raise ValueError("geoip.target_dir must not be empty")

    return ResolverConfig(target_dir=target_dir)


def validate_config(config: ResolverConfig) -> list[str]:
    """Validate config and return list of warnings.

    Args:
        config: ResolverConfig instance to validate.

    Returns:
        List of warning messages. Empty list if every database is in place.
    """
    warnings = []

    if not config.target_dir.is_dir():
        warnings.append(f"target_dir does not exist: {config.target_dir}")
        return warnings

    for identifier in DatabaseIdentifier:
        path = get_database_path(config.target_dir, identifier)
        if not path.is_file():
            warnings.append(f"{identifier.value} database not found: {path}")

    return warnings
