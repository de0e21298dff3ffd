"""GeoIP database identifiers and on-disk layout."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Optional

DATABASE_EXTENSION = ".mmdb"

# Reserved marker for bulk metadata/status operations, never used for lookups
ALL_DATABASES = "all"


class DatabaseIdentifier(Enum):
    ASN = "asn"
    CITY = "city"
    COUNTRY = "country"

    @property
    def filename(self) -> str:
        """File name of this database inside the target directory."""
        return f"{self.value}{DATABASE_EXTENSION}"


def parse_identifier(value) -> Optional[DatabaseIdentifier]:
    """Map an identifier string to its enum member.

    Matching is exact and case-sensitive. The ``"all"`` marker is not an
    identifier.

    Returns:
        The matching DatabaseIdentifier, or None if there is none.
    """
    if isinstance(value, DatabaseIdentifier):
        return value
    for identifier in DatabaseIdentifier:
        if identifier.value == value:
            return identifier
    return None


def expand_identifiers(value) -> list[DatabaseIdentifier]:
    """Expand an identifier or the ``"all"`` marker to a list of identifiers.

    Unknown values expand to an empty list.
    """
    if value == ALL_DATABASES:
        return list(DatabaseIdentifier)
    identifier = parse_identifier(value)
    return [identifier] if identifier is not None else []


def get_database_path(target_dir: Path, identifier: DatabaseIdentifier) -> Path:
    """Get path of a database file: ``<target_dir>/<identifier>.mmdb``."""
    return Path(target_dir) / identifier.filename


@dataclass
class GeoDatabase:
    """Information about a GeoIP database file."""
    identifier: DatabaseIdentifier
    path: Path
    exists: bool
    size_mb: Optional[float] = None
    modified: Optional[datetime] = None

    @property
    def status(self) -> str:
        """Human-readable status string."""
        if not self.exists:
            return "Missing"
        return "Ready"


def get_database_info(target_dir: Path, identifier: DatabaseIdentifier) -> GeoDatabase:
    """Get on-disk status of a database file.

    Args:
        target_dir: Directory holding the database files
        identifier: Database to inspect

    Returns:
        GeoDatabase with current file status
    """
    path = get_database_path(target_dir, identifier)

    if not path.is_file():
        return GeoDatabase(identifier=identifier, path=path, exists=False)

    stat = path.stat()
    return GeoDatabase(
        identifier=identifier,
        path=path,
        exists=True,
        size_mb=stat.st_size / (1024 * 1024),
        modified=datetime.fromtimestamp(stat.st_mtime),
    )
