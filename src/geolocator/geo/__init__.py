"""GeoIP database access."""

from .address import anonymize_ip, validate_ipv4
from .database import (
    ALL_DATABASES,
    DATABASE_EXTENSION,
    DatabaseIdentifier,
    GeoDatabase,
    expand_identifiers,
    get_database_info,
    get_database_path,
    parse_identifier,
)
from .reader import (
    DatabaseMetadata,
    GeoDatabaseReader,
    MaxMindReader,
    ReaderFactory,
    open_reader,
)

__all__ = [
    "anonymize_ip",
    "validate_ipv4",
    "ALL_DATABASES",
    "DATABASE_EXTENSION",
    "DatabaseIdentifier",
    "GeoDatabase",
    "parse_identifier",
    "expand_identifiers",
    "get_database_path",
    "get_database_info",
    "DatabaseMetadata",
    "GeoDatabaseReader",
    "MaxMindReader",
    "ReaderFactory",
    "open_reader",
]
