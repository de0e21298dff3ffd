"""GeoIP database reader."""

import logging
from pathlib import Path
from typing import Any, Callable, Protocol

import geoip2.database
import geoip2.errors
import maxminddb

from geolocator.errors import (
    AddressNotFoundError,
    InvalidAddressError,
    InvalidDatabaseError,
)
from geolocator.geo.database import DatabaseIdentifier

logger = logging.getLogger(__name__)

# Metadata object of the underlying database, passed through as-is. Its class
# differs between the C extension and the pure Python maxminddb reader.
DatabaseMetadata = Any


class GeoDatabaseReader(Protocol):
    """Protocol for readers of a single opened GeoIP database.

    A reader is a scoped resource: it is opened for one query and closed
    when the query returns, on success or failure.
    """

    def lookup(self, ip_address: str) -> Any:
        """Look up the record for an address.

        The shape of the record depends on the database type (ASN record
        vs. city/country record).

        Raises:
            AddressNotFoundError: If the database has no entry for the address
            InvalidDatabaseError: If the database cannot answer the query
        """
        ...

    def metadata(self) -> DatabaseMetadata:
        """Return the database metadata descriptor."""
        ...

    def close(self) -> None:
        ...

    def __enter__(self) -> "GeoDatabaseReader":
        ...

    def __exit__(self, *args) -> None:
        ...


ReaderFactory = Callable[[Path, DatabaseIdentifier], GeoDatabaseReader]


class MaxMindReader:
    """Reader for a MaxMind GeoLite2/GeoIP2 database file."""

    def __init__(self, db_path: Path, identifier: DatabaseIdentifier):
        """Open the database file.

        Args:
            db_path: Path to the .mmdb file
            identifier: Which database the file holds, selects the query type

        Raises:
            InvalidDatabaseError: If the file is missing, unreadable or not a
                valid MaxMind database
        """
        if not db_path.is_file():
            raise InvalidDatabaseError(db_path, "file not found")

        try:
            self._reader = geoip2.database.Reader(str(db_path))
        except maxminddb.InvalidDatabaseError as e:
            logger.warning(f"Failed to open GeoIP database {db_path}: {e}")
            raise InvalidDatabaseError(db_path, str(e)) from e
        except OSError as e:
            logger.warning(f"Failed to read GeoIP database {db_path}: {e}")
            raise InvalidDatabaseError(db_path, str(e)) from e

        self._db_path = db_path
        self._identifier = identifier
        logger.debug(f"Opened {identifier.value} database {db_path}")

    @property
    def identifier(self) -> DatabaseIdentifier:
        return self._identifier

    def lookup(self, ip_address: str) -> Any:
        """Look up an address with the query matching the database type.

        Args:
            ip_address: Normalized IPv4 address string

        Returns:
            geoip2 ASN, City or Country model
        """
        if self._identifier is DatabaseIdentifier.ASN:
            query = self._reader.asn
        elif self._identifier is DatabaseIdentifier.CITY:
            query = self._reader.city
        else:
            query = self._reader.country

        try:
            return query(ip_address)
        except geoip2.errors.AddressNotFoundError as e:
            logger.debug(f"{ip_address} not found in {self._identifier.value} database")
            raise AddressNotFoundError(ip_address, self._identifier.value) from e
        except maxminddb.InvalidDatabaseError as e:
            logger.warning(f"Corrupt GeoIP database {self._db_path}: {e}")
            raise InvalidDatabaseError(self._db_path, str(e)) from e
        except TypeError as e:
            # geoip2 raises TypeError when the file holds another database type
            logger.warning(f"GeoIP database type mismatch for {self._db_path}: {e}")
            raise InvalidDatabaseError(self._db_path, str(e)) from e
        except ValueError as e:
            raise InvalidAddressError(ip_address) from e

    def metadata(self) -> DatabaseMetadata:
        return self._reader.metadata()

    def close(self):
        """Close the database reader."""
        self._reader.close()

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()


def open_reader(db_path: Path, identifier: DatabaseIdentifier) -> GeoDatabaseReader:
    """Default reader factory: open a MaxMind database file."""
    return MaxMindReader(db_path, identifier)
