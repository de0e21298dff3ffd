"""Location resolution facade over the GeoIP databases."""

import logging
from pathlib import Path
from typing import Any, Optional

from geolocator.config import ResolverConfig
from geolocator.errors import AddressNotFoundError
from geolocator.geo.address import anonymize_ip
from geolocator.geo.database import (
    ALL_DATABASES,
    DatabaseIdentifier,
    GeoDatabase,
    expand_identifiers,
    get_database_info,
    get_database_path,
    parse_identifier,
)
from geolocator.geo.reader import DatabaseMetadata, ReaderFactory, open_reader
from geolocator.models.locations import (
    ContinentInfo,
    CountryInfo,
    LocationInfo,
    OrganizationInfo,
)

logger = logging.getLogger(__name__)


def _require(value: Any, field: str, ip_address: str, database: DatabaseIdentifier) -> Any:
    """Return value, or fail the lookup if the record lacks it."""
    if value is None:
        raise AddressNotFoundError(ip_address, database.value, reason=f"has no {field}")
    return value


class LocationResolver:
    """Resolve IPv4 addresses to continent, country, organization and location.

    Every lookup anonymizes the address to its /24 network first, so an
    individual host address never reaches a database. A reader is opened
    for each query and closed before the call returns.

    The resolver holds no mutable state and can be shared between threads.
    """

    def __init__(self, config: ResolverConfig, reader_factory: ReaderFactory = open_reader):
        """Initialize resolver.

        Args:
            config: Resolver configuration
            reader_factory: Callable(path, identifier) opening a database
                reader. Defaults to MaxMind database files.
        """
        self._config = config
        self._reader_factory = reader_factory

    @property
    def target_dir(self) -> Path:
        return self._config.target_dir

    def database_path(self, identifier: DatabaseIdentifier) -> Path:
        return get_database_path(self._config.target_dir, identifier)

    def database_exists(self, identifier: DatabaseIdentifier) -> bool:
        return self.database_path(identifier).is_file()

    def is_valid_database_identifier(self, identifier) -> bool:
        """Check if identifier names one of the asn, city or country databases."""
        return (
            isinstance(identifier, (str, DatabaseIdentifier))
            and parse_identifier(identifier) is not None
        )

    def _lookup(self, identifier: DatabaseIdentifier, ip_address: str) -> Any:
        """Open the database, query one anonymized address and close it again."""
        path = self.database_path(identifier)
        logger.debug(f"Looking up {ip_address} in {identifier.value} database")
        with self._reader_factory(path, identifier) as reader:
            return reader.lookup(ip_address)

    def resolve_continent(self, ip_address: str) -> ContinentInfo:
        """Resolve the continent of an address.

        Raises:
            InvalidAddressError: If ip_address is not a valid IPv4 address
            AddressNotFoundError: If the country database has no entry
            InvalidDatabaseError: If the country database is missing or corrupt
        """
        address = anonymize_ip(ip_address)
        record = self._lookup(DatabaseIdentifier.COUNTRY, address)
        return self._continent_from(record, address, DatabaseIdentifier.COUNTRY)

    def resolve_country(self, ip_address: str) -> CountryInfo:
        """Resolve the country of an address.

        Raises:
            InvalidAddressError: If ip_address is not a valid IPv4 address
            AddressNotFoundError: If the country database has no entry
            InvalidDatabaseError: If the country database is missing or corrupt
        """
        address = anonymize_ip(ip_address)
        record = self._lookup(DatabaseIdentifier.COUNTRY, address)
        return self._country_from(record, address, DatabaseIdentifier.COUNTRY)

    def resolve_organization(self, ip_address: str) -> OrganizationInfo:
        """Resolve the autonomous system owning an address.

        Raises:
            InvalidAddressError: If ip_address is not a valid IPv4 address
            AddressNotFoundError: If the asn database has no entry
            InvalidDatabaseError: If the asn database is missing or corrupt
        """
        address = anonymize_ip(ip_address)
        record = self._lookup(DatabaseIdentifier.ASN, address)
        return self._organization_from(record, address)

    def resolve_location(self, ip_address: str) -> LocationInfo:
        """Resolve the full location of an address.

        Combines the asn and city databases, both queried with the same
        anonymized address. Fails as a whole if either lookup fails.

        Raises:
            InvalidAddressError: If ip_address is not a valid IPv4 address
            AddressNotFoundError: If either database has no entry
            InvalidDatabaseError: If either database is missing or corrupt
        """
        address = anonymize_ip(ip_address)

        asn_record = self._lookup(DatabaseIdentifier.ASN, address)
        city_record = self._lookup(DatabaseIdentifier.CITY, address)

        city = DatabaseIdentifier.CITY
        location = city_record.location
        return LocationInfo(
            continent=self._continent_from(city_record, address, city),
            country=self._country_from(city_record, address, city),
            organization=self._organization_from(asn_record, address),
            latitude=_require(location.latitude, "latitude", address, city),
            longitude=_require(location.longitude, "longitude", address, city),
            time_zone=_require(location.time_zone, "time zone", address, city),
        )

    def get_database_metadata(self, identifier) -> Optional[DatabaseMetadata]:
        """Get metadata of a database.

        Args:
            identifier: One of "asn", "city" or "country", or a
                DatabaseIdentifier

        Returns:
            Metadata descriptor, or None if the identifier is unknown or the
            database file does not exist

        Raises:
            InvalidDatabaseError: If the file exists but cannot be opened
        """
        if not self.is_valid_database_identifier(identifier):
            return None

        database = parse_identifier(identifier)
        if not self.database_exists(database):
            logger.debug(f"No {database.value} database in {self.target_dir}")
            return None

        with self._reader_factory(self.database_path(database), database) as reader:
            return reader.metadata()

    def get_all_database_metadata(self) -> dict[DatabaseIdentifier, Optional[DatabaseMetadata]]:
        """Get metadata of every database, None for those not present."""
        return {
            identifier: self.get_database_metadata(identifier)
            for identifier in expand_identifiers(ALL_DATABASES)
        }

    def get_database_status(self, identifier=ALL_DATABASES) -> list[GeoDatabase]:
        """Get on-disk status of one database, or of all with "all".

        No database is opened. Unknown identifiers give an empty list.
        """
        return [
            get_database_info(self.target_dir, database)
            for database in expand_identifiers(identifier)
        ]

    @staticmethod
    def _continent_from(record: Any, address: str, database: DatabaseIdentifier) -> ContinentInfo:
        continent = record.continent
        return ContinentInfo(
            code=_require(continent.code, "continent code", address, database),
            name=_require(continent.name, "continent name", address, database),
        )

    @staticmethod
    def _country_from(record: Any, address: str, database: DatabaseIdentifier) -> CountryInfo:
        country = record.country
        return CountryInfo(
            iso_code=_require(country.iso_code, "country code", address, database),
            name=_require(country.name, "country name", address, database),
            is_eu_member=bool(country.is_in_european_union),
        )

    @staticmethod
    def _organization_from(record: Any, address: str) -> OrganizationInfo:
        asn = DatabaseIdentifier.ASN
        return OrganizationInfo(
            asn=_require(record.autonomous_system_number, "autonomous system number", address, asn),
            name=_require(record.autonomous_system_organization, "organization", address, asn),
        )
