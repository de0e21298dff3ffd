"""IP geolocation and network ownership lookups over local GeoIP databases."""

from geolocator.config import ResolverConfig, load_config, validate_config
from geolocator.errors import (
    AddressNotFoundError,
    ErrorKind,
    GeoLookupError,
    InvalidAddressError,
    InvalidDatabaseError,
)
from geolocator.geo.database import ALL_DATABASES, DatabaseIdentifier
from geolocator.models.locations import (
    ContinentInfo,
    CountryInfo,
    LocationInfo,
    OrganizationInfo,
)
from geolocator.resolver import LocationResolver

__version__ = "0.1.0"

__all__ = [
    "LocationResolver",
    "ResolverConfig",
    "load_config",
    "validate_config",
    "ContinentInfo",
    "CountryInfo",
    "OrganizationInfo",
    "LocationInfo",
    "DatabaseIdentifier",
    "ALL_DATABASES",
    "ErrorKind",
    "GeoLookupError",
    "InvalidAddressError",
    "AddressNotFoundError",
    "InvalidDatabaseError",
]
