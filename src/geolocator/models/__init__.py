"""Result records returned by lookups."""

from geolocator.models.locations import (
    ContinentInfo,
    CountryInfo,
    LocationInfo,
    OrganizationInfo,
)

__all__ = [
    "ContinentInfo",
    "CountryInfo",
    "OrganizationInfo",
    "LocationInfo",
]
