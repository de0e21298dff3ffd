"""Shared fixtures: in-memory database readers."""

from types import SimpleNamespace

import pytest

from geolocator.config import ResolverConfig
from geolocator.errors import AddressNotFoundError
from geolocator.geo.database import DatabaseIdentifier
from geolocator.resolver import LocationResolver


def country_record(iso_code="US", name="United States", eu=False,
                   continent_code="NA", continent_name="North America"):
    return SimpleNamespace(
        continent=SimpleNamespace(code=continent_code, name=continent_name),
        country=SimpleNamespace(iso_code=iso_code, name=name, is_in_european_union=eu),
    )


def city_record(latitude=37.751, longitude=-97.822, time_zone="America/Chicago", **kwargs):
    record = country_record(**kwargs)
    record.location = SimpleNamespace(latitude=latitude, longitude=longitude, time_zone=time_zone)
    return record


def asn_record(number=64496, organization="Example Networks"):
    return SimpleNamespace(
        autonomous_system_number=number,
        autonomous_system_organization=organization,
    )


class FakeReader:
    """In-memory reader keyed by exact address."""

    def __init__(self, identifier, records, metadata=None):
        self.identifier = identifier
        self.records = records
        self._metadata = metadata
        self.lookups = []
        self.closed = False

    def lookup(self, ip_address):
        self.lookups.append(ip_address)
        if ip_address not in self.records:
            raise AddressNotFoundError(ip_address, self.identifier.value)
        return self.records[ip_address]

    def metadata(self):
        return self._metadata

    def close(self):
        self.closed = True

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()


class FakeReaderFactory:
    """Reader factory serving FakeReaders and recording every open."""

    def __init__(self, databases=None):
        self.databases = databases or {}
        self.opened = []

    def __call__(self, path, identifier):
        reader = FakeReader(identifier, self.databases.get(identifier, {}),
                            metadata={"database_type": identifier.value})
        self.opened.append((path, reader))
        return reader

    @property
    def call_count(self):
        return len(self.opened)

    def readers(self, identifier):
        return [reader for _, reader in self.opened if reader.identifier is identifier]


@pytest.fixture
def factory():
    return FakeReaderFactory({
        DatabaseIdentifier.COUNTRY: {
            "203.0.113.0": country_record(),
            "192.0.2.0": country_record(iso_code="DE", name="Germany", eu=True,
                                        continent_code="EU", continent_name="Europe"),
        },
        DatabaseIdentifier.CITY: {
            "192.0.2.0": city_record(latitude=52.52, longitude=13.405, time_zone="Europe/Berlin",
                                     iso_code="DE", name="Germany", eu=True,
                                     continent_code="EU", continent_name="Europe"),
            "198.51.100.0": city_record(),
        },
        DatabaseIdentifier.ASN: {
            "192.0.2.0": asn_record(64500, "Example Hosting GmbH"),
            "203.0.113.0": asn_record(),
        },
    })


@pytest.fixture
def resolver(tmp_path, factory):
    return LocationResolver(ResolverConfig(target_dir=tmp_path), reader_factory=factory)
