from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class ContinentInfo:
    code: str  # e.g., "EU"
    name: str

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class CountryInfo:
    iso_code: str  # ISO 3166-1 alpha-2 (e.g., "US")
    name: str
    is_eu_member: bool

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class OrganizationInfo:
    asn: int  # Autonomous system number
    name: str

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class LocationInfo:
    continent: ContinentInfo
    country: CountryInfo
    organization: OrganizationInfo
    latitude: float
    longitude: float
    time_zone: str  # IANA name (e.g., "Europe/Berlin")

    def __str__(self) -> str:
        """Human-readable location string."""
        return (
            f"{self.country.iso_code}, {self.continent.name} "
            f"(AS{self.organization.asn} {self.organization.name})"
        )

    def to_dict(self) -> dict:
        """Convert to a nested dictionary suitable for JSON output."""
        return asdict(self)
