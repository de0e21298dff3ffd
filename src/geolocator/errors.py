"""Lookup error types."""

from enum import Enum


class ErrorKind(Enum):
    INVALID_ADDRESS = "invalid_address"
    ADDRESS_NOT_FOUND = "address_not_found"
    INVALID_DATABASE = "invalid_database"


class GeoLookupError(Exception):
    """Base class for every failure raised by a lookup.

    Callers that do not care about the specific failure can catch this class
    and branch on ``kind``.
    """

    kind: ErrorKind

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidAddressError(GeoLookupError):
    """Input is not a syntactically valid IPv4 address."""

    kind = ErrorKind.INVALID_ADDRESS

    def __init__(self, ip_address: object):
        super().__init__(f"Invalid IP address: {ip_address!r}")
        self.ip_address = ip_address


class AddressNotFoundError(GeoLookupError):
    """Address has no usable entry in the queried database."""

    kind = ErrorKind.ADDRESS_NOT_FOUND

    def __init__(self, ip_address: str, database: str, reason: str = "not found"):
        super().__init__(f"Address {ip_address} {reason} in {database} database")
        self.ip_address = ip_address
        self.database = database


class InvalidDatabaseError(GeoLookupError):
    """Database file is missing, unreadable or structurally invalid."""

    kind = ErrorKind.INVALID_DATABASE

    def __init__(self, path, reason: str):
        super().__init__(f"Invalid GeoIP database {path}: {reason}")
        self.path = path
        self.reason = reason
