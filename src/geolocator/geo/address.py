"""IPv4 validation and anonymization."""

import ipaddress

from geolocator.errors import InvalidAddressError

# Only the /24 network of an address is ever looked up
ANONYMIZED_PREFIX = 24


def validate_ipv4(ip_address: str) -> str:
    """Validate and normalize an IPv4 address string.

    Args:
        ip_address: Address as supplied by the caller. Surrounding whitespace
            is ignored.

    Returns:
        The address in canonical dotted-quad form.

    Raises:
        InvalidAddressError: If the input is not a valid IPv4 address.
            IPv6 addresses are rejected as well.
    """
    if not isinstance(ip_address, str):
        raise InvalidAddressError(ip_address)

    try:
        return str(ipaddress.IPv4Address(ip_address.strip()))
    except ValueError as e:
        raise InvalidAddressError(ip_address) from e


def anonymize_ip(ip_address: str) -> str:
    """Truncate an IPv4 address to its /24 network by zeroing the last octet.

    >>> anonymize_ip("203.0.113.42")
    '203.0.113.0'

    Raises:
        InvalidAddressError: If the input is not a valid IPv4 address.
    """
    address = validate_ipv4(ip_address)
    network = ipaddress.IPv4Network(f"{address}/{ANONYMIZED_PREFIX}", strict=False)
    return str(network.network_address)
