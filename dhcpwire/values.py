"""Typed DHCPv4 option values (RFC 2132 and RFC 3004) and option builders."""

from __future__ import annotations

import ipaddress
from datetime import timedelta
from typing import Iterable, List, Mapping, Optional

from .option import Option, OptionParseError, _ByteReader
from .types import MessageType, OptionCode

MAX_LEASE_TIME = timedelta(seconds=0xFFFFFFFF)


class IP(ipaddress.IPv4Address):
    """A single IPv4 address option value (RFC 2132, Sections 5.3, 9.1, 9.7)."""

    @classmethod
    def from_bytes(cls, data) -> "IP":
        reader = _ByteReader(data)
        packed = reader.read(4)
        reader.finish()
        return cls(packed)

    def to_bytes(self) -> bytes:
        return self.packed


class IPs(list):
    """A list of IPv4 addresses (RFC 2132, Sections 3.5-3.13, 8.x)."""

    def __init__(self, ips: Iterable = ()) -> None:
        super().__init__(ipaddress.IPv4Address(ip) for ip in ips)

    @classmethod
    def from_bytes(cls, data) -> "IPs":
        reader = _ByteReader(data)
        if not len(reader):
            raise OptionParseError("IP DHCP options must always list at least one IP")
        ips = cls()
        while reader.has(4):
            ips.append(ipaddress.IPv4Address(reader.read(4)))
        reader.finish()
        return ips

    def to_bytes(self) -> bytes:
        return b"".join(ipaddress.IPv4Address(ip).packed for ip in self)

    def __str__(self) -> str:
        return ", ".join(str(ip) for ip in self)


def _format_fraction(value: int, unit: int) -> str:
    whole, frac = divmod(value, unit)
    if not frac:
        return str(whole)
    digits = len(str(unit)) - 1
    return f"{whole}." + f"{frac:0{digits}d}".rstrip("0")


def _format_duration(td: timedelta) -> str:
    ns = ((td.days * 86400 + td.seconds) * 1_000_000 + td.microseconds) * 1000
    if ns == 0:
        return "0s"
    sign = "-" if ns < 0 else ""
    ns = abs(ns)
    if ns < 1_000_000_000:
        for unit, size in (("ms", 1_000_000), ("µs", 1_000), ("ns", 1)):
            if ns >= size:
                return sign + _format_fraction(ns, size) + unit
    total_seconds, frac = divmod(ns, 1_000_000_000)
    hours, rem = divmod(total_seconds, 3600)
    minutes, seconds = divmod(rem, 60)
    text = _format_fraction(seconds * 1_000_000_000 + frac, 1_000_000_000) + "s"
    if hours or minutes:
        text = f"{minutes}m" + text
    if hours:
        text = f"{hours}h" + text
    return sign + text


class Duration(timedelta):
    """The IP address lease time option value (RFC 2132, Section 9.2)."""

    @classmethod
    def from_bytes(cls, data) -> "Duration":
        reader = _ByteReader(data)
        seconds = reader.read32()
        reader.finish()
        return cls(seconds=seconds)

    def to_bytes(self) -> bytes:
        micros = (self.days * 86400 + self.seconds) * 1_000_000 + self.microseconds
        seconds = abs(micros) // 1_000_000
        if micros < 0:
            seconds = -seconds
        return (seconds & 0xFFFFFFFF).to_bytes(4, "big")

    def __str__(self) -> str:
        return _format_duration(self)


class Uint16(int):
    """A 16-bit unsigned option value (RFC 2132, Section 9.10)."""

    def __new__(cls, value: int = 0):
        value = int(value)
        if not 0 <= value <= 0xFFFF:
            raise ValueError(f"Uint16 out of range: {value}")
        return super().__new__(cls, value)

    @classmethod
    def from_bytes(cls, data) -> "Uint16":  # type: ignore[override]
        reader = _ByteReader(data)
        value = reader.read16()
        reader.finish()
        return cls(value)

    def to_bytes(self) -> bytes:  # type: ignore[override]
        return int(self).to_bytes(2, "big")


class IPMask(bytes):
    """The subnet mask option value (RFC 2132, Section 3.3)."""

    @classmethod
    def from_bytes(cls, data) -> "IPMask":  # type: ignore[override]
        reader = _ByteReader(data)
        mask = reader.read(4)
        reader.finish()
        return cls(mask)

    def to_bytes(self) -> bytes:
        return bytes(self[:4])

    def __str__(self) -> str:
        return self.hex()


class Strings(list):
    """A list of length-prefixed strings (RFC 3004)."""

    @classmethod
    def from_bytes(cls, data) -> "Strings":
        reader = _ByteReader(data)
        if not len(reader):
            raise OptionParseError(
                "Strings DHCP option must always list at least one String"
            )
        result = cls()
        while reader.has(1):
            length = reader.read8()
            if length == 0:
                raise OptionParseError("DHCP Strings must have length greater than 0")
            result.append(reader.read(length).decode("utf-8", "surrogateescape"))
        reader.finish()
        return result

    def to_bytes(self) -> bytes:
        out = bytearray()
        for item in self:
            encoded = item.encode("utf-8", "surrogateescape")
            if len(encoded) > 0xFF:
                raise ValueError(f"string too long for option: {len(encoded)} bytes")
            out.append(len(encoded))
            out += encoded
        return bytes(out)

    def __str__(self) -> str:
        return ", ".join(self)


def get_ip(code, options: Mapping) -> Optional[ipaddress.IPv4Address]:
    """Return option ``code`` parsed as one IPv4 address, or None."""
    data = options.get(int(code))
    if data is None:
        return None
    try:
        return ipaddress.IPv4Address(IP.from_bytes(data).packed)
    except OptionParseError:
        return None


def get_ips(code, options: Mapping) -> Optional[List[ipaddress.IPv4Address]]:
    """Return option ``code`` parsed as a list of IPv4 addresses, or None."""
    data = options.get(int(code))
    if data is None:
        return None
    try:
        return list(IPs.from_bytes(data))
    except OptionParseError:
        return None


def get_uint16(code, options: Mapping) -> int:
    """Return option ``code`` parsed as a uint16; KeyError if absent."""
    data = options.get(int(code))
    if data is None:
        raise KeyError(f"option not present: {code}")
    return int(Uint16.from_bytes(data))


def opt_broadcast_address(ip) -> Option:
    return Option(OptionCode.BROADCAST_ADDRESS, IP(ip))


def opt_requested_ip_address(ip) -> Option:
    return Option(OptionCode.REQUESTED_IP_ADDRESS, IP(ip))


def opt_server_identifier(ip) -> Option:
    return Option(OptionCode.SERVER_IDENTIFIER, IP(ip))


def opt_ip_address_lease_time(duration) -> Option:
    """Build a lease time option from a timedelta or a number of seconds."""
    if isinstance(duration, timedelta):
        value = Duration(
            days=duration.days,
            seconds=duration.seconds,
            microseconds=duration.microseconds,
        )
    else:
        value = Duration(seconds=duration)
    return Option(OptionCode.IP_ADDRESS_LEASE_TIME, value)


def opt_router(*routers) -> Option:
    return Option(OptionCode.ROUTER, IPs(routers))


def opt_ntp_servers(*servers) -> Option:
    return Option(OptionCode.NTP_SERVERS, IPs(servers))


def opt_dns(*servers) -> Option:
    return Option(OptionCode.DOMAIN_NAME_SERVER, IPs(servers))


def opt_max_message_size(size) -> Option:
    return Option(OptionCode.MAXIMUM_DHCP_MESSAGE_SIZE, Uint16(size))


def opt_message_type(message_type) -> Option:
    return Option(OptionCode.DHCP_MESSAGE_TYPE, MessageType(message_type))


def opt_subnet_mask(mask) -> Option:
    """Build a subnet mask option from bytes, a dotted string or an address."""
    if isinstance(mask, str):
        mask = ipaddress.IPv4Address(mask).packed
    elif isinstance(mask, ipaddress.IPv4Address):
        mask = mask.packed
    return Option(OptionCode.SUBNET_MASK, IPMask(mask))


def opt_rfc3004_user_class(classes) -> Option:
    return Option(OptionCode.USER_CLASS_INFORMATION, Strings(classes))