"""Classless static routes (RFC 3442)."""

from __future__ import annotations

import ipaddress
from dataclasses import dataclass
from typing import Tuple

from .option import Option, OptionParseError, ShortByteStreamError
from .types import OptionCode


@dataclass
class Route:
    """A destination network and the router that reaches it."""

    dest: ipaddress.IPv4Network
    router: ipaddress.IPv4Address

    def __post_init__(self) -> None:
        self.dest = ipaddress.IPv4Network(self.dest, strict=False)
        self.router = ipaddress.IPv4Address(self.router)

    def to_bytes(self) -> bytes:
        """Encode as mask width, significant destination octets, router."""
        ones = self.dest.prefixlen
        significant = self.dest.network_address.packed[: (ones + 7) // 8]
        return bytes([ones]) + significant + self.router.packed

    @classmethod
    def unpack_from(cls, data, offset: int = 0) -> Tuple["Route", int]:
        """Decode one route at ``offset``; return it and the next offset."""
        data = bytes(data)
        if offset >= len(data):
            raise ShortByteStreamError("short byte stream: missing route mask length")
        mask_size = data[offset]
        offset += 1
        if mask_size > 32:
            raise OptionParseError(f"invalid mask length {mask_size} in route option")
        dst_len = (mask_size + 7) // 8
        end = offset + dst_len + 4
        if end > len(data):
            raise ShortByteStreamError(
                f"short byte stream: route needs {dst_len + 4} bytes, "
                f"have {len(data) - offset}"
            )
        dest = data[offset:offset + dst_len].ljust(4, b"\x00")
        router = data[offset + dst_len:end]
        network = ipaddress.IPv4Network((dest, mask_size), strict=False)
        return cls(network, ipaddress.IPv4Address(router)), end

    def __str__(self) -> str:
        return f"route to {self.dest} via {self.router}"


class Routes(list):
    """A collection of classless static routes."""

    @classmethod
    def from_bytes(cls, data) -> "Routes":
        data = bytes(data)
        routes = cls()
        offset = 0
        while offset < len(data):
            route, offset = Route.unpack_from(data, offset)
            routes.append(route)
        return routes

    def to_bytes(self) -> bytes:
        return b"".join(route.to_bytes() for route in self)

    def __str__(self) -> str:
        return "; ".join(str(route) for route in self)


def opt_classless_static_route(*routes) -> Option:
    """Build a classless static route option."""
    return Option(OptionCode.CLASSLESS_STATIC_ROUTE, Routes(routes))