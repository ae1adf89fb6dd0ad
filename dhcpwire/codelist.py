"""The parameter request list option (RFC 2132, Section 9.8)."""

from __future__ import annotations

from typing import Iterable

from .option import Option, _ByteReader
from .types import OptionCode


class OptionCodeList(list):
    """A list of DHCP option codes without duplicates added through ``add``."""

    def __init__(self, codes: Iterable = ()) -> None:
        super().__init__(codes)

    def add(self, *codes) -> None:
        """Append each code that is not in the list yet."""
        for code in codes:
            if code not in self:
                self.append(code)

    @classmethod
    def from_bytes(cls, data) -> "OptionCodeList":
        reader = _ByteReader(data)
        codes = cls()
        while reader.has(1):
            codes.append(OptionCode(reader.read8()))
        reader.finish()
        return codes

    def to_bytes(self) -> bytes:
        return bytes(int(code) for code in self)

    def __str__(self) -> str:
        return ", ".join(str(code) for code in sorted(self, key=int))


def opt_parameter_request_list(*codes) -> Option:
    """Build a parameter request list option from option codes."""
    return Option(OptionCode.PARAMETER_REQUEST_LIST, OptionCodeList(codes))