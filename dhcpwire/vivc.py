"""The vendor-identifying vendor class option (RFC 3925)."""

from __future__ import annotations

from dataclasses import dataclass

from .option import Option, _ByteReader
from .types import OptionCode


@dataclass
class VIVCIdentifier:
    """An enterprise number and its opaque vendor class data."""

    ent_id: int
    data: bytes

    def __post_init__(self) -> None:
        self.data = bytes(self.data)


class VIVCIdentifiers(list):
    """A list of vendor-identifying vendor class entries."""

    @classmethod
    def from_bytes(cls, data) -> "VIVCIdentifiers":
        reader = _ByteReader(data)
        ids = cls()
        while reader.has(5):
            ent_id = reader.read32()
            length = reader.read8()
            ids.append(VIVCIdentifier(ent_id, reader.read(length)))
        reader.finish()
        return ids

    def to_bytes(self) -> bytes:
        out = bytearray()
        for ident in self:
            if len(ident.data) > 0xFF:
                raise ValueError(
                    f"vendor class data too long: {len(ident.data)} bytes"
                )
            out += int(ident.ent_id).to_bytes(4, "big")
            out.append(len(ident.data))
            out += ident.data
        return bytes(out)

    def __str__(self) -> str:
        return ", ".join(
            f"{int(ident.ent_id)}:'{ident.data.decode('utf-8', 'replace')}'"
            for ident in self
        )


def opt_vivc(*identifiers) -> Option:
    """Build a vendor-identifying vendor class option."""
    return Option(OptionCode.VENDOR_IDENTIFYING_VENDOR_CLASS, VIVCIdentifiers(identifiers))