"""The DHCPv4 option pair, parse errors and a bounds-checked byte reader."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


class OptionParseError(ValueError):
    """Raised when option data cannot be decoded."""


class ShortByteStreamError(OptionParseError):
    """Raised when option data ends before a value is complete."""


class InvalidOptionsError(OptionParseError):
    """Raised when option data has a wrong length or stray trailing bytes."""


@dataclass(frozen=True)
class Option:
    """A DHCPv4 option: a one-byte code and a value that serialises itself.

    The value is any object with a ``to_bytes()`` method and a readable
    ``str()``.
    """

    code: Any
    value: Any

    def __str__(self) -> str:
        text = str(self.value)
        if "\n" in text:
            return f"{self.code}:\n{text}"
        return f"{self.code}: {text}"


class _ByteReader:
    """Reads big-endian fields from a byte string, raising on short input."""

    def __init__(self, data) -> None:
        self._data = bytes(data)
        self._pos = 0

    def __len__(self) -> int:
        return len(self._data) - self._pos

    def has(self, n: int) -> bool:
        return len(self) >= n

    def read(self, n: int) -> bytes:
        if n < 0 or len(self) < n:
            raise ShortByteStreamError(
                f"short byte stream: need {n} bytes, have {len(self)}"
            )
        chunk = self._data[self._pos:self._pos + n]
        self._pos += n
        return chunk

    def read8(self) -> int:
        return self.read(1)[0]

    def read16(self) -> int:
        return int.from_bytes(self.read(2), "big")

    def read32(self) -> int:
        return int.from_bytes(self.read(4), "big")

    def rest(self) -> bytes:
        return self.read(len(self))

    def finish(self) -> None:
        """Raise if any bytes are left unread."""
        if len(self):
            raise InvalidOptionsError(
                f"buffer contains {len(self)} unread bytes"
            )