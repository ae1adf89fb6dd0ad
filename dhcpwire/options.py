"""DHCPv4 option collections, their wire form and human-readable rendering."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, ClassVar, Dict, Optional

from .codelist import OptionCodeList
from .option import InvalidOptionsError, Option, ShortByteStreamError, _ByteReader
from .routes import Routes
from .types import MessageType, OptionCode, _ByteCode
from .values import IP, IPMask, IPs, Duration, Strings, Uint16
from .vivc import VIVCIdentifiers

_OPT_PAD = 0
_OPT_END = 255


class _RawValue(bytes):
    """Undecoded option data, shown as a list of byte values."""

    def __str__(self) -> str:
        return "[" + " ".join(str(b) for b in self) + "]"


class _Text(str):
    """Option data shown as text."""

    @classmethod
    def from_bytes(cls, data) -> "_Text":
        return cls(bytes(data).decode("utf-8", "replace"))


@dataclass
class OptionHumanizer:
    """Names option codes and renders option values for one option space."""

    value_humanizer: Callable[[Any, bytes], Any]
    code_humanizer: Callable[[int], Any]

    def stringify(self, code: int, data: bytes) -> str:
        """Render one option as ``name: value``."""
        named = self.code_humanizer(code)
        value = self.value_humanizer(named, data)
        return f"{named}: {value}"


class Options(dict):
    """A mapping from option code to its (concatenated) raw data."""

    @classmethod
    def from_list(cls, *options: Option) -> "Options":
        opts = cls()
        for option in options:
            opts.update_option(option)
        return opts

    @classmethod
    def from_bytes(cls, data, check_end: bool = False) -> "Options":
        """Parse options up to the End option; data excludes the magic cookie.

        Repeated options are concatenated (RFC 3396). With ``check_end`` a
        missing End option is an error. Bytes after End must be padding.
        """
        opts = cls()
        data = bytes(data)
        if not data:
            return opts
        reader = _ByteReader(data)
        ended = False
        while len(reader):
            code = reader.read8()
            if code == _OPT_PAD:
                continue
            if code == _OPT_END:
                ended = True
                break
            length = reader.read8()
            chunk = reader.read(length)
            opts[code] = opts.get(code, b"") + chunk
        if check_end and not ended:
            raise ShortByteStreamError("unexpected EOF: missing End option")
        for pad in reader.rest():
            if pad not in (_OPT_PAD, _OPT_END):
                raise InvalidOptionsError("invalid options data after End option")
        return opts

    def update_option(self, option: Option) -> None:
        """Set the option's data, replacing any existing value."""
        self[int(option.code)] = option.value.to_bytes()

    def _sorted_codes(self):
        return sorted(int(code) for code in self)

    def to_bytes(self) -> bytes:
        """Serialise in code order, splitting long values per RFC 3396.

        Pad and End entries are never written.
        """
        out = bytearray()
        for code in self._sorted_codes():
            if code in (_OPT_PAD, _OPT_END):
                continue
            data = bytes(self[code])
            if not data:
                out += bytes([code, 0])
                continue
            for start in range(0, len(data), 0xFF):
                chunk = data[start:start + 0xFF]
                out += bytes([code, len(chunk)])
                out += chunk
        return bytes(out)

    def to_string(self, humanizer: OptionHumanizer) -> str:
        lines = []
        for code in self._sorted_codes():
            text = humanizer.stringify(code, bytes(self[code]))
            if "\n" in text:
                text = text.replace("\n  ", "\n      ")
            lines.append(f"    {text}\n")
        return "".join(lines)

    def summary(self, vendor_decoder=None) -> str:
        """Render options, decoding vendor-specific data with ``vendor_decoder``.

        ``vendor_decoder`` is a callable taking bytes and returning a value
        with a readable ``str()``; it raises ValueError on bad data.
        """
        return self.to_string(
            OptionHumanizer(
                value_humanizer=lambda code, data: parse_option(code, data, vendor_decoder),
                code_humanizer=OptionCode,
            )
        )

    def __str__(self) -> str:
        return self.to_string(_DHCP_HUMANIZER)


class RelaySubOptionCode(_ByteCode):
    """A relay agent information sub-option code (RFC 3046 and later)."""

    _names: ClassVar[Dict[int, str]] = {
        1: "Agent Circuit ID Sub-option",
        2: "Agent Remote ID Sub-option",
        4: "DOCSIS Device Class Sub-option",
        5: "Link Selection Sub-option",
        6: "Subscriber ID Sub-option",
        7: "RADIUS Attributes Sub-option",
        8: "Authentication Sub-option",
        9: "Vendor Specific Sub-option",
        10: "Relay Agent Flags Sub-option",
        11: "Server Identifier Override Sub-option",
        19: "Relay Source Port Sub-option",
        151: "Virtual Subnet Selection Sub-option",
        152: "Virtual Subnet Selection Control Sub-option",
    }

    AGENT_CIRCUIT_ID: ClassVar["RelaySubOptionCode"]
    AGENT_REMOTE_ID: ClassVar["RelaySubOptionCode"]
    DOCSIS_DEVICE_CLASS: ClassVar["RelaySubOptionCode"]
    LINK_SELECTION: ClassVar["RelaySubOptionCode"]
    SUBSCRIBER_ID: ClassVar["RelaySubOptionCode"]
    RADIUS_ATTRIBUTES: ClassVar["RelaySubOptionCode"]
    AUTHENTICATION: ClassVar["RelaySubOptionCode"]
    VENDOR_SPECIFIC_INFORMATION: ClassVar["RelaySubOptionCode"]
    RELAY_AGENT_FLAGS: ClassVar["RelaySubOptionCode"]
    SERVER_IDENTIFIER_OVERRIDE: ClassVar["RelaySubOptionCode"]
    RELAY_SOURCE_PORT: ClassVar["RelaySubOptionCode"]
    VIRTUAL_SUBNET_SELECTION: ClassVar["RelaySubOptionCode"]
    VIRTUAL_SUBNET_SELECTION_CONTROL: ClassVar["RelaySubOptionCode"]


for _attr, _value in (
    ("AGENT_CIRCUIT_ID", 1),
    ("AGENT_REMOTE_ID", 2),
    ("DOCSIS_DEVICE_CLASS", 4),
    ("LINK_SELECTION", 5),
    ("SUBSCRIBER_ID", 6),
    ("RADIUS_ATTRIBUTES", 7),
    ("AUTHENTICATION", 8),
    ("VENDOR_SPECIFIC_INFORMATION", 9),
    ("RELAY_AGENT_FLAGS", 10),
    ("SERVER_IDENTIFIER_OVERRIDE", 11),
    ("RELAY_SOURCE_PORT", 19),
    ("VIRTUAL_SUBNET_SELECTION", 151),
    ("VIRTUAL_SUBNET_SELECTION_CONTROL", 152),
):
    setattr(RelaySubOptionCode, _attr, RelaySubOptionCode(_value))
del _attr, _value


class _RelaySubOptionValue(bytes):
    def __str__(self) -> str:
        text = self.decode("utf-8", "replace")
        return f"{text} ([" + " ".join(str(b) for b in self) + "])"


_RELAY_HUMANIZER = OptionHumanizer(
    value_humanizer=lambda code, data: _RelaySubOptionValue(data),
    code_humanizer=RelaySubOptionCode,
)


class RelayOptions(Options):
    """Relay agent sub-options, named in the relay agent option space."""

    @classmethod
    def from_bytes(cls, data) -> "RelayOptions":  # type: ignore[override]
        return super().from_bytes(data, False)

    def __str__(self) -> str:
        return "\n" + self.to_string(_RELAY_HUMANIZER)


def _user_class(data) -> Any:
    try:
        return Strings.from_bytes(data)
    except ValueError:
        return _Text.from_bytes(data)


_DECODERS: Dict[int, Callable[[bytes], Any]] = {}
for _code in (
    OptionCode.ROUTER,
    OptionCode.DOMAIN_NAME_SERVER,
    OptionCode.NTP_SERVERS,
    OptionCode.SERVER_IDENTIFIER,
):
    _DECODERS[int(_code)] = IPs.from_bytes
for _code in (OptionCode.BROADCAST_ADDRESS, OptionCode.REQUESTED_IP_ADDRESS):
    _DECODERS[int(_code)] = IP.from_bytes
for _code in (
    OptionCode.HOST_NAME,
    OptionCode.DOMAIN_NAME,
    OptionCode.ROOT_PATH,
    OptionCode.CLASS_IDENTIFIER,
    OptionCode.TFTP_SERVER_NAME,
    OptionCode.BOOTFILE_NAME,
):
    _DECODERS[int(_code)] = _Text.from_bytes
del _code
_DECODERS.update(
    {
        int(OptionCode.SUBNET_MASK): IPMask.from_bytes,
        int(OptionCode.DHCP_MESSAGE_TYPE): MessageType.from_bytes,
        int(OptionCode.PARAMETER_REQUEST_LIST): OptionCodeList.from_bytes,
        int(OptionCode.RELAY_AGENT_INFORMATION): RelayOptions.from_bytes,
        int(OptionCode.IP_ADDRESS_LEASE_TIME): Duration.from_bytes,
        int(OptionCode.MAXIMUM_DHCP_MESSAGE_SIZE): Uint16.from_bytes,
        int(OptionCode.USER_CLASS_INFORMATION): _user_class,
        int(OptionCode.VENDOR_IDENTIFYING_VENDOR_CLASS): VIVCIdentifiers.from_bytes,
        int(OptionCode.CLASSLESS_STATIC_ROUTE): Routes.from_bytes,
    }
)


def parse_option(code, data, vendor_decoder: Optional[Callable] = None) -> Any:
    """Decode option data into a readable value; undecodable data stays raw."""
    data = bytes(data)
    if int(code) == int(OptionCode.VENDOR_SPECIFIC_INFORMATION):
        decoder = vendor_decoder
    else:
        decoder = _DECODERS.get(int(code))
    if decoder is not None:
        try:
            return decoder(data)
        except ValueError:
            pass
    return _RawValue(data)


_DHCP_HUMANIZER = OptionHumanizer(value_humanizer=parse_option, code_humanizer=OptionCode)


def opt_relay_agent_info(*options: Option) -> Option:
    """Build a relay agent information option (RFC 3046) from sub-options."""
    return Option(OptionCode.RELAY_AGENT_INFORMATION, RelayOptions.from_list(*options))