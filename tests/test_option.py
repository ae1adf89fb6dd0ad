import pytest

from dhcpwire.option import (
    InvalidOptionsError,
    Option,
    OptionParseError,
    ShortByteStreamError,
)
from dhcpwire.types import GenericOptionCode, MessageType, OptionCode
from dhcpwire.values import IP


class _RawValue:
    def __init__(self, data):
        self.data = bytes(data)

    def to_bytes(self):
        return self.data

    def __str__(self):
        return "[" + " ".join(str(b) for b in self.data) + "]"


class _MultiLineValue:
    def to_bytes(self):
        return b""

    def __str__(self):
        return "\n    first\n    second"


def test_option_string():
    o = Option(OptionCode.DHCP_MESSAGE_TYPE, MessageType.DISCOVER)
    assert str(o) == "DHCP Message Type: DISCOVER"


def test_option_string_unknown():
    o = Option(GenericOptionCode(102), _RawValue([int(MessageType.DISCOVER)]))
    assert str(o) == "unknown (102): [1]"


def test_option_value_to_bytes():
    o = Option(OptionCode.DHCP_MESSAGE_TYPE, _RawValue([int(MessageType.DISCOVER)]))
    assert o.value.to_bytes() == b"\x01"


def test_option_multiline_value_goes_on_next_line():
    o = Option(OptionCode.RELAY_AGENT_INFORMATION, _MultiLineValue())
    assert str(o) == "Relay Agent Information:\n\n    first\n    second"


def test_option_equality():
    a = Option(OptionCode.DHCP_MESSAGE_TYPE, MessageType.ACK)
    b = Option(OptionCode.DHCP_MESSAGE_TYPE, MessageType(5))
    assert a == b
    assert a != Option(OptionCode.DHCP_MESSAGE_TYPE, MessageType.NAK)


def test_short_stream_error_is_parse_error():
    with pytest.raises(ShortByteStreamError):
        IP.from_bytes(b"\xc0\xa8")
    with pytest.raises(OptionParseError):
        IP.from_bytes(b"")


def test_trailing_bytes_are_invalid():
    with pytest.raises(InvalidOptionsError):
        IP.from_bytes(b"\xc0\xa8\x00\x01\x02")
    with pytest.raises(ValueError):
        IP.from_bytes(b"\xc0\xa8\x00\x01\x02")