import pytest

from dhcpwire.option import OptionParseError
from dhcpwire.types import OptionCode
from dhcpwire.vivc import VIVCIdentifier, VIVCIdentifiers, opt_vivc

SAMPLE = VIVCIdentifiers(
    [
        VIVCIdentifier(9, b"CiscoIdentifier"),
        VIVCIdentifier(18, b"WellfleetIdentifier"),
    ]
)
SAMPLE_RAW = (
    bytes([0, 0, 0, 9, 0x0F])
    + b"CiscoIdentifier"
    + bytes([0, 0, 0, 0x12, 0x13])
    + b"WellfleetIdentifier"
)


def test_opt_vivc_interface_methods():
    opt = opt_vivc(*SAMPLE)
    assert opt.code == OptionCode.VENDOR_IDENTIFYING_VENDOR_CLASS
    assert opt.value.to_bytes() == SAMPLE_RAW
    assert str(opt) == (
        "Vendor-Identifying Vendor Class: 9:'CiscoIdentifier', 18:'WellfleetIdentifier'"
    )


def test_parse_vivc():
    assert VIVCIdentifiers.from_bytes(SAMPLE_RAW) == SAMPLE


def test_parse_vivc_identifier_too_long():
    data = bytearray(SAMPLE_RAW)
    data[4] = 40
    with pytest.raises(OptionParseError):
        VIVCIdentifiers.from_bytes(bytes(data))


def test_parse_vivc_shorter_length():
    data = bytearray(SAMPLE_RAW)
    data[4] = 5
    ids = VIVCIdentifiers.from_bytes(bytes(data[:10]))
    assert ids[0].data == b"Cisco"
    assert len(ids) == 1


def test_empty():
    ids = VIVCIdentifiers.from_bytes(b"")
    assert ids == []
    assert str(ids) == ""