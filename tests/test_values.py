from datetime import timedelta
from ipaddress import IPv4Address

import pytest

from dhcpwire.option import OptionParseError
from dhcpwire.types import MessageType, OptionCode
from dhcpwire.values import (
    IP,
    IPMask,
    IPs,
    Duration,
    Strings,
    Uint16,
    get_ip,
    get_ips,
    get_uint16,
    opt_broadcast_address,
    opt_dns,
    opt_ip_address_lease_time,
    opt_max_message_size,
    opt_message_type,
    opt_ntp_servers,
    opt_requested_ip_address,
    opt_router,
    opt_rfc3004_user_class,
    opt_server_identifier,
    opt_subnet_mask,
)


def test_opt_broadcast_address():
    o = opt_broadcast_address("192.168.0.1")
    assert o.code == OptionCode.BROADCAST_ADDRESS
    assert o.value.to_bytes() == bytes([192, 168, 0, 1])
    assert str(o) == "Broadcast Address: 192.168.0.1"


def test_get_ips():
    assert get_ips(102, {102: b""}) is None
    assert get_ips(102, {102: bytes([192, 168, 0])}) is None
    assert get_ips(102, {102: bytes([192, 168, 0, 1])}) == [IPv4Address("192.168.0.1")]
    assert get_ips(102, {102: bytes([192, 168, 0, 1, 192, 168, 0, 2])}) == [
        IPv4Address("192.168.0.1"),
        IPv4Address("192.168.0.2"),
    ]


def test_get_ip():
    assert get_ip(28, {28: bytes([192, 168, 0, 1])}) == IPv4Address("192.168.0.1")
    assert get_ip(28, {28: bytes([192, 168])}) is None
    assert get_ip(28, {}) is None


def test_parse_ip():
    with pytest.raises(OptionParseError):
        IP.from_bytes(b"")
    with pytest.raises(OptionParseError):
        IP.from_bytes(bytes([192, 168, 0]))
    assert IP.from_bytes(bytes([192, 168, 0, 1])) == IPv4Address("192.168.0.1")


def test_opt_requested_ip_address():
    o = opt_requested_ip_address(IPv4Address("192.168.0.1"))
    assert o.code == OptionCode.REQUESTED_IP_ADDRESS
    assert o.value.to_bytes() == bytes([192, 168, 0, 1])
    assert str(o) == "Requested IP Address: 192.168.0.1"


def test_opt_server_identifier():
    o = opt_server_identifier(bytes([192, 168, 0, 1]))
    assert o.code == OptionCode.SERVER_IDENTIFIER
    assert o.value.to_bytes() == bytes([192, 168, 0, 1])
    assert str(o) == "Server Identifier: 192.168.0.1"


def test_parse_ips():
    ips = IPs.from_bytes(bytes([192, 168, 0, 10, 192, 168, 0, 20]))
    assert list(ips) == [IPv4Address("192.168.0.10"), IPv4Address("192.168.0.20")]
    with pytest.raises(OptionParseError):
        IPs.from_bytes(bytes([1, 1, 1]))
    with pytest.raises(OptionParseError):
        IPs.from_bytes(b"")


def test_opt_domain_name_server():
    o = opt_dns("192.168.0.1", "192.168.0.10")
    assert o.code == OptionCode.DOMAIN_NAME_SERVER
    assert o.value.to_bytes() == bytes([192, 168, 0, 1, 192, 168, 0, 10])
    assert str(o) == "Domain Name Server: 192.168.0.1, 192.168.0.10"


@pytest.mark.parametrize(
    "builder, code",
    [
        (opt_dns, OptionCode.DOMAIN_NAME_SERVER),
        (opt_ntp_servers, OptionCode.NTP_SERVERS),
        (opt_router, OptionCode.ROUTER),
    ],
)
def test_get_ip_list_options(builder, code):
    ips = [IPv4Address("192.168.0.1"), IPv4Address("192.168.0.10")]
    o = builder(*ips)
    assert get_ips(code, {int(o.code): o.value.to_bytes()}) == ips
    assert get_ips(code, {}) is None


def test_opt_ntp_servers():
    o = opt_ntp_servers("192.168.0.1", "192.168.0.10")
    assert o.code == OptionCode.NTP_SERVERS
    assert o.value.to_bytes() == bytes([192, 168, 0, 1, 192, 168, 0, 10])
    assert str(o) == "NTP Servers: 192.168.0.1, 192.168.0.10"


def test_opt_router():
    o = opt_router("192.168.0.1", "192.168.0.10")
    assert o.code == OptionCode.ROUTER
    assert o.value.to_bytes() == bytes([192, 168, 0, 1, 192, 168, 0, 10])
    assert str(o) == "Router: 192.168.0.1, 192.168.0.10"


def test_opt_ip_address_lease_time():
    o = opt_ip_address_lease_time(timedelta(seconds=43200))
    assert o.code == OptionCode.IP_ADDRESS_LEASE_TIME
    assert o.value.to_bytes() == bytes([0, 0, 168, 192])
    assert str(o) == "IP Addresses Lease Time: 12h0m0s"


def test_parse_ip_address_lease_time():
    assert Duration.from_bytes(bytes([0, 0, 168, 192])) == timedelta(seconds=43200)
    with pytest.raises(OptionParseError):
        Duration.from_bytes(bytes([168, 192]))
    with pytest.raises(OptionParseError):
        Duration.from_bytes(bytes([1, 1, 1, 1, 1]))


def test_duration_string_seconds():
    assert str(Duration.from_bytes(bytes([0, 0, 0, 12]))) == "12s"


def test_opt_maximum_dhcp_message_size():
    o = opt_max_message_size(1500)
    assert o.code == OptionCode.MAXIMUM_DHCP_MESSAGE_SIZE
    assert o.value.to_bytes() == bytes([5, 220])
    assert str(o) == "Maximum DHCP Message Size: 1500"


def test_get_maximum_dhcp_message_size():
    code = OptionCode.MAXIMUM_DHCP_MESSAGE_SIZE
    assert get_uint16(code, {int(code): bytes([5, 220])}) == 1500
    with pytest.raises(OptionParseError):
        get_uint16(code, {int(code): bytes([2])})
    with pytest.raises(OptionParseError):
        get_uint16(code, {int(code): bytes([2, 2, 2])})
    with pytest.raises(KeyError):
        get_uint16(code, {})


def test_uint16_string():
    assert str(Uint16.from_bytes(bytes([1, 2]))) == "258"


def test_opt_message_type():
    o = opt_message_type(MessageType.DISCOVER)
    assert o.code == OptionCode.DHCP_MESSAGE_TYPE
    assert o.value.to_bytes() == bytes([1])
    assert str(o) == "DHCP Message Type: DISCOVER"
    assert str(opt_message_type(99)) == "DHCP Message Type: unknown (99)"


def test_parse_opt_message_type():
    assert MessageType.from_bytes(bytes([1])) == MessageType.DISCOVER
    with pytest.raises(ValueError):
        MessageType.from_bytes(bytes([1, 2]))


def test_opt_subnet_mask():
    o = opt_subnet_mask(bytes([255, 255, 255, 0]))
    assert o.code == OptionCode.SUBNET_MASK
    assert str(o) == "Subnet Mask: ffffff00"
    assert o.value.to_bytes() == bytes([255, 255, 255, 0])


def test_get_subnet_mask():
    with pytest.raises(OptionParseError):
        IPMask.from_bytes(opt_subnet_mask(b"").value.to_bytes())
    with pytest.raises(OptionParseError):
        IPMask.from_bytes(opt_subnet_mask(bytes([255])).value.to_bytes())
    mask = IPMask.from_bytes(opt_subnet_mask(bytes([255, 255, 255, 0])).value.to_bytes())
    assert bytes(mask) == bytes([255, 255, 255, 0])


def test_parse_strings_multiple():
    opt = Strings.from_bytes(b"\x09linuxboot\x04test")
    assert len(opt) == 2
    assert opt[0] == "linuxboot"
    assert opt[1] == "test"


def test_parse_strings_none():
    with pytest.raises(OptionParseError):
        Strings.from_bytes(b"")


def test_parse_strings():
    opt = Strings.from_bytes(b"\x09linuxboot")
    assert list(opt) == ["linuxboot"]


def test_parse_strings_zero_length():
    with pytest.raises(OptionParseError):
        Strings.from_bytes(bytes([0, 0]))


def test_opt_rfc3004_user_class():
    assert opt_rfc3004_user_class(["linuxboot"]).value.to_bytes() == b"\x09linuxboot"


def test_opt_rfc3004_user_class_multiple():
    data = opt_rfc3004_user_class(["linuxboot", "test"]).value.to_bytes()
    assert data == b"\x09linuxboot\x04test"


def test_strings_string():
    assert str(Strings.from_bytes(b"\x04test\x03foo")) == "test, foo"


def test_strings_round_trip():
    original = Strings(["alpha", "beta"])
    assert Strings.from_bytes(original.to_bytes()) == original
    assert opt_rfc3004_user_class(["a"]).code == OptionCode.USER_CLASS_INFORMATION