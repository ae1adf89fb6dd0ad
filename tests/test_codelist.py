from dhcpwire.codelist import OptionCodeList, opt_parameter_request_list
from dhcpwire.types import OptionCode


def test_opt_parameter_request_list_interface_methods():
    o = opt_parameter_request_list(OptionCode.BOOTFILE_NAME, OptionCode.NAME_SERVER)
    assert o.code == OptionCode.PARAMETER_REQUEST_LIST
    assert o.value.to_bytes() == bytes([67, 5])
    assert str(o) == "Parameter Request List: Name Server, Bootfile Name"


def test_parse_opt_parameter_request_list():
    o = OptionCodeList.from_bytes(bytes([67, 5]))
    assert o == OptionCodeList([OptionCode.BOOTFILE_NAME, OptionCode.NAME_SERVER])
    assert str(o[0]) == "Bootfile Name"


def test_str_does_not_reorder_list():
    o = OptionCodeList([OptionCode.BOOTFILE_NAME, OptionCode.NAME_SERVER])
    assert str(o) == "Name Server, Bootfile Name"
    assert o.to_bytes() == bytes([67, 5])


def test_add_skips_duplicates():
    o = OptionCodeList([OptionCode.ROUTER])
    o.add(OptionCode.ROUTER, OptionCode.NAME_SERVER, OptionCode.NAME_SERVER)
    assert o == [3, 5]


def test_empty_list_round_trip():
    o = OptionCodeList.from_bytes(b"")
    assert o == []
    assert o.to_bytes() == b""