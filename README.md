# dhcpwire

`dhcpwire` encodes, decodes and pretty-prints DHCPv4 options. It covers:

- the option space from RFC 2132
- concatenation of long options from RFC 3396
- classless static routes from RFC 3442
- relay agent information from RFC 3046
- vendor-identifying vendor classes from RFC 3925
- user classes from RFC 3004

It can also take the circuit-id strings that common switch vendors send and
pull slot, module, port, sub-port and VLAN out of them.

It uses only the standard library.

## Installing

```
pip install dhcpwire
```

## Modules

| Module | Contents |
| --- | --- |
| `dhcpwire.types` | `MessageType`, `OpcodeType`, `OptionCode`, `GenericOptionCode` and `format_transaction_id`. |
| `dhcpwire.option` | The `Option` pair and the errors `OptionParseError`, `ShortByteStreamError` and `InvalidOptionsError`. |
| `dhcpwire.values` | The value types `IP`, `IPs`, `Duration`, `Uint16`, `IPMask` and `Strings`, the readers `get_ip`, `get_ips` and `get_uint16`, and the `opt_*` builders. |
| `dhcpwire.codelist` | `OptionCodeList` and `opt_parameter_request_list`. |
| `dhcpwire.routes` | `Route`, `Routes` and `opt_classless_static_route`. |
| `dhcpwire.vivc` | `VIVCIdentifier`, `VIVCIdentifiers` and `opt_vivc`. |
| `dhcpwire.options` | `Options`, `OptionHumanizer`, `RelaySubOptionCode`, `RelayOptions`, `parse_option` and `opt_relay_agent_info`. |
| `dhcpwire.circuitid` | `CircuitID`, `match_circuit_id` and `parse_circuit_id`. |

## Building options

Each `opt_*` helper returns an `Option`, a frozen pair of a `code` and a
typed `value`. Call `value.to_bytes()` to get the value's wire bytes. Call
`str()` on the option to get `Name: value`.

```python
from datetime import timedelta
from ipaddress import IPv4Address

from dhcpwire.types import MessageType
from dhcpwire.values import (
    opt_dns,
    opt_ip_address_lease_time,
    opt_max_message_size,
    opt_message_type,
)

dns = opt_dns(IPv4Address("192.168.0.1"), IPv4Address("192.168.0.10"))
dns.value.to_bytes().hex()   # 'c0a80001c0a8000a'
str(dns)                     # 'Domain Name Server: 192.168.0.1, 192.168.0.10'

str(opt_ip_address_lease_time(timedelta(hours=12)))
# 'IP Addresses Lease Time: 12h0m0s'

opt_max_message_size(1500).value.to_bytes()      # b'\x05\xdc'
str(opt_message_type(MessageType.DISCOVER))      # 'DHCP Message Type: DISCOVER'
```

`opt_ip_address_lease_time` accepts either a `timedelta` or a number of
seconds.

`opt_subnet_mask` accepts any of these:

- bytes
- a dotted string
- an `IPv4Address`

The other builders are:

- `opt_router`
- `opt_ntp_servers`
- `opt_broadcast_address`
- `opt_requested_ip_address`
- `opt_server_identifier`
- `opt_rfc3004_user_class`
- `dhcpwire.codelist.opt_parameter_request_list`
- `dhcpwire.routes.opt_classless_static_route`
- `dhcpwire.vivc.opt_vivc`
- `dhcpwire.options.opt_relay_agent_info`

Each value type has a `from_bytes` class method, which is the reverse of
`to_bytes`.

## Parsing an options block

`Options` is a `dict` that maps integer option codes to their raw payloads.
`Options.from_bytes(data, check_end=False)` reads an options block that
starts after the magic cookie. It behaves as follows:

- Repeated options are concatenated.
- Pad bytes are skipped.
- After the End option, only Pad or End bytes may follow.
- With `check_end=True`, a block with no End option is an error.

```python
from dhcpwire.options import Options
from dhcpwire.types import OptionCode
from dhcpwire.values import get_ips

opts = Options.from_bytes(bytes([3, 4, 192, 168, 0, 1, 255]), check_end=True)
get_ips(OptionCode.ROUTER, opts)   # [IPv4Address('192.168.0.1')]
opts.to_bytes()                    # b'\x03\x04\xc0\xa8\x00\x01'
print(opts)                        # '    Router: 192.168.0.1\n'
```

The readers handle missing or malformed options differently:

- `get_ip` and `get_ips` return `None` when the option is missing or does not
  parse.
- `get_uint16` raises `KeyError` when the option is missing.

`Options.from_list(*options)` builds a mapping from `Option` objects.
`update_option(option)` sets or replaces one entry.

`to_bytes()` writes options in ascending code order. A payload longer than 255
bytes is split across repeated options. Pad and End entries are never written.

### Readable output

`parse_option(code, data, vendor_decoder=None)` decodes one raw option into the
best typed value it can. If the payload does not fit the option's type, it
returns a raw value that prints as a list of byte values, such as `[1 2 3]`.

`Options.summary(vendor_decoder)` prints every option in the same way. It also
decodes the Vendor Specific Information option (43) with `vendor_decoder`. That
decoder is a callable that takes bytes, returns a printable value and raises
`ValueError` on bad data.

`Options.to_string(humanizer)` prints the options with any `OptionHumanizer`.
An `OptionHumanizer` is built from two callables:

- a code namer
- a value renderer

### Errors

Malformed option data raises `OptionParseError` or one of its subclasses:

- `ShortByteStreamError` for data that ends early
- `InvalidOptionsError` for wrong lengths or stray trailing bytes

All of these are subclasses of `ValueError`. `MessageType.from_bytes` raises a
plain `ValueError`.

## Relay agent information and circuit IDs

`RelayOptions` holds the sub-options of option 82. It prints them with the
sub-option names defined in `RelaySubOptionCode`.

```python
from dhcpwire.circuitid import match_circuit_id, parse_circuit_id
from dhcpwire.option import Option
from dhcpwire.options import RelayOptions, RelaySubOptionCode, opt_relay_agent_info
from dhcpwire.values import IPMask

cid = match_circuit_id("xe-0/0/14:2")
cid.port, cid.subport      # ('14', '2')
cid.format()               # '0,0,14,2,'

relay = opt_relay_agent_info(Option(RelaySubOptionCode.AGENT_CIRCUIT_ID, IPMask(b"Ethernet1/3")))
parse_circuit_id(RelayOptions.from_bytes(relay.value.to_bytes()))
# CircuitID(slot='1', module='', port='3', subport='', vlan='')
```

`parse_circuit_id(relay_options)` reads the Agent Circuit ID sub-option from
any mapping of sub-option codes to bytes. It raises `ValueError` in three
cases:

- the options are `None`
- the sub-option is missing
- no known interface pattern matches

## What this package does not do

`dhcpwire` works on option data only. It does not:

- parse or build whole DHCPv4 packets: the fixed BOOTP header, the magic
  cookie, or a full message
- open sockets
- act as a DHCP client or server
- provide a command-line tool

## Running the tests

```
pip install -e ".[test]"
pytest
```