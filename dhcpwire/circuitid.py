"""Circuit ID parsing for relay agent information (RFC 3046, sub-option 1)."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Mapping, Optional

from .options import RelaySubOptionCode

_CIRCUIT_PATTERNS = tuple(
    re.compile(pattern)
    for pattern in (
        # Juniper QFX et-0/0/0:0.0 and xe-0/0/0:0.0
        r"^(et|xe)-(?P<slot>[0-9]+)/(?P<mod>[0-9]+)/(?P<port>[0-9]+):(?P<subport>[0-9]+).*\Z",
        # Juniper PTX et-0/0/0.0
        r"^et-(?P<slot>[0-9]+)/(?P<mod>[0-9]+)/(?P<port>[0-9]+).(?P<subport>[0-9]+)\Z",
        # Juniper EX ge-0/0/0.0
        r"^ge-(?P<slot>[0-9]+)/(?P<mod>[0-9]+)/(?P<port>[0-9]+).(?P<subport>[0-9]+).*",
        # Arista Ethernet3/17/1; may be preceded by a type and length byte
        r"Ethernet(?P<slot>[0-9]+)/(?P<mod>[0-9]+)/(?P<port>[0-9]+)\Z",
        # Juniper QFX et-1/0/61
        r"^et-(?P<slot>[0-9]+)/(?P<mod>[0-9]+)/(?P<port>[0-9]+)\Z",
        # Arista Ethernet14:Vlan2001 and Ethernet10:2020
        r"Ethernet(?P<port>[0-9]+):(?P<vlan>.*)\Z",
        # Cisco Gi1/10:2020
        r"^Gi(?P<slot>[0-9]+)/(?P<port>[0-9]+):(?P<vlan>.*)\Z",
        # Nexus Ethernet1/3
        r"^Ethernet(?P<slot>[0-9]+)/(?P<port>[0-9]+)\Z",
        # Juniper bundle interface ae52.0
        r"^ae(?P<port>[0-9]+).(?P<subport>[0-9])\Z",
        # Arista bundle interface Port-Channel1
        r"^Port-Channel(?P<port>[0-9]+)\Z",
        # Ciena interface format
        r"\.OSC(-[0-9]+)?-(?P<slot>[0-9]+)-(?P<port>[0-9]+)\Z",
    )
)


@dataclass
class CircuitID:
    """The location of a network vendor interface named by a circuit ID."""

    slot: str = ""
    module: str = ""
    port: str = ""
    subport: str = ""
    vlan: str = ""

    def format(self) -> str:
        """Return the fields as ``slot,module,port,subport,vlan``."""
        return ",".join((self.slot, self.module, self.port, self.subport, self.vlan))


def match_circuit_id(circuit_id: str) -> CircuitID:
    """Match a circuit ID string against the known interface formats.

    Raises ValueError when no format matches.
    """
    for pattern in _CIRCUIT_PATTERNS:
        match = pattern.search(circuit_id)
        if match is None:
            continue
        groups = {name: value or "" for name, value in match.groupdict().items()}
        return CircuitID(
            slot=groups.get("slot", ""),
            module=groups.get("mod", ""),
            port=groups.get("port", ""),
            subport=groups.get("subport", ""),
            vlan=groups.get("vlan", ""),
        )
    raise ValueError(
        f"Unable to match circuit id : {circuit_id} with listed regexes of interface types"
    )


def parse_circuit_id(relay_options: Optional[Mapping]) -> CircuitID:
    """Parse the circuit ID sub-option of relay agent information options.

    Raises ValueError when the options or the circuit ID are missing, or the
    circuit ID has no known format.
    """
    if relay_options is None:
        raise ValueError("No relay agent information option found in the dhcpv4 pkt")
    raw = relay_options.get(int(RelaySubOptionCode.AGENT_CIRCUIT_ID))
    if not raw:
        raise ValueError("no circuit-id suboption found in dhcpv4 packet")
    return match_circuit_id(bytes(raw).decode("latin-1"))