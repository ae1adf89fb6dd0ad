"""Encoding, decoding and pretty-printing of DHCPv4 options and relay agent circuit IDs."""

__version__ = "0.1.0"