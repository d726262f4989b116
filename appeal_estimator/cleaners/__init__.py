"""Data cleaning utilities."""

from .address import AddressCleaner, AddressParseError, ParsedAddress

__all__ = ["AddressCleaner", "AddressParseError", "ParsedAddress"]
