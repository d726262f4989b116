"""Utility functions and helpers."""

from .file_utils import get_file_size, ensure_directory, read_json_entries
from .data_utils import round_half_up, round_one_decimal, is_present, first_present
from .seed import address_seed

__all__ = [
    "get_file_size",
    "ensure_directory",
    "read_json_entries",
    "round_half_up",
    "round_one_decimal",
    "is_present",
    "first_present",
    "address_seed",
]
