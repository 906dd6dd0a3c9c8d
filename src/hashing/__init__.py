"""Serial-number hashing."""

from __future__ import annotations

from .serial import SerialHasher, count_marker, hash_serial_number, plan_for

__all__ = [
    "SerialHasher",
    "count_marker",
    "hash_serial_number",
    "plan_for",
]
