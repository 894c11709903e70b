"""Shortlink entry types.

An entry is either a terminal redirect target (Link) or a sub-namespace of
further entries (Nested). Mappings are read-only once decoded.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

# Key inside a nested namespace holding that namespace's default target
ROOT_KEY = "$root"


@dataclass(frozen=True)
class Link:
    """Terminal redirect target."""

    target: str


@dataclass(frozen=True)
class Nested:
    """Sub-namespace of path segments."""

    children: EntryMap


Entry = Link | Nested
EntryMap = Mapping[str, Entry]


def parse_entry(value: object, key_path: str) -> Entry:
    """Decode a raw JSON value into an entry.

    Args:
        value: Decoded JSON value (string or object)
        key_path: Dotted key path of the value, used in error messages

    Returns:
        Link for strings, Nested for objects

    Raises:
        ValueError: If the value is neither a string nor an object
    """
    if isinstance(value, str):
        return Link(value)
    if isinstance(value, dict):
        return Nested(parse_mapping(value, key_path))
    raise ValueError(f"{key_path} must be a string or an object")


def parse_mapping(data: dict[str, object], key_path: str = "links") -> EntryMap:
    """Decode a raw JSON object into a read-only entry mapping.

    Args:
        data: Decoded JSON object
        key_path: Dotted key path of the object, used in error messages

    Returns:
        Read-only mapping from segment to entry
    """
    entries = {key: parse_entry(value, f"{key_path}.{key}") for key, value in data.items()}
    return MappingProxyType(entries)
