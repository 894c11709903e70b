"""Shortlinks - hierarchical shortlink redirect server."""

from shortlinks.core.resolver import resolve
from shortlinks.core.types import ROOT_KEY, Entry, Link, Nested

__all__ = ["ROOT_KEY", "Entry", "Link", "Nested", "resolve"]
