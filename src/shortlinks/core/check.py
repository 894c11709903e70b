"""Offline checks for shortlink mappings.

The resolver tolerates odd shapes silently; these checks surface entries
that can never resolve so they can be fixed in the config file.
"""

from dataclasses import dataclass

from shortlinks.core.types import ROOT_KEY, EntryMap, Link


@dataclass(frozen=True)
class Problem:
    """A mapping entry that can never resolve as written."""

    path: str
    message: str

    def __str__(self) -> str:
        return f"{self.path}: {self.message}"


def find_problems(mapping: EntryMap) -> list[Problem]:
    """Collect problems in a mapping tree.

    Args:
        mapping: Top-level entry mapping

    Returns:
        Problems in depth-first key order
    """
    problems: list[Problem] = []
    _walk(mapping, None, problems)
    return problems


def count_links(mapping: EntryMap) -> int:
    """Count Link leaves in a mapping tree."""
    total = 0
    for entry in mapping.values():
        if isinstance(entry, Link):
            total += 1
        else:
            total += count_links(entry.children)
    return total


def _walk(mapping: EntryMap, prefix: str | None, problems: list[Problem]) -> None:
    for key in sorted(mapping):
        entry = mapping[key]
        path = key if prefix is None else f"{prefix}/{key}"

        if "/" in key:
            problems.append(Problem(path, "key contains '/' and is unreachable"))

        if isinstance(entry, Link):
            if not entry.target:
                problems.append(Problem(path, "link target is empty"))
            continue

        if prefix is not None and key == ROOT_KEY:
            problems.append(Problem(path, f"{ROOT_KEY} must be a link, not a namespace"))
        if not entry.children:
            problems.append(Problem(path, "empty namespace never resolves"))

        _walk(entry.children, path, problems)
