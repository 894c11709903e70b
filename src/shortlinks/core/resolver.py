"""Shortlink resolution.

Walks a slash-delimited path through the entry tree and returns the redirect
target it lands on.
"""

from shortlinks.core.types import ROOT_KEY, EntryMap, Link


def resolve(path: str, root: EntryMap) -> str | None:
    """Resolve a shortlink path to its redirect target.

    Segments are matched exactly, including empty ones. A path ending on a
    nested namespace resolves to that namespace's ``$root`` link, if any.

    Args:
        path: Shortlink path (e.g., "team/bob")
        root: Top-level entry mapping

    Returns:
        Redirect target, or None if the path does not resolve
    """
    first, *rest = path.split("/")
    selection = root.get(first)
    if selection is None:
        return None

    for segment in rest:
        if isinstance(selection, Link):
            return None
        selection = selection.children.get(segment)
        if selection is None:
            return None

    if isinstance(selection, Link):
        return selection.target

    # Fallback is one level only: a nested $root is not followed
    fallback = selection.children.get(ROOT_KEY)
    if isinstance(fallback, Link):
        return fallback.target
    return None
