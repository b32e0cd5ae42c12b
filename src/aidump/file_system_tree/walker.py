"""Depth-first traversal of the filtered directory tree."""

from typing import Iterator, Optional, Tuple

from aidump.filter_engine import ChildLister, FilterEngine
from aidump.types import Entry


def walk(lister: ChildLister, engine: FilterEngine, root: Optional[Entry] = None) -> Iterator[Tuple[Entry, int]]:
    """Lazily walk the tree below ``root``, yielding visible entries in pre-order.

    The root itself is not yielded; its direct children have depth 0. A directory is
    only yielded (and descended into) when the filter engine says it is visible, so
    an excluded directory prunes its whole subtree. Every call re-reads the
    filesystem.

    Args:
        lister: Directory listing capability. Must provide ``root_entry()`` when
            ``root`` is omitted.
        engine: The filter engine consulted for every entry.
        root: Directory entry to start from. Defaults to ``lister.root_entry()``.

    Yields:
        Pairs of (entry, depth).

    Example:
        >>> for entry, depth in walk(lister, engine):  # doctest: +SKIP
        ...     print("    " * depth + entry.name)
        a.txt
        b
            c.txt
    """
    if root is None:
        root = lister.root_entry()  # type: ignore[attr-defined]
    yield from _walk(lister, engine, root, 0)


def _walk(lister: ChildLister, engine: FilterEngine, directory: Entry, depth: int) -> Iterator[Tuple[Entry, int]]:
    for child in lister.list_children(directory):
        if not engine.should_visit(child):
            continue
        yield child, depth
        if engine.should_descend(child):
            yield from _walk(lister, engine, child, depth + 1)
