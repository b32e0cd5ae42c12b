"""Inclusion decisions for filesystem entries.

The filter engine composes the selector's exclude and include answers into the
single decision the walker needs for each entry. Two policies are supported:

* exclude-only: no include rule is configured, so everything not excluded is visible;
* include-first: include rules restrict what is visible and exclude rules keep a veto.

Directories are special under the include-first policy. A directory's own name rarely
matches an extension or filename include rule, so a directory is also visible when
some file below it is independently included (the descendant-visibility override).
That makes a directory's visibility a function of its subtree, computed by a
lookahead over the directory listing. Exclude rules still win at every level: the
lookahead never descends into an excluded directory.
"""

from typing import Dict, List, Protocol

from aidump.selection.selector import Selector
from aidump.types import Entry


class ChildLister(Protocol):
    """Anything that can list the children of a directory entry."""

    def list_children(self, entry: Entry) -> List[Entry]: ...


class FilterEngine:
    """Decides which entries a walk visits.

    Attributes:
        selector (Selector): Exclude/include predicates for single entries.
        lister (ChildLister): Directory listing capability used for the descendant lookahead.

    Example:
        >>> from aidump.config import Config, RuleSet
        >>> from aidump.selection.selector import Selector
        >>> from aidump.types import Entry
        >>> tree = {"": ["a"], "a": ["a/readme.md", "a/empty"], "a/empty": []}
        >>> class Lister:
        ...     def list_children(self, entry):
        ...         return [Entry(p.rsplit("/", 1)[-1], p, p in tree) for p in tree.get(entry.relative_path, [])]
        >>> engine = FilterEngine(Selector(Config(include=RuleSet(extensions=frozenset({"md"})))), Lister())
        >>> engine.should_visit(Entry("a", "a", True))
        True
        >>> engine.should_visit(Entry("empty", "a/empty", True))
        False
        >>> engine.should_visit(Entry("readme.md", "a/readme.md", False))
        True
    """

    def __init__(self, selector: Selector, lister: ChildLister) -> None:
        self.selector = selector
        self.lister = lister
        self._descendant_cache: Dict[str, bool] = {}

    def should_visit(self, entry: Entry) -> bool:
        """Decide whether an entry is visible (and, for directories, traversed).

        Precedence: exclude rules, then include restriction, then the
        descendant-visibility override for directories. The lookahead only runs when
        the direct decision for a directory is negative.
        """
        if self.selector.matches_exclude(entry):
            return False
        if not self.selector.has_include_rules:
            return True
        if not entry.is_directory:
            return self._file_included(entry)
        if self._directory_included(entry):
            return True
        return self.has_included_descendant(entry)

    def should_descend(self, entry: Entry) -> bool:
        """Decide whether the walk enters a directory. Files are never descended into."""
        return entry.is_directory and self.should_visit(entry)

    def has_included_descendant(self, entry: Entry) -> bool:
        """Check whether a directory's subtree holds an independently included entry.

        Excluded directories are never entered. Results are memoised per relative
        path, so each directory is looked ahead at most once per engine.
        """
        cached = self._descendant_cache.get(entry.relative_path)
        if cached is not None:
            return cached

        found = False
        for child in self.lister.list_children(entry):
            if self.selector.matches_exclude(child):
                continue
            if child.is_directory:
                found = self._directory_included(child) or self.has_included_descendant(child)
            else:
                found = self._file_included(child)
            if found:
                break

        self._descendant_cache[entry.relative_path] = found
        return found

    def _file_included(self, entry: Entry) -> bool:
        return self.selector.matches_include(entry)

    def _directory_included(self, entry: Entry) -> bool:
        # Include folders only decide which directories are shown on their own; files are not scoped by them
        if self.selector.matches_include_folder(entry):
            return True
        return (
            self.selector.has_include_folder_rules
            and self.selector.within_included_folder(entry)
            and not self.selector.has_include_file_rules
        )
