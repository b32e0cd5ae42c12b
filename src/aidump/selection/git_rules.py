"""Rules using .gitignore pattern syntax."""

from typing import Iterable, List

from pathspec import PathSpec
from pathspec.patterns import GitWildMatchPattern  # type: ignore

from aidump.types import Entry

from .base_rules import BaseRules


class GitIgnoreRules(BaseRules):
    """Rules using .gitignore pattern syntax.

    Patterns are matched against an entry's relative path with the pathspec library,
    the same way Git does. All standard syntax is supported: globs, directory-only
    patterns ending in ``/``, negation with ``!``, ``**`` and comments. Later
    patterns override earlier ones.

    Directory entries are also tested with a trailing slash so that patterns such as
    ``build/`` match the directory itself and not only its contents.

    Example:
        >>> from aidump.types import Entry
        >>> rules = GitIgnoreRules(["*.min.js", "generated/", "!keep.min.js"])
        >>> rules.matches(Entry("app.min.js", "web/app.min.js", False))
        True
        >>> rules.matches(Entry("generated", "src/generated", True))
        True
        >>> rules.matches(Entry("keep.min.js", "keep.min.js", False))
        False

    Note:
        Relative paths always use forward slashes, including on Windows.
    """

    def __init__(self, patterns: Iterable[str] = ()):
        self._lines: List[str] = list(patterns)
        self.spec = PathSpec.from_lines(GitWildMatchPattern, self._lines)

    def matches(self, entry: Entry) -> bool:
        if not self._lines:
            return False
        if self.spec.match_file(entry.relative_path):
            return True
        return entry.is_directory and self.spec.match_file(entry.relative_path + "/")
