"""Rules backed by a RuleSet of extensions, folders and filenames."""

from aidump.config import RuleSet
from aidump.types import Entry

from .base_rules import BaseRules


class ExclusionRuleSetRules(BaseRules):
    """Exclude-side matching of a RuleSet.

    Directories are matched only against folder rules; files against filename and
    extension rules. A bare filename rule also matches when it occurs anywhere in
    the entry's relative path, so a rule ``cache`` excludes ``lib/cache/x.php``
    as well as ``cache``. Extension rules never apply to directories.

    Example:
        >>> from aidump.config import RuleSet
        >>> from aidump.types import Entry
        >>> rules = ExclusionRuleSetRules(RuleSet(folders=frozenset({"/build"}), extensions=frozenset({"bin"})))
        >>> rules.matches(Entry("build", "build", True))
        True
        >>> rules.matches(Entry("build", "src/build", True))
        False
        >>> rules.matches(Entry("cache.bin", "cache.bin", True))
        False
        >>> rules.matches(Entry("x.BIN", "x.BIN", False))
        False
    """

    def __init__(self, rule_set: RuleSet):
        self.rule_set = rule_set
        self._bare_folders = rule_set.bare_folders
        self._anchored_folders = rule_set.anchored_folders
        self._bare_filenames = rule_set.bare_filenames
        self._anchored_filenames = rule_set.anchored_filenames

    def matches(self, entry: Entry) -> bool:
        if entry.is_directory:
            return entry.name in self._bare_folders or entry.anchored_path in self._anchored_folders

        if entry.name in self._bare_filenames or entry.anchored_path in self._anchored_filenames:
            return True
        # Loose substring semantics kept for compatibility with existing config files
        if any(rule in entry.relative_path for rule in self._bare_filenames):
            return True
        return entry.extension in self.rule_set.extensions


class InclusionRuleSetRules(BaseRules):
    """Include-side matching of a RuleSet.

    An empty rule set matches every entry, so "no include filter configured" behaves
    exactly like "include everything".

    Example:
        >>> from aidump.config import RuleSet
        >>> from aidump.types import Entry
        >>> rules = InclusionRuleSetRules(RuleSet(extensions=frozenset({"md"})))
        >>> rules.matches(Entry("readme.md", "a/readme.md", False))
        True
        >>> rules.matches(Entry("main.py", "main.py", False))
        False
        >>> rules.matches(Entry("a", "a", True))
        True
    """

    def __init__(self, rule_set: RuleSet):
        self.rule_set = rule_set
        self._bare_folders = rule_set.bare_folders
        self._anchored_folders = rule_set.anchored_folders
        self._bare_filenames = rule_set.bare_filenames
        self._anchored_filenames = rule_set.anchored_filenames

    def matches(self, entry: Entry) -> bool:
        if entry.is_directory:
            return not self.rule_set.folders or self.matches_folder(entry)

        if self.rule_set.filenames and not (
            entry.name in self._bare_filenames or entry.anchored_path in self._anchored_filenames
        ):
            return False
        return not self.rule_set.extensions or entry.extension in self.rule_set.extensions

    def matches_folder(self, entry: Entry) -> bool:
        """Check a directory against the folder rules alone, without the empty-set fallback."""
        return entry.name in self._bare_folders or entry.anchored_path in self._anchored_folders

    def has_rules(self) -> bool:
        return bool(self.rule_set.extensions or self.rule_set.folders or self.rule_set.filenames)

    def has_file_rules(self) -> bool:
        """True if filename or extension rules constrain which files are included."""
        return bool(self.rule_set.extensions or self.rule_set.filenames)
