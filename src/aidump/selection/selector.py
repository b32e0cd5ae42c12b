"""Pure predicates answering whether an entry is excluded or included."""

from aidump.config import Config
from aidump.types import Entry

from .composite_rules import CompositeRules
from .git_rules import GitIgnoreRules
from .rule_set_rules import ExclusionRuleSetRules, InclusionRuleSetRules


class Selector:
    """Evaluates exclude rules and include rules for an entry, independently.

    The selector never touches the filesystem; it only looks at the entry's name,
    relative path and directory-ness. Combining the two answers into a decision is
    the job of :class:`aidump.filter_engine.FilterEngine`.

    Attributes:
        config (Config): The configuration the rules were built from.

    Example:
        >>> from aidump.config import Config, RuleSet
        >>> from aidump.types import Entry
        >>> selector = Selector(Config(exclude=RuleSet(folders=frozenset({"build"}))))
        >>> selector.matches_exclude(Entry("build", "src/build", True))
        True
        >>> selector.has_include_rules
        False
        >>> selector.matches_include(Entry("main.c", "src/main.c", False))
        True
    """

    def __init__(self, config: Config):
        self.config = config
        self._exclude = CompositeRules(
            [ExclusionRuleSetRules(config.exclude), GitIgnoreRules(config.exclude.patterns)]
        )
        self._include = InclusionRuleSetRules(config.include)

    @property
    def has_include_rules(self) -> bool:
        """True if any include rule is configured (the include-first policy is active)."""
        return self._include.has_rules()

    @property
    def has_include_folder_rules(self) -> bool:
        return bool(self.config.include.folders)

    @property
    def has_include_file_rules(self) -> bool:
        return self._include.has_file_rules()

    def matches_exclude(self, entry: Entry) -> bool:
        """Check whether any exclude rule selects the entry."""
        return self._exclude.matches(entry)

    def matches_include(self, entry: Entry) -> bool:
        """Check whether the include rules admit the entry.

        Vacuously true when no include rule is configured. Directories are admitted
        when there is no folder restriction or their name matches a folder rule;
        files must match the filename rules (if any) and the extension rules (if any).
        """
        return self._include.matches(entry)

    def matches_include_folder(self, entry: Entry) -> bool:
        """Check whether a directory explicitly matches an include folder rule."""
        return entry.is_directory and self._include.matches_folder(entry)

    def within_included_folder(self, entry: Entry) -> bool:
        """Check whether the entry lies inside a directory matching an include folder rule.

        For a directory, the directory itself counts. The check walks the ancestor
        chain encoded in the relative path, so it needs no filesystem access.

        Example:
            >>> from aidump.config import Config, RuleSet
            >>> from aidump.types import Entry
            >>> selector = Selector(Config(include=RuleSet(folders=frozenset({"src", "/docs/api"}))))
            >>> selector.within_included_folder(Entry("x.py", "lib/src/util/x.py", False))
            True
            >>> selector.within_included_folder(Entry("index.md", "docs/api/index.md", False))
            True
            >>> selector.within_included_folder(Entry("src.py", "lib/src.py", False))
            False
        """
        parts = entry.relative_path.split("/")
        depth = len(parts) if entry.is_directory else len(parts) - 1
        for i in range(depth):
            ancestor = Entry(parts[i], "/".join(parts[: i + 1]), True)
            if self._include.matches_folder(ancestor):
                return True
        return False
