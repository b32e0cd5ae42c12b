"""Composite rules for combining multiple rule types."""

from typing import List, Sequence

from aidump.types import Entry

from .base_rules import BaseRules


class CompositeRules(BaseRules):
    """Composite rules that select an entry if ANY constituent rule selects it.

    This follows the logical OR pattern used for exclusion: rule-set rules and
    gitignore-style patterns are combined so that a match in either excludes the
    entry.

    Attributes:
        rules (List[BaseRules]): List of constituent rules.

    Example:
        >>> from aidump.config import RuleSet
        >>> from aidump.selection.git_rules import GitIgnoreRules
        >>> from aidump.selection.rule_set_rules import ExclusionRuleSetRules
        >>> from aidump.types import Entry
        >>> composite = CompositeRules(
        ...     [ExclusionRuleSetRules(RuleSet(extensions=frozenset({"log"}))), GitIgnoreRules(["*.tmp"])]
        ... )
        >>> composite.matches(Entry("app.log", "app.log", False))
        True
        >>> composite.matches(Entry("x.tmp", "x.tmp", False))
        True
        >>> composite.matches(Entry("x.py", "x.py", False))
        False
    """

    def __init__(self, rules: Sequence[BaseRules]):
        """Initialize composite rules.

        Args:
            rules: Sequence of rules to combine.

        Raises:
            ValueError: If the rules sequence is empty.
            TypeError: If any rule doesn't implement BaseRules.
        """
        if not rules:
            raise ValueError("At least one rule must be provided")

        for i, rule in enumerate(rules):
            if not isinstance(rule, BaseRules):
                raise TypeError(f"Rule at index {i} must implement BaseRules, " f"got {type(rule)}")

        self.rules: List[BaseRules] = list(rules)

    def matches(self, entry: Entry) -> bool:
        # Short-circuits on the first matching rule
        return any(rule.matches(entry) for rule in self.rules)
