"""Selection rules for excluding and including files and directories."""

from .base_rules import BaseRules
from .composite_rules import CompositeRules
from .git_rules import GitIgnoreRules
from .rule_set_rules import ExclusionRuleSetRules, InclusionRuleSetRules
from .selector import Selector

__all__ = [
    "BaseRules",
    "CompositeRules",
    "ExclusionRuleSetRules",
    "GitIgnoreRules",
    "InclusionRuleSetRules",
    "Selector",
]
