from abc import ABC, abstractmethod

from aidump.types import Entry


class BaseRules(ABC):
    """
    Abstract base class defining the interface for entry selection rules.

    This class serves as a contract for the various kinds of rules (rule-set based,
    gitignore-style patterns, composites) that decide whether a filesystem entry is
    selected. Whether "selected" means excluded or included depends on the side of
    the configuration the rules were built from. Implementations must be pure:
    the answer depends only on the entry and the configured rules, never on the
    filesystem.

    Example:
        >>> from aidump.types import Entry
        >>> class TmpRules(BaseRules):
        ...     def matches(self, entry: Entry) -> bool:
        ...         return entry.extension == "tmp"
        >>> rules = TmpRules()
        >>> rules.matches(Entry("build.tmp", "out/build.tmp", False))
        True
        >>> rules.matches(Entry("main.py", "main.py", False))
        False
    """

    @abstractmethod
    def matches(self, entry: Entry) -> bool:
        """
        Determine whether an entry is selected by these rules.

        Args:
            entry (Entry): The file or directory to check.

        Returns:
            bool: True if the entry is selected.
        """
        pass
