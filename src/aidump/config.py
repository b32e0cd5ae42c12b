"""Rule sets and configuration loading.

A configuration supplies two rule sets: one describing what to exclude and one
describing what to include. Configurations are read once from an optional JSON
file (``ai.json`` at the project root by default) and are immutable afterwards.

Example config file::

    {
        "exclude": {
            "extensions": ["log", "lock"],
            "folders": ["node_modules", "/build"],
            "filenames": [".env", "/composer.json"],
            "patterns": ["*.min.js"]
        },
        "include": {
            "extensions": ["php", "md"]
        }
    }
"""

import json
import logging
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, FrozenSet, Iterable, Mapping, Optional, Tuple

from aidump.exceptions import ConfigError
from aidump.types import PathType

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILENAME = "ai.json"

# Flat keys understood for compatibility with older config files. They all feed
# the exclude side.
LEGACY_EXCLUDE_KEYS = {
    "ignoreExtensions": "extensions",
    "ignoreFolders": "folders",
    "ignoreFilenames": "filenames",
}


def _string_set(value: Any) -> FrozenSet[str]:
    if not isinstance(value, list):
        return frozenset()
    return frozenset(str(item) for item in value)


def _split_anchored(rules: Iterable[str]) -> Tuple[FrozenSet[str], FrozenSet[str]]:
    bare = frozenset(rule for rule in rules if not rule.startswith("/"))
    anchored = frozenset(rule for rule in rules if rule.startswith("/"))
    return bare, anchored


@dataclass(frozen=True)
class RuleSet:
    """One side (exclude or include) of a configuration.

    Folder and filename rules are either bare (matched against an entry's basename
    anywhere in the tree) or root-anchored with a leading ``/`` (matched against the
    exact relative path from the project root).

    Attributes:
        extensions: Extension tokens without the dot, matched case-sensitively.
        folders: Bare or root-anchored directory rules.
        filenames: Bare or root-anchored file rules.
        patterns: Gitignore-style patterns, applied in order. Only consulted for
            exclusion.

    Example:
        >>> rules = RuleSet.from_mapping({"folders": ["build", "/dist"], "extensions": "oops"})
        >>> sorted(rules.bare_folders), sorted(rules.anchored_folders)
        (['build'], ['/dist'])
        >>> rules.extensions
        frozenset()
        >>> RuleSet().is_empty()
        True
    """

    extensions: FrozenSet[str] = frozenset()
    folders: FrozenSet[str] = frozenset()
    filenames: FrozenSet[str] = frozenset()
    patterns: Tuple[str, ...] = ()

    @classmethod
    def from_mapping(cls, data: Any) -> "RuleSet":
        """Build a rule set from a decoded JSON object.

        Missing keys, and keys whose value is not a list, yield empty collections.
        """
        if not isinstance(data, Mapping):
            return cls()
        patterns = data.get("patterns")
        return cls(
            extensions=_string_set(data.get("extensions")),
            folders=_string_set(data.get("folders")),
            filenames=_string_set(data.get("filenames")),
            patterns=tuple(str(p) for p in patterns) if isinstance(patterns, list) else (),
        )

    def is_empty(self) -> bool:
        return not (self.extensions or self.folders or self.filenames or self.patterns)

    @property
    def bare_folders(self) -> FrozenSet[str]:
        return _split_anchored(self.folders)[0]

    @property
    def anchored_folders(self) -> FrozenSet[str]:
        return _split_anchored(self.folders)[1]

    @property
    def bare_filenames(self) -> FrozenSet[str]:
        return _split_anchored(self.filenames)[0]

    @property
    def anchored_filenames(self) -> FrozenSet[str]:
        return _split_anchored(self.filenames)[1]

    def merged(self, other: "RuleSet") -> "RuleSet":
        """Return the union of this rule set and another one."""
        return RuleSet(
            extensions=self.extensions | other.extensions,
            folders=self.folders | other.folders,
            filenames=self.filenames | other.filenames,
            patterns=self.patterns + other.patterns,
        )


@dataclass(frozen=True)
class Config:
    """The exclude and include rule sets for one invocation."""

    exclude: RuleSet = field(default_factory=RuleSet)
    include: RuleSet = field(default_factory=RuleSet)

    def with_exclude_patterns(self, patterns: Iterable[str]) -> "Config":
        """Return a copy with extra gitignore-style exclude patterns appended."""
        extra = tuple(patterns)
        if not extra:
            return self
        return replace(self, exclude=replace(self.exclude, patterns=self.exclude.patterns + extra))

    def with_exclude_filenames(self, filenames: Iterable[str]) -> "Config":
        """Return a copy with extra exclude filename rules (bare or root-anchored) added."""
        extra = frozenset(filenames)
        if not extra:
            return self
        return replace(self, exclude=replace(self.exclude, filenames=self.exclude.filenames | extra))


def default_config() -> Config:
    """Configuration used when no config file is present: nothing excluded, everything included."""
    return Config()


def builtin_default_config() -> Config:
    """The historical built-in exclude lists, available as an explicit opt-in.

    One correction to the historical lists: ``src/Test`` and ``src/Tests`` are
    root-anchored (``/src/Test``). Written bare they are compared against directory
    basenames, which never contain a slash, so they could never match.

    Example:
        >>> config = builtin_default_config()
        >>> "node_modules" in config.exclude.folders
        True
        >>> config.include.is_empty()
        True
    """
    return Config(
        exclude=RuleSet(
            extensions=frozenset(
                {
                    "bin",
                    "dll",
                    "exe",
                    "gif",
                    "gz",
                    "ico",
                    "jpeg",
                    "jpg",
                    "log",
                    "pdf",
                    "png",
                    "svg",
                    "tar",
                    "tmp",
                    "zip",
                }
            ),
            folders=frozenset(
                {
                    ".git",
                    ".idea",
                    "build",
                    "bin",
                    "cache",
                    "data",
                    "doc",
                    "docs",
                    "dist",
                    "docker",
                    "example",
                    "examples",
                    "logs",
                    "node_modules",
                    "public",
                    "/src/Test",
                    "/src/Tests",
                    "storage",
                    "test",
                    "tests",
                    "tmp",
                    "vendor",
                    "var",
                }
            ),
            filenames=frozenset(
                {
                    ".env.local",
                    ".gitattributes",
                    ".gitignore",
                    ".gitlab-ci.yml",
                    "CHANGELOG.md",
                    "CONTRIBUTING.md",
                    "LICENSE",
                    "ai.json",
                    "ai.txt",
                    "composer.lock",
                    "docker-compose.yml",
                    "package-lock.json",
                    "phpunit.xml",
                    "phpunit.xml.dist",
                    "phpstan.neon",
                    "phpstan.neon.dist",
                    "rector.php",
                    "rector.php.dist",
                    "symfony.lock",
                }
            ),
        )
    )


def parse_config(data: Any) -> Config:
    """Build a Config from a decoded JSON document.

    Example:
        >>> config = parse_config({"exclude": {"folders": ["vendor"]}, "ignoreExtensions": ["log"]})
        >>> sorted(config.exclude.folders), sorted(config.exclude.extensions)
        (['vendor'], ['log'])
        >>> config.include.is_empty()
        True
    """
    if not isinstance(data, Mapping):
        return default_config()

    exclude = RuleSet.from_mapping(data.get("exclude"))
    legacy = {target: data[key] for key, target in LEGACY_EXCLUDE_KEYS.items() if key in data}
    if legacy:
        exclude = exclude.merged(RuleSet.from_mapping(legacy))

    return Config(exclude=exclude, include=RuleSet.from_mapping(data.get("include")))


def load_config(config_path: PathType) -> Config:
    """Read and parse a JSON config file.

    Args:
        config_path: Path to the config file.

    Raises:
        ConfigError: If the file cannot be read or is not valid JSON.
    """
    path = Path(config_path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError(str(path), str(e)) from e
    except OSError as e:
        raise ConfigError(str(path), e.strerror or str(e)) from e

    if not isinstance(data, dict):
        raise ConfigError(str(path), "top-level value must be a JSON object")

    logger.debug("Loaded configuration from %s", path)
    return parse_config(data)


def resolve_config(
    root_dir: PathType,
    config_path: Optional[PathType] = None,
    use_builtin_defaults: bool = False,
) -> Config:
    """Find and load the configuration for a project root.

    An explicit ``config_path`` must exist. Otherwise ``<root_dir>/ai.json`` is used
    when present, then the built-in defaults if requested, then empty defaults.

    Raises:
        ConfigError: If an explicit config file is missing or any config file is malformed.
    """
    if config_path is not None:
        if not Path(config_path).is_file():
            raise ConfigError(str(config_path), "file not found")
        return load_config(config_path)

    candidate = Path(root_dir) / DEFAULT_CONFIG_FILENAME
    if candidate.is_file():
        return load_config(candidate)

    if use_builtin_defaults:
        logger.debug("No %s found, using built-in default exclusions", DEFAULT_CONFIG_FILENAME)
        return builtin_default_config()

    logger.debug("No %s found, nothing excluded", DEFAULT_CONFIG_FILENAME)
    return default_config()
