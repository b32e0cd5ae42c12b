from dataclasses import dataclass
from enum import Enum
from os import PathLike
from typing import Union

# Complete path type including strings and any path-like object
PathType = Union[str, PathLike[str]]


class RenderMode(str, Enum):
    """Enumeration of output modes.

    Attributes:
        DUMP: Concatenated file contents annotated with relative paths.
        TREE: Box-drawing tree of the included structure.
    """

    DUMP = "dump"
    TREE = "tree"


@dataclass(frozen=True)
class Entry:
    """One filesystem node visited during a walk.

    Attributes:
        name: Basename of the file or directory.
        relative_path: Path from the project root using forward slashes and no leading slash.
            The root itself has an empty relative path.
        is_directory: True if the entry is a directory.

    Example:
        >>> entry = Entry("autoload.php", "src/vendor/autoload.php", False)
        >>> entry.extension
        'php'
        >>> entry.anchored_path
        '/src/vendor/autoload.php'
        >>> Entry("Makefile", "Makefile", False).extension
        ''
    """

    name: str
    relative_path: str
    is_directory: bool

    @property
    def extension(self) -> str:
        """Text after the final dot of the name, or an empty string if there is none."""
        _, dot, extension = self.name.rpartition(".")
        return extension if dot else ""

    @property
    def anchored_path(self) -> str:
        """The relative path with a leading slash, as written in root-anchored rules."""
        return "/" + self.relative_path

    def child(self, name: str, is_directory: bool) -> "Entry":
        """Create the entry for a direct child of this directory."""
        relative_path = f"{self.relative_path}/{name}" if self.relative_path else name
        return Entry(name, relative_path, is_directory)
