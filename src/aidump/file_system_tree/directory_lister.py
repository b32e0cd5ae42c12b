"""Directory listing capability used by the walker and the filter engine."""

import logging
import os
from pathlib import Path
from typing import List

from aidump.exceptions import RootDirectoryError
from aidump.file_system_tree.permission_action import PermissionAction
from aidump.types import Entry, PathType

logger = logging.getLogger(__name__)


class DirectoryLister:
    """Lists the children of directory entries below a project root.

    Children are returned sorted lexicographically by name. Operating systems do not
    define a directory listing order, so sorting keeps output stable across runs and
    platforms. Symbolic links are reported as what they point to.

    Attributes:
        root_path (Path): The project root.
        permission_action (PermissionAction): How to handle directories that cannot be listed.

    Example:
        >>> lister = DirectoryLister("src")  # doctest: +SKIP
        >>> [e.relative_path for e in lister.list_children(lister.root_entry())]  # doctest: +SKIP
        ['aidump']
    """

    def __init__(self, root_path: PathType, permission_action: PermissionAction = PermissionAction.WARN) -> None:
        """Initialize a DirectoryLister.

        Args:
            root_path: Path to the project root.
            permission_action: How to handle listing errors. Defaults to WARN.

        Raises:
            RootDirectoryError: If the root path doesn't exist or isn't a directory.
        """
        self.root_path = Path(root_path)
        if not self.root_path.is_dir():
            raise RootDirectoryError(str(root_path))
        self.permission_action = permission_action

    def root_entry(self) -> Entry:
        """The entry for the root itself, named after the resolved directory."""
        return Entry(self.root_path.resolve().name, "", True)

    def path_of(self, entry: Entry) -> Path:
        """Absolute filesystem path of an entry."""
        return self.root_path / entry.relative_path if entry.relative_path else self.root_path

    def list_children(self, entry: Entry) -> List[Entry]:
        """List the direct children of a directory entry.

        Raises:
            PermissionError: If the directory cannot be read and permission_action is RAISE.
            OSError: If listing fails for another reason and permission_action is RAISE.
        """
        path = self.path_of(entry)
        try:
            with os.scandir(path) as it:
                dir_entries = sorted(it, key=lambda d: d.name)
        except OSError as e:
            if self.permission_action == PermissionAction.RAISE:
                if isinstance(e, PermissionError):
                    raise PermissionError(f"Access denied to {path}: {e}") from e
                raise
            if self.permission_action == PermissionAction.WARN:
                logger.warning("Skipping unreadable directory %s: %s", path, e.strerror or e)
            return []

        children = []
        for dir_entry in dir_entries:
            try:
                is_directory = dir_entry.is_dir()
            except OSError:
                # Treat entries we cannot stat as files; reading them reports the error
                is_directory = False
            children.append(entry.child(dir_entry.name, is_directory))
        return children
