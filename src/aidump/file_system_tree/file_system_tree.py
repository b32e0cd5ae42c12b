"""Filtered file system tree and its box-drawing representation.

This module provides the FileSystemTree class, which materialises the walker's
output as an anytree structure. The tree printer needs to know how many visible
siblings each entry has, which a single forward pass over the walk cannot tell, so
the filtered tree is built first and rendered afterwards.
"""

from typing import Iterator, List, Optional

from aidump.file_system_tree.directory_lister import DirectoryLister
from aidump.file_system_tree.file_system_node import FileSystemNode
from aidump.file_system_tree.walker import walk
from aidump.filter_engine import FilterEngine

LAST_CONNECTOR = "└── "
MIDDLE_CONNECTOR = "├── "
LAST_PREFIX = "    "
MIDDLE_PREFIX = "│   "


class FileSystemTree:
    """A tree representation of the visible part of a directory structure.

    The tree is built lazily on first access from a walk of the filesystem. Only
    entries the filter engine allows appear in it; that includes directories made
    visible solely by an included descendant.

    Attributes:
        lister (DirectoryLister): Directory listing capability for the project root.
        engine (FilterEngine): Decides which entries are visible.

    Example:
        >>> tree = FileSystemTree(lister, engine)  # doctest: +SKIP
        >>> print(tree.get_tree_representation())  # doctest: +SKIP
        root/
        ├── a.txt
        └── b/
            └── c.txt
    """

    def __init__(self, lister: DirectoryLister, engine: FilterEngine) -> None:
        self.lister = lister
        self.engine = engine
        self._tree: Optional[FileSystemNode] = None

    def get_tree(self) -> FileSystemNode:
        """Get the root node of the filtered tree, building it if necessary."""
        if self._tree is None:
            self._tree = self._build_tree()
        return self._tree

    def _build_tree(self) -> FileSystemNode:
        root_entry = self.lister.root_entry()
        root = FileSystemNode(root_entry.name, is_dir=True, relative_path="")

        # parents[d] is the directory node holding entries at depth d
        parents: List[FileSystemNode] = [root]
        for entry, depth in walk(self.lister, self.engine, root_entry):
            del parents[depth + 1 :]  # noqa: E203
            node = FileSystemNode(
                entry.name, parent=parents[depth], is_dir=entry.is_directory, relative_path=entry.relative_path
            )
            if entry.is_directory:
                parents.append(node)

        return root

    def stream_tree_representation(self) -> Iterator[str]:
        """Generate the tree representation one line at a time.

        Generates output similar to the Unix 'tree' command. The root is printed as
        ``<name>/``; every other entry as ``<prefix><connector><name>``, with a
        trailing ``/`` for directories.

        Yields:
            Lines of the tree representation, without line terminators.

        Example:
            >>> for line in tree.stream_tree_representation():  # doctest: +SKIP
            ...     print(line)
            root/
            ├── a.txt
            └── b/
                └── c.txt
        """
        root = self.get_tree()

        def write_children(node: FileSystemNode, prefix: str) -> Iterator[str]:
            children = node.children
            for i, child in enumerate(children):
                is_last = i == len(children) - 1
                connector = LAST_CONNECTOR if is_last else MIDDLE_CONNECTOR
                suffix = "/" if child.is_dir else ""
                yield f"{prefix}{connector}{child.name}{suffix}"
                if child.is_dir:
                    yield from write_children(child, prefix + (LAST_PREFIX if is_last else MIDDLE_PREFIX))

        yield f"{root.name}/"
        yield from write_children(root, "")

    def get_tree_representation(self) -> str:
        """Get the complete tree representation as a single string."""
        return "\n".join(self.stream_tree_representation())
