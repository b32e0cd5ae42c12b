"""Node representation for file system elements in the tree."""

from typing import Any, Optional

from anytree import Node


class FileSystemNode(Node):  # type: ignore
    """Node class representing a visible file or directory in the filtered tree.

    Extends anytree.Node with the directory flag and the root-relative path of the
    entry the node was built from. Inherits tree traversal capabilities from
    anytree.Node.

    Attributes:
        name (str): The name of the file or directory (just the basename).
        parent (Optional[FileSystemNode]): The parent node in the tree.
        is_dir (bool): True if this node represents a directory, False for files.
        relative_path (str): Forward-slash path from the project root ("" for the root).
        children (tuple[FileSystemNode]): The child nodes (inherited from anytree.Node).

    Example:
        >>> root = FileSystemNode("root", is_dir=True)
        >>> child = FileSystemNode("a.txt", parent=root, relative_path="a.txt")
        >>> child.is_dir
        False
        >>> [node.name for node in root.children]
        ['a.txt']
    """

    def __init__(
        self,
        name: str,
        parent: Optional["FileSystemNode"] = None,
        is_dir: bool = False,
        relative_path: str = "",
        **kwargs: Any,
    ) -> None:
        super().__init__(name, parent, **kwargs)
        self.is_dir = is_dir
        self.relative_path = relative_path
