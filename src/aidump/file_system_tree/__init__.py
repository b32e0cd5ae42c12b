"""Filtered directory traversal and tree representation.

This package lists directories, walks the filtered tree depth-first, and renders
the visible structure as a box-drawing tree.
"""

from .directory_lister import DirectoryLister
from .file_system_node import FileSystemNode
from .file_system_tree import FileSystemTree
from .permission_action import PermissionAction
from .walker import walk

__all__ = ["DirectoryLister", "FileSystemNode", "FileSystemTree", "PermissionAction", "walk"]
