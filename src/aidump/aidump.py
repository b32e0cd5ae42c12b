"""Project flattening with streaming support.

This module provides the AIDump class, which wires a configuration, the selector,
the filter engine and a renderer together and streams the complete output for one
project root, banners included.
"""

from pathlib import Path
from typing import Iterator, Optional, Union

from aidump.banners import format_footer, format_header
from aidump.config import Config, default_config
from aidump.exceptions import RootDirectoryError
from aidump.file_content_printer import FileContentPrinter
from aidump.file_system_tree.directory_lister import DirectoryLister
from aidump.file_system_tree.file_system_tree import FileSystemTree
from aidump.file_system_tree.permission_action import PermissionAction
from aidump.filter_engine import FilterEngine
from aidump.selection.selector import Selector
from aidump.types import PathType, RenderMode


class AIDump:
    """Streaming renderer for one project directory.

    Output is produced lazily: the filesystem is walked while chunks are consumed,
    so arbitrarily large projects are processed with constant memory in dump mode.
    Tree mode builds the filtered tree before printing it.

    Each call to :meth:`stream` re-walks the filesystem with a fresh filter engine.

    Attributes:
        directory (Path): The project root.
        config (Config): Exclude and include rule sets.
        mode (RenderMode): Dump or tree output.
        project_name (str): Name shown in the banners (the root's directory name).

    Example:
        >>> dump = AIDump("my-project", mode=RenderMode.TREE)  # doctest: +SKIP
        >>> print("".join(dump.stream()))  # doctest: +SKIP
        AI-ready directory tree for the project "my-project"
        ================================================================
        <BLANKLINE>
        my-project/
        └── main.py
        <BLANKLINE>
        ================================================================
        End of AI-ready directory tree for the project "my-project"
        <BLANKLINE>
        Remember this project as "my-project" and wait for further instructions.

    Raises:
        RootDirectoryError: If directory doesn't exist or isn't a directory.
    """

    def __init__(
        self,
        directory: PathType,
        *,
        config: Optional[Config] = None,
        mode: Union[str, RenderMode] = RenderMode.DUMP,
        permission_action: Union[str, PermissionAction] = PermissionAction.WARN,
    ):
        self.directory = Path(directory)
        if not self.directory.is_dir():
            raise RootDirectoryError(str(directory))

        if isinstance(mode, str):
            try:
                mode = RenderMode(mode.lower())
            except ValueError:
                raise ValueError(f"Unsupported mode: {mode}. Must be one of: dump, tree")

        if isinstance(permission_action, str):
            try:
                permission_action = PermissionAction(permission_action.lower())
            except ValueError:
                raise ValueError(
                    f"Invalid permission_action: {permission_action}. " "Must be one of: 'ignore', 'warn', 'raise'"
                )

        self.config = config if config is not None else default_config()
        self.mode = mode
        self._lister = DirectoryLister(self.directory, permission_action)
        self._selector = Selector(self.config)
        self.project_name = self._lister.root_entry().name

    def _new_engine(self) -> FilterEngine:
        return FilterEngine(self._selector, self._lister)

    def stream_tree(self) -> Iterator[str]:
        """Yield the tree body, one newline-terminated line at a time."""
        fs_tree = FileSystemTree(self._lister, self._new_engine())
        for line in fs_tree.stream_tree_representation():
            yield line + "\n"

    def stream_contents(self) -> Iterator[bytes]:
        """Yield the dump body: framed contents of every visible file."""
        yield from FileContentPrinter(self._lister, self._new_engine()).stream_contents()

    def stream(self) -> Iterator[Union[str, bytes]]:
        """Yield the complete output for the configured mode, banners included.

        Framing is yielded as ``str`` and file contents as ``bytes``; consumers must
        write text as UTF-8 and bytes unchanged.
        """
        yield format_header(self.project_name, self.mode)
        if self.mode == RenderMode.TREE:
            yield from self.stream_tree()
        else:
            yield from self.stream_contents()
        yield format_footer(self.project_name, self.mode)
