"""File content printer with streaming support.

This module renders the dump mode body: every visible file is framed by separator
lines and its relative path, and its content is copied through unchanged. The
framing is the format downstream consumers parse, so it is reproduced exactly::

    ----------------------------------------------------------------
    FILE: src/main.py
    ---
    <raw file bytes>
    ----------------------------------------------------------------

"""

import logging
from typing import BinaryIO, Iterator, Optional

from .file_system_tree.directory_lister import DirectoryLister
from .file_system_tree.permission_action import PermissionAction
from .file_system_tree.walker import walk
from .filter_engine import FilterEngine
from .io.chunked_file_reader import ChunkedFileReader
from .types import Entry

logger = logging.getLogger(__name__)

SEPARATOR = "-" * 64
FILE_PREFIX = "FILE: "
CONTENT_MARKER = "---"


def format_start(relative_path: str) -> bytes:
    """Framing emitted before a file's content.

    Example:
        >>> format_start("a/b.txt").decode("utf-8").splitlines()[1:]
        ['FILE: a/b.txt', '---']
    """
    return f"{SEPARATOR}\n{FILE_PREFIX}{relative_path}\n{CONTENT_MARKER}\n".encode("utf-8")


def format_end() -> bytes:
    """Framing emitted after a file's content: the trailing newline, a separator and a blank line."""
    return f"\n{SEPARATOR}\n\n".encode("utf-8")


class FileContentPrinter:
    """Streams visible file contents with consistent framing and constant memory usage.

    Directories are never printed, only traversed. Files that cannot be opened are
    handled according to the lister's permission action: skipped silently, skipped
    with a logged warning, or raised.

    Attributes:
        lister (DirectoryLister): Directory listing capability for the project root.
        engine (FilterEngine): Decides which entries are visible.
        chunk_size (int): Read size used for file contents.

    Example:
        >>> printer = FileContentPrinter(lister, engine)  # doctest: +SKIP
        >>> for chunk in printer.stream_contents():  # doctest: +SKIP
        ...     sys.stdout.buffer.write(chunk)
    """

    def __init__(self, lister: DirectoryLister, engine: FilterEngine, chunk_size: int = 65536) -> None:
        self.lister = lister
        self.engine = engine
        self.chunk_size = chunk_size

    def stream_contents(self) -> Iterator[bytes]:
        """Yield the framed contents of every visible file in walk order."""
        for entry, _ in walk(self.lister, self.engine):
            if entry.is_directory:
                continue
            yield from self.stream_file(entry)

    def stream_file(self, entry: Entry) -> Iterator[bytes]:
        """Yield the framed content of a single file.

        Raises:
            OSError: If the file cannot be opened and the permission action is RAISE,
                or if reading fails after the file was opened.
        """
        file_obj = self._open(entry)
        if file_obj is None:
            return

        with file_obj:
            yield format_start(entry.relative_path)
            yield from ChunkedFileReader(file_obj, self.chunk_size)
            yield format_end()

    def _open(self, entry: Entry) -> Optional[BinaryIO]:
        path = self.lister.path_of(entry)
        try:
            return open(path, "rb")
        except OSError as e:
            if self.lister.permission_action == PermissionAction.RAISE:
                raise
            if self.lister.permission_action == PermissionAction.WARN:
                logger.warning("Skipping unreadable file %s: %s", path, e.strerror or e)
            return None
