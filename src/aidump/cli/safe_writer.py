"""Safe output writing utilities for aidump CLI.

This module provides the output sink: a writer that accepts both text framing and
raw file bytes, and stops cleanly when the process is interrupted.
"""

import errno
import os
import types
from pathlib import Path
from typing import BinaryIO, Optional, Type, Union

from aidump.cli.signal_handler import signal_handler
from aidump.exceptions import OutputSinkError


class SafeWriter:
    """Signal-aware writer for the output sink.

    Text is encoded as UTF-8; bytes are written unchanged. Writes go straight to the
    file descriptor in emission order, so output is complete once the writer is
    closed.

    Attributes:
        file: Either a file path or file descriptor for output.
        fd: The actual file descriptor being written to.

    Example:
        >>> with SafeWriter(Path("out.txt")) as writer:  # doctest: +SKIP
        ...     writer.write("FILE: a.txt\\n")
        ...     writer.write(b"raw bytes")
    """

    def __init__(self, file: Union[int, str, os.PathLike]):
        """Initialize the safe writer.

        Args:
            file: Either a file descriptor (int) or a path to open for writing.

        Raises:
            OutputSinkError: If the path cannot be opened for writing.
            TypeError: If file is neither a descriptor nor a path.
        """
        self.file = file
        self._closed = False
        self._file_obj: Optional[BinaryIO] = None

        if isinstance(file, int):
            self.fd = file
        elif isinstance(file, (str, os.PathLike)):
            try:
                self._file_obj = Path(file).open("wb")
            except OSError as e:
                raise OutputSinkError(str(file)) from e
            self.fd = self._file_obj.fileno()
        else:
            raise TypeError(f"Expected int, str, or PathLike, got {type(file).__name__}")

    def write(self, data: Union[str, bytes]) -> None:
        """Write a chunk of output.

        Raises:
            BrokenPipeError: If a signal was received or the pipe is broken.
            OSError: If an I/O error occurs during writing.
            ValueError: If attempting to write to a closed writer.
        """
        if self._closed:
            raise ValueError("Cannot write to closed SafeWriter")

        if signal_handler.interrupted():
            raise BrokenPipeError()

        payload = data.encode("utf-8") if isinstance(data, str) else data
        try:
            # os.write may write fewer bytes than requested
            view = memoryview(payload)
            while view:
                written = os.write(self.fd, view)
                view = view[written:]
        except OSError as e:
            if e.errno == errno.EPIPE:
                raise BrokenPipeError()
            raise

    def close(self) -> None:
        """Close the file if it was opened by this writer. Broken pipes on close are ignored."""
        if self._closed:
            return

        if self._file_obj is not None:
            try:
                self._file_obj.close()
            except OSError as e:
                if e.errno != errno.EPIPE:
                    raise

        self._closed = True

    def __enter__(self) -> "SafeWriter":
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_val: Optional[BaseException],
        exc_tb: Optional[types.TracebackType],
    ) -> None:
        try:
            self.close()
        except OSError:
            # An exception from the with block takes priority over one from close
            if exc_type is None:
                raise
