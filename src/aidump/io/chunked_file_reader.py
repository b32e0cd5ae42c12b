"""Tools for chunk-based file reading operations."""

from typing import BinaryIO, Iterator


class ChunkedFileReader:
    """Iterator-based chunked reader for binary file objects.

    File contents are passed through byte for byte, so files are read in binary mode
    and never decoded. Reading in fixed-size chunks keeps memory usage constant
    regardless of file size.

    Args:
        file_obj: An opened binary file object to read from.
        chunk_size: Size of chunks to read in bytes. Must be at least 4096 bytes.
            Defaults to 65536 (64 KB).

    Raises:
        ValueError: If chunk_size is less than 4096 bytes.

    Example:
        >>> import io
        >>> reader = ChunkedFileReader(io.BytesIO(b"x" * 5000), chunk_size=4096)
        >>> [len(chunk) for chunk in reader]
        [4096, 904]
    """

    MINIMUM_CHUNK_SIZE = 4096  # 4 KB

    def __init__(self, file_obj: BinaryIO, chunk_size: int = 65536) -> None:
        if chunk_size < self.MINIMUM_CHUNK_SIZE:
            raise ValueError(f"chunk_size must be at least {self.MINIMUM_CHUNK_SIZE} bytes, " f"got {chunk_size}")

        self._file: BinaryIO = file_obj
        self._chunk_size: int = chunk_size

    def __iter__(self) -> Iterator[bytes]:
        return self

    def __next__(self) -> bytes:
        chunk = self._file.read(self._chunk_size)
        if not chunk:
            raise StopIteration
        return chunk
