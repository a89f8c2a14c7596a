"""Safe output writing utilities for the any2tree CLI.

This module provides a buffered writer that stops cleanly when the consumer
goes away or the user interrupts the program.
"""

import errno
import os
import types
from pathlib import Path
from typing import List, Optional, Type, Union

from any2tree.cli.signal_handler import signal_handler

DEFAULT_BUFFER_SIZE = 8192


class SafeWriter:
    """Buffered, signal-aware writer for a file descriptor or a file.

    Text is encoded as UTF-8. File names that are not valid UTF-8 reach Python
    as surrogate escapes; they are written back as their original bytes.

    A broken pipe (the consumer closed its end) or a received SIGPIPE/SIGINT
    surfaces as BrokenPipeError from write() or flush(), which the renderers
    treat as the signal to stop.

    Attributes:
        file: Either a file path or file descriptor for output.
        fd: The actual file descriptor being written to.
        buffer_size: Number of bytes collected before they are written out.
    """

    def __init__(self, file: Union[int, Path, str], buffer_size: int = DEFAULT_BUFFER_SIZE):
        """Initialize the safe writer.

        Args:
            file: Either a file descriptor (int) or a path to write to.
            buffer_size: Number of bytes collected before they are written out.
                Use 0 to write every call through immediately.

        Raises:
            TypeError: If file is neither a file descriptor nor a path.
        """
        self.file = file
        self.buffer_size = buffer_size
        self._buffer: List[bytes] = []
        self._buffered = 0
        self._closed = False

        if isinstance(file, int):
            self.fd = file
            self._file_obj = None
        elif isinstance(file, (str, os.PathLike)):
            self._file_obj = Path(file).open("wb")
            self.fd = self._file_obj.fileno()
        else:
            raise TypeError(f"Expected int, str, or PathLike, got {type(file).__name__}")

    def write(self, data: str) -> None:
        """Queue text for output, flushing once the buffer is full.

        Raises:
            BrokenPipeError: If SIGPIPE/SIGINT was received or the pipe is broken.
            OSError: If an I/O error occurs during writing.
            ValueError: If attempting to write to a closed writer.
        """
        if self._closed:
            raise ValueError("Cannot write to closed SafeWriter")

        if signal_handler.interrupted:
            self._buffer.clear()
            self._buffered = 0
            raise BrokenPipeError()

        encoded = data.encode("utf-8", errors="surrogateescape")
        self._buffer.append(encoded)
        self._buffered += len(encoded)
        if self._buffered >= self.buffer_size:
            self.flush()

    def flush(self) -> None:
        """Write out everything buffered so far.

        Raises:
            BrokenPipeError: If the pipe is broken.
            OSError: If an I/O error occurs during writing.
        """
        if not self._buffer:
            return
        data = b"".join(self._buffer)
        self._buffer.clear()
        self._buffered = 0
        try:
            view = memoryview(data)
            while view:
                written = os.write(self.fd, view)
                view = view[written:]
        except OSError as e:
            if e.errno == errno.EPIPE:
                raise BrokenPipeError()
            raise

    def isatty(self) -> bool:
        """Check whether output goes to a terminal."""
        return not self._closed and os.isatty(self.fd)

    def close(self) -> None:
        """Flush pending output and close the file if this writer opened it.

        A broken pipe during the final flush or close is not an error: the
        consumer no longer wants the output.
        """
        if self._closed:
            return

        try:
            if not signal_handler.interrupted:
                self.flush()
        except BrokenPipeError:
            pass
        finally:
            self._buffer.clear()
            self._closed = True
            if self._file_obj is not None:
                try:
                    self._file_obj.close()
                except OSError as e:
                    if e.errno != errno.EPIPE:
                        raise

    def __enter__(self) -> "SafeWriter":
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_val: Optional[BaseException],
        exc_tb: Optional[types.TracebackType],
    ) -> None:
        """Close the writer; an error from closing never masks an earlier exception."""
        try:
            self.close()
        except OSError:
            if exc_type is None:
                raise
