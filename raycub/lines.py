"""Line-by-line reading from a stream in fixed-size chunks."""

from __future__ import annotations

import weakref
from typing import IO, AnyStr, Generic, Iterator, Optional

BUFFER_SIZE = 128


class LineReader(Generic[AnyStr]):
    """Read lines from a text or binary stream, keeping the trailing newline.

    Data is pulled from the stream ``buffer_size`` items at a time; any
    data read past the returned line is kept for the next call.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer_size must be positive, got {buffer_size}")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: Optional[AnyStr] = None
        self._eof = False

    def _newline(self) -> AnyStr:
        return b"\n" if isinstance(self._pending, bytes) else "\n"  # type: ignore[return-value]

    def _fill(self) -> None:
        while not self._eof and (
            self._pending is None or self._newline() not in self._pending
        ):
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                self._eof = True
            elif self._pending is None:
                self._pending = chunk
            else:
                self._pending += chunk

    def read_line(self) -> Optional[AnyStr]:
        """Return the next line with its newline, or None when nothing is left."""
        self._fill()
        if not self._pending:
            return None
        end = self._pending.find(self._newline())
        if end < 0:
            line, self._pending = self._pending, self._pending[:0]
        else:
            line = self._pending[:end + 1]
            self._pending = self._pending[end + 1:]
        return line

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.read_line()) is not None:
            yield line


_readers: "weakref.WeakKeyDictionary[IO, LineReader]" = weakref.WeakKeyDictionary()


def get_next_line(stream: Optional[IO[AnyStr]]) -> Optional[AnyStr]:
    """Return the next line of ``stream``, keeping read-ahead between calls.

    Passing None discards all data buffered for every stream.
    """
    if stream is None:
        _readers.clear()
        return None
    reader = _readers.get(stream)
    if reader is None:
        reader = LineReader(stream)
        _readers[stream] = reader
    return reader.read_line()