"""Read a stream one line at a time through a fixed-size read buffer."""

from __future__ import annotations

from typing import IO, AnyStr, Generic, Iterator, Optional

DEFAULT_BUFFER_SIZE = 10


class LineReader(Generic[AnyStr]):
    """Return successive lines, each with its trailing newline if it has one."""

    def __init__(self, stream: IO[AnyStr], buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: Optional[AnyStr] = None

    def _fill(self) -> None:
        """Read chunks until a newline is buffered or the stream is exhausted."""
        while True:
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                return
            if self._pending is None:
                self._pending = chunk[:0]
            self._pending += chunk
            newline = "\n" if isinstance(chunk, str) else b"\n"
            if newline in chunk:
                return

    def read_line(self) -> Optional[AnyStr]:
        """Return the next line, or None when nothing is left."""
        self._fill()
        pending = self._pending
        if not pending:
            return None
        newline = "\n" if isinstance(pending, str) else b"\n"
        cut = pending.find(newline)  # type: ignore[arg-type]
        if cut < 0:
            self._pending = pending[:0]
            return pending
        self._pending = pending[cut + 1 :]
        return pending[: cut + 1]

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.read_line()) is not None:
            yield line