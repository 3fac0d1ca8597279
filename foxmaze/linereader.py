"""Read a stream one line at a time through a fixed-size read buffer."""

from __future__ import annotations

from typing import AnyStr, Generic, Iterator, Optional, Protocol

DEFAULT_BUFFER_SIZE = 1024


class _Readable(Protocol[AnyStr]):
    def read(self, size: int) -> AnyStr: ...


class LineReader(Generic[AnyStr]):
    """Return successive lines of ``source``, each keeping its trailing newline.

    ``source`` may be a text or binary stream; lines come back as the same type.
    """

    def __init__(self, source: _Readable, buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        if source is None:
            raise ValueError("no source to read from")
        self._source = source
        self._buffer_size = buffer_size
        self._pending: Optional[AnyStr] = None

    def _newline(self) -> AnyStr:
        return b"\n" if isinstance(self._pending, bytes) else "\n"  # type: ignore[return-value]

    def read_line(self) -> Optional[AnyStr]:
        """Return the next line, or ``None`` once the source is exhausted."""
        while True:
            if self._pending is not None:
                end = self._pending.find(self._newline())
                if end != -1:
                    line = self._pending[: end + 1]
                    self._pending = self._pending[end + 1 :]
                    return line
            chunk = self._source.read(self._buffer_size)
            if not chunk:
                break
            self._pending = chunk if self._pending is None else self._pending + chunk
        if not self._pending:
            self._pending = None
            return None
        line, self._pending = self._pending, None
        return line

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.read_line()) is not None:
            yield line


def read_lines(path, buffer_size: int = DEFAULT_BUFFER_SIZE) -> Iterator[str]:
    """Yield the lines of the text file at ``path``, newlines kept as written."""
    with open(path, encoding="utf-8", newline="") as handle:
        yield from LineReader(handle, buffer_size)