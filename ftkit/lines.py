"""Reading a stream one line at a time through a fixed-size read buffer."""

from __future__ import annotations

from typing import IO, AnyStr, Generic, Iterator, Optional

DEFAULT_BUFFER_SIZE = 42


class LineReader(Generic[AnyStr]):
    """Split a text or binary stream into lines.

    The stream is read in chunks of ``buffer_size`` until a newline has
    been seen or the stream is exhausted. Each line keeps its newline; the
    last line may lack one.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = DEFAULT_BUFFER_SIZE):
        if isinstance(buffer_size, bool) or not isinstance(buffer_size, int):
            raise TypeError(
                f"buffer_size must be an integer, got {type(buffer_size).__name__}"
            )
        if buffer_size <= 0:
            raise ValueError(f"buffer_size must be positive, got {buffer_size}")
        self._stream = stream
        self._buffer_size = buffer_size
        self._stash: Optional[AnyStr] = None

    def _newline(self) -> AnyStr:
        return "\n" if isinstance(self._stash, str) else b"\n"  # type: ignore[return-value]

    def _fill(self) -> None:
        while self._stash is None or self._newline() not in self._stash:
            try:
                chunk = self._stream.read(self._buffer_size)
            except OSError:
                self._stash = None
                raise
            if not chunk:
                return
            self._stash = chunk if self._stash is None else self._stash + chunk

    def read_line(self) -> Optional[AnyStr]:
        """Return the next line, or None when the stream has no more data."""
        self._fill()
        stash = self._stash
        if not stash:
            self._stash = None
            return None
        end = stash.find(self._newline())
        if end < 0:
            self._stash = None
            return stash
        self._stash = stash[end + 1:]
        return stash[: end + 1]

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.read_line()) is not None:
            yield line