"""Character readers with one character of look-ahead."""

from __future__ import annotations

from typing import Optional, TextIO

NUL = "\0"


class StringReader:
    """Reads characters from a string; past the end it yields NUL."""

    def __init__(self, text: Optional[str]) -> None:
        self._text = text if text is not None else ""
        self._position = 0

    def _char_at(self, index: int) -> str:
        return self._text[index] if index < len(self._text) else NUL

    def move(self) -> None:
        self._position += 1

    def current(self) -> str:
        return self._char_at(self._position)

    def next(self) -> str:
        return self._char_at(self._position + 1)


class StreamReader:
    """Reads characters lazily from a text stream; at end of stream it yields NUL."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._current: Optional[str] = None
        self._next: Optional[str] = None

    def _read(self) -> str:
        char = self._stream.read(1)
        return char if char else NUL

    def move(self) -> None:
        self._current = self._next
        self._next = None

    def current(self) -> str:
        if not self._current or self._current == NUL:
            self._current = self._read()
        return self._current

    def next(self) -> str:
        # current() is expected to have been called first
        if not self._next or self._next == NUL:
            self._next = self._read()
        return self._next