"""Text sinks that JSON output can be written to."""

from __future__ import annotations

from typing import List, Protocol, TextIO


class Sink(Protocol):
    def write(self, text: str) -> int: ...


class LengthCounter:
    """Discards text and reports how much was written."""

    def __init__(self) -> None:
        self.length = 0

    def write(self, text: str) -> int:
        self.length += len(text)
        return len(text)


class StringBuilder:
    """Accumulates text without limit."""

    def __init__(self) -> None:
        self._parts: List[str] = []

    def write(self, text: str) -> int:
        self._parts.append(text)
        return len(text)

    def getvalue(self) -> str:
        return "".join(self._parts)


class BoundedStringBuilder:
    """Accumulates text into a buffer of ``size`` slots, one kept for a terminator."""

    def __init__(self, size: int) -> None:
        if size < 1:
            raise ValueError("buffer size must be at least 1")
        self._room = size - 1
        self._parts: List[str] = []

    def write(self, text: str) -> int:
        accepted = text[: self._room]
        self._room -= len(accepted)
        self._parts.append(accepted)
        return len(accepted)

    def getvalue(self) -> str:
        return "".join(self._parts)


class StreamSink:
    """Forwards text to a text stream."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream

    def write(self, text: str) -> int:
        self._stream.write(text)
        return len(text)


class IndentedPrint:
    """Prefixes every line written to a sink with the current indentation."""

    MAX_LEVEL = 15
    MAX_TAB_SIZE = 7

    def __init__(self, sink: Sink, tab_size: int = 2) -> None:
        self._sink = sink
        self.level = 0
        self._tab_size = 2
        self.tab_size = tab_size
        self._at_line_start = True

    @property
    def tab_size(self) -> int:
        return self._tab_size

    @tab_size.setter
    def tab_size(self, value: int) -> None:
        # sizes that do not fit are ignored, as is the limit of the indentation field
        if 0 <= value < self.MAX_TAB_SIZE:
            self._tab_size = value

    def write(self, text: str) -> int:
        written = 0
        for char in text:
            if self._at_line_start:
                written += self._sink.write(" " * (self.level * self._tab_size))
            written += self._sink.write(char)
            self._at_line_start = char == "\n"
        return written

    def indent(self) -> None:
        if self.level < self.MAX_LEVEL:
            self.level += 1

    def unindent(self) -> None:
        if self.level > 0:
            self.level -= 1


class Prettyfier:
    """Turns compact JSON text into indented JSON as it is written."""

    def __init__(self, sink: IndentedPrint) -> None:
        self._sink = sink
        self._previous = ""
        self._in_string = False

    def write(self, text: str) -> int:
        written = 0
        for char in text:
            if self._in_string:
                written += self._string_char(char)
            else:
                written += self._markup_char(char)
            self._previous = char
        return written

    def _in_empty_block(self) -> bool:
        return self._previous in ("{", "[")

    def _string_char(self, char: str) -> int:
        if char == '"' and self._previous != "\\":
            self._in_string = False
        return self._sink.write(char)

    def _markup_char(self, char: str) -> int:
        if char in "{[":
            return self._indent_if_needed() + self._sink.write(char)
        if char in "}]":
            return self._unindent_if_needed() + self._sink.write(char)
        if char == ":":
            return self._sink.write(": ")
        if char == ",":
            return self._sink.write(",\r\n")
        if char == '"':
            self._in_string = True
        return self._indent_if_needed() + self._sink.write(char)

    def _indent_if_needed(self) -> int:
        if not self._in_empty_block():
            return 0
        self._sink.indent()
        return self._sink.write("\r\n")

    def _unindent_if_needed(self) -> int:
        if self._in_empty_block():
            return 0
        self._sink.unindent()
        return self._sink.write("\r\n")