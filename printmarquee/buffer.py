"""A fixed-capacity byte arena with aligned allocations and in-place strings."""

from __future__ import annotations

from typing import Optional, Union


class StaticBuffer:
    """A byte arena of fixed capacity that hands out aligned regions."""

    def __init__(self, capacity: int, alignment: int = 4) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        if alignment < 1:
            raise ValueError("alignment must be at least 1")
        self._data = bytearray(capacity)
        self._alignment = alignment
        self._size = 0

    @property
    def capacity(self) -> int:
        """Capacity of the buffer in bytes."""
        return len(self._data)

    @property
    def size(self) -> int:
        """Bytes currently in use, alignment padding included."""
        return self._size

    def alloc(self, size: int) -> Optional[int]:
        """Reserve ``size`` bytes; return their offset, or None when they do not fit."""
        if size < 0:
            raise ValueError("size must not be negative")
        self._align_next_alloc()
        if not self._can_alloc(size):
            return None
        return self._do_alloc(size)

    def clear(self) -> None:
        """Forget every allocation. Offsets handed out before become meaningless."""
        self._size = 0

    def start_string(self) -> "BufferString":
        """Begin a string that grows one byte at a time at the end of the buffer."""
        return BufferString(self)

    def read(self, offset: int, length: int) -> bytes:
        """Return ``length`` bytes stored at ``offset``."""
        if offset < 0 or length < 0 or offset + length > len(self._data):
            raise IndexError("range lies outside the buffer")
        return bytes(self._data[offset : offset + length])

    def _align_next_alloc(self) -> None:
        step = self._alignment
        self._size = -(-self._size // step) * step

    def _can_alloc(self, size: int) -> bool:
        return self._size + size <= len(self._data)

    def _do_alloc(self, size: int) -> int:
        offset = self._size
        self._size += size
        return offset

    def _store(self, offset: int, data: bytes) -> None:
        self._data[offset : offset + len(data)] = data


def _char_byte(char: Union[str, int]) -> int:
    if isinstance(char, int):
        code = char
    elif len(char) == 1:
        code = ord(char)
    else:
        raise ValueError("append expects a single character")
    if not 0 <= code <= 0xFF:
        raise ValueError("character does not fit in one byte")
    return code


class BufferString:
    """A string built in place at the end of a StaticBuffer."""

    def __init__(self, buffer: StaticBuffer) -> None:
        self._buffer = buffer
        self._start = buffer.size

    def append(self, char: Union[str, int]) -> None:
        """Add one character; it is silently dropped when the buffer is full."""
        code = _char_byte(char)
        if self._buffer._can_alloc(1):
            offset = self._buffer._do_alloc(1)
            self._buffer._store(offset, bytes([code]))

    def c_str(self) -> Optional[str]:
        """Terminate the string and return it, or None when no room is left for the terminator."""
        if not self._buffer._can_alloc(1):
            return None
        end = self._buffer._do_alloc(1)
        self._buffer._store(end, b"\0")
        return self._buffer.read(self._start, end - self._start).decode("latin-1")


def duplicate(text: Optional[str], buffer: StaticBuffer) -> Optional[int]:
    """Copy ``text`` with a terminating NUL into ``buffer``; return its offset or None."""
    if text is None:
        return None
    data = text.encode("utf-8") + b"\0"
    offset = buffer.alloc(len(data))
    if offset is None:
        return None
    buffer._store(offset, data)
    return offset