"""Compact and indented JSON serialization onto text sinks."""

from __future__ import annotations

import math
from collections.abc import Mapping
from typing import Any, Optional

from .floatparts import split_float
from .sinks import (
    BoundedStringBuilder,
    IndentedPrint,
    LengthCounter,
    Prettyfier,
    Sink,
    StringBuilder,
)

_ESCAPES = {
    '"': '"',
    "\\": "\\",
    "\b": "b",
    "\f": "f",
    "\n": "n",
    "\r": "r",
    "\t": "t",
}


class RawJson(str):
    """Text that is already JSON and is written out unchanged."""


class JsonWriter:
    """Writes JSON tokens to a sink and counts what the sink accepted."""

    def __init__(self, sink: Sink) -> None:
        self._sink = sink
        self.bytes_written = 0

    def begin_array(self) -> None:
        self.write_raw("[")

    def end_array(self) -> None:
        self.write_raw("]")

    def begin_object(self) -> None:
        self.write_raw("{")

    def end_object(self) -> None:
        self.write_raw("}")

    def write_colon(self) -> None:
        self.write_raw(":")

    def write_comma(self) -> None:
        self.write_raw(",")

    def write_boolean(self, value: bool) -> None:
        self.write_raw("true" if value else "false")

    def write_string(self, value: Optional[str]) -> None:
        if value is None:
            self.write_raw("null")
            return
        self.write_raw('"')
        for char in value:
            escaped = _ESCAPES.get(char)
            self.write_raw("\\" + escaped if escaped else char)
        self.write_raw('"')

    def write_float(self, value: float) -> None:
        if math.isnan(value):
            self.write_raw("NaN")
            return
        if value < 0.0:
            self.write_raw("-")
            value = -value
        if math.isinf(value):
            self.write_raw("Infinity")
            return

        parts = split_float(value)
        self.write_integer(parts.integral)
        if parts.decimal_places:
            self.write_decimals(parts.decimal, parts.decimal_places)
        if parts.exponent < 0:
            self.write_raw("e-")
            self.write_integer(-parts.exponent)
        elif parts.exponent > 0:
            self.write_raw("e")
            self.write_integer(parts.exponent)

    def write_integer(self, value: int) -> None:
        if value < 0:
            raise ValueError("write_integer expects a non-negative value")
        self.write_raw(str(value))

    def write_decimals(self, value: int, width: int) -> None:
        digits = str(value % 10**width).zfill(width) if width > 0 else ""
        self.write_raw("." + digits)

    def write_raw(self, text: str) -> None:
        self.bytes_written += self._sink.write(text)


def serialize(value: Any, writer: JsonWriter) -> None:
    """Write a Python value as JSON through ``writer``."""
    if value is None:
        writer.write_string(None)
    elif isinstance(value, bool):
        writer.write_boolean(value)
    elif isinstance(value, int):
        if value < 0:
            writer.write_raw("-")
            value = -value
        writer.write_integer(value)
    elif isinstance(value, float):
        writer.write_float(value)
    elif isinstance(value, RawJson):
        writer.write_raw(str(value))
    elif isinstance(value, str):
        writer.write_string(value)
    elif isinstance(value, Mapping):
        writer.begin_object()
        for position, (key, item) in enumerate(value.items()):
            if not isinstance(key, str):
                raise TypeError(f"object keys must be strings, not {type(key).__name__}")
            if position:
                writer.write_comma()
            writer.write_string(key)
            writer.write_colon()
            serialize(item, writer)
        writer.end_object()
    elif isinstance(value, (list, tuple)):
        writer.begin_array()
        for position, item in enumerate(value):
            if position:
                writer.write_comma()
            serialize(item, writer)
        writer.end_array()
    else:
        raise TypeError(f"cannot serialize {type(value).__name__} to JSON")


def print_to(value: Any, sink: Sink) -> int:
    """Write compact JSON to ``sink``; return the number of characters accepted."""
    writer = JsonWriter(sink)
    serialize(value, writer)
    return writer.bytes_written


def pretty_print_to(value: Any, sink: Sink) -> int:
    """Write indented JSON to ``sink``; return the number of characters accepted."""
    indented = sink if isinstance(sink, IndentedPrint) else IndentedPrint(sink)
    return print_to(value, Prettyfier(indented))


def dumps(value: Any) -> str:
    """Return compact JSON text for ``value``."""
    builder = StringBuilder()
    print_to(value, builder)
    return builder.getvalue()


def pretty_dumps(value: Any) -> str:
    """Return indented JSON text for ``value``."""
    builder = StringBuilder()
    pretty_print_to(value, builder)
    return builder.getvalue()


def dump_bounded(value: Any, size: int) -> str:
    """Return compact JSON truncated to fit a buffer of ``size`` slots."""
    builder = BoundedStringBuilder(size)
    print_to(value, builder)
    return builder.getvalue()


def measure_length(value: Any) -> int:
    """Return the length of the compact JSON for ``value``."""
    return print_to(value, LengthCounter())


def measure_pretty_length(value: Any) -> int:
    """Return the length of the indented JSON for ``value``."""
    return pretty_print_to(value, LengthCounter())