# printmarquee

Small building blocks for a display that scrolls printer status and the time of
day. The package needs nothing outside the standard library.

## What it holds

- `printmarquee.jsonwriter` writes Python values as JSON, compact or indented.
  It has `dumps`, `pretty_dumps`, `dump_bounded` (output cut off to fit a
  buffer of a given size, one slot kept for a terminator), `measure_length`
  and `measure_pretty_length`. For any object with a `write(text)` method that
  returns the number of characters accepted, it has `print_to` and
  `pretty_print_to`. `JsonWriter` writes single tokens and `serialize` walks a
  value through it. `None` becomes `null`; mappings need string keys; lists
  and tuples become arrays; anything else raises `TypeError`. `RawJson` marks
  text that goes into the output exactly as given. Floats are written with at
  most nine significant decimals and an exponent for very large or very small
  values. `NaN` and `Infinity` are written as bare words.
- `printmarquee.sinks` has the output targets. `LengthCounter` only counts.
  `StringBuilder` collects text. `BoundedStringBuilder` stops at a fixed
  capacity. `StreamSink` writes to a text stream. `IndentedPrint` prefixes
  each line with the current indentation, and `Prettyfier` turns compact JSON
  into indented JSON with `\r\n` line breaks.
- `printmarquee.floatparts` splits a float into integral part, decimals and
  exponent (`FloatParts`, `split_float`, `normalize`, `make_float`), in double
  precision by default or single precision with `double=False`.
- `printmarquee.buffer` has `StaticBuffer`, a fixed-capacity byte arena with
  aligned allocation that returns offsets, or `None` when a request does not
  fit. It also has `BufferString`, a string grown in place at the end of the
  buffer, and `duplicate`, which copies a NUL-terminated string into it.
- `printmarquee.readers` has `StringReader` and `StreamReader`. Each is a
  character cursor with one character of lookahead that yields `"\0"` past
  the end.
- `printmarquee.timeclient` has `TimeClient`. It reads the time of day from
  the `Date:` header of a plain HTTP response and adds a UTC offset. It shows
  the time as `HH:MM:SS` or as `h:MM AM/PM`. Until a non-zero time of day has
  been set, every field shows `--`.

## Examples

```python
from printmarquee.jsonwriter import dumps, pretty_dumps, dump_bounded

dumps({"state": "Printing", "progress": 42.5, "tools": [200, 60]})
# '{"state":"Printing","progress":42.5,"tools":[200,60]}'

print(pretty_dumps({"a": [1, 2]}))
# {
#   "a": [
#     1,
#     2
#   ]
# }

dump_bounded([1, 2, 3], 5)
# '[1,2'
```

```python
from printmarquee.timeclient import TimeClient, parse_date_line

parse_date_line("Date: Thu, 19 Nov 2015 20:25:40 GMT")
# 73540 (seconds since midnight, UTC)

clock = TimeClient(utc_offset=-6)
clock.apply_seconds_of_day(73540)
clock.formatted_time()        # '14:25:40'
clock.am_pm_formatted_time()  # '2:25 PM'
```

`TimeClient.update_time()` opens a plain HTTP connection (by default to
`www.google.com` on port 80), sends a `GET /` request and returns the seconds
of day it found, or `None` if no `Date:` line came back. Connection errors are
raised as `OSError`. The clock keeps counting from the moment of the last
sync, using the clock function given to the constructor.

## What it does not do

There is no JSON parser: the readers are cursors only, and nothing in the
package reads JSON text back into values. There is no display, printer
connection or command-line program; the package only supplies the pieces
listed above.

## Tests

```
pip install -e .[test]
pytest
```