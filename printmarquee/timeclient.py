"""Time of day taken from the Date header of an HTTP server."""

from __future__ import annotations

import math
import re
import socket
import time
from typing import Callable, Optional

DEFAULT_HOST = "www.google.com"
DEFAULT_PORT = 80
SECONDS_PER_DAY = 86400
PLACEHOLDER = "--"

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _to_int(text: str) -> int:
    """Leading integer of ``text``, or 0 when it does not start with one."""
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def _round_half_away(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def parse_date_line(line: str) -> Optional[int]:
    """Return the seconds of the day in an HTTP Date header line, or None for other lines."""
    upper = line.upper()
    if not upper.startswith("DATE: "):
        return None
    hours = _to_int(upper[23:25])
    minutes = _to_int(upper[26:28])
    seconds = _to_int(upper[29:31])
    return hours * 3600 + minutes * 60 + seconds


class TimeClient:
    """Keeps the time of day, set from a web server and advanced by a local clock."""

    def __init__(
        self,
        utc_offset: float = 0.0,
        host: str = DEFAULT_HOST,
        port: int = DEFAULT_PORT,
        *,
        timeout: float = 10.0,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.utc_offset = utc_offset
        self.host = host
        self.port = port
        self.timeout = timeout
        self._clock = clock
        self._local_epoch = 0
        self._millis_at_update = self._millis()

    def _millis(self) -> int:
        return int(self._clock() * 1000)

    def update_time(self) -> Optional[int]:
        """Fetch the Date header from the server; return the seconds of day found, or None."""
        request = (
            "GET / HTTP/1.1\r\n"
            f"Host: {self.host}\r\n"
            "Connection: close\r\n\r\n"
        ).encode("ascii")
        with socket.create_connection((self.host, self.port), timeout=self.timeout) as conn:
            conn.sendall(request)
            with conn.makefile("rb") as stream:
                for raw in stream:
                    seconds = parse_date_line(raw.decode("latin-1").rstrip("\n"))
                    if seconds is not None:
                        self.apply_seconds_of_day(seconds)
                        return seconds
        return None

    def apply_seconds_of_day(self, seconds: int) -> None:
        """Set the UTC time of day, counted from now on the local clock."""
        self._local_epoch = seconds
        self._millis_at_update = self._millis()

    def _is_unset(self) -> bool:
        return self._local_epoch == 0

    def hours(self) -> str:
        if self._is_unset():
            return PLACEHOLDER
        value = (self.current_epoch_with_utc_offset() % SECONDS_PER_DAY) // 3600 % 24
        return f"{value:02d}"

    def minutes(self) -> str:
        if self._is_unset():
            return PLACEHOLDER
        return f"{self.current_epoch_with_utc_offset() % 3600 // 60:02d}"

    def seconds(self) -> str:
        if self._is_unset():
            return PLACEHOLDER
        return f"{self.current_epoch_with_utc_offset() % 60:02d}"

    def am_pm_hours(self) -> str:
        hours = _to_int(self.hours())
        if hours >= 13:
            hours -= 12
        if hours == 0:
            hours = 12
        return str(hours)

    def am_pm(self) -> str:
        return "PM" if _to_int(self.hours()) >= 12 else "AM"

    def formatted_time(self) -> str:
        return f"{self.hours()}:{self.minutes()}:{self.seconds()}"

    def am_pm_formatted_time(self) -> str:
        return f"{self.am_pm_hours()}:{self.minutes()} {self.am_pm()}"

    def current_epoch(self) -> int:
        """Seconds of day last fetched plus whole seconds elapsed since."""
        return self._local_epoch + (self._millis() - self._millis_at_update) // 1000

    def current_epoch_with_utc_offset(self) -> int:
        """Local seconds of day after applying the UTC offset."""
        shifted = self.current_epoch() + 3600 * self.utc_offset + SECONDS_PER_DAY
        return _round_half_away(shifted) % SECONDS_PER_DAY