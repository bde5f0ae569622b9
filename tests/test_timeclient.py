import socket
import threading

import pytest

from printmarquee.timeclient import TimeClient, parse_date_line

SAMPLE = "date: Thu, 19 Nov 2015 20:25:40 GMT"


class FakeClock:
    def __init__(self):
        self.now = 1000.0

    def __call__(self):
        return self.now


def _client(offset=0.0, **kwargs):
    clock = FakeClock()
    return TimeClient(offset, clock=clock, **kwargs), clock


def _serve(response):
    server = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    server.bind(("127.0.0.1", 0))
    server.listen(1)
    received = []

    def handle():
        conn, _ = server.accept()
        with conn:
            data = b""
            while b"\r\n\r\n" not in data:
                chunk = conn.recv(1024)
                if not chunk:
                    break
                data += chunk
            received.append(data)
            conn.sendall(response)

    thread = threading.Thread(target=handle, daemon=True)
    thread.start()
    return server, thread, received


def test_parse_date_line():
    assert parse_date_line(SAMPLE) == 20 * 3600 + 25 * 60 + 40


def test_parse_other_line_is_none():
    assert parse_date_line("Content-Type: text/html") is None


def test_unset_time_shows_placeholders():
    client, _ = _client()
    assert client.formatted_time() == "--:--:--"
    assert client.am_pm_hours() == "12"
    assert client.am_pm() == "AM"


def test_formatted_time_after_apply():
    client, _ = _client()
    client.apply_seconds_of_day(parse_date_line(SAMPLE))
    assert client.formatted_time() == "20:25:40"


def test_am_pm_formatting():
    client, _ = _client()
    client.apply_seconds_of_day(13 * 3600 + 5 * 60)
    assert client.am_pm_formatted_time() == "1:05 PM"


def test_early_morning_is_twelve_am():
    client, _ = _client()
    client.apply_seconds_of_day(1)
    assert client.am_pm_hours() == "12"
    assert client.am_pm() == "AM"


def test_clock_advances_epoch_by_whole_seconds():
    client, clock = _client()
    start = 3600
    client.apply_seconds_of_day(start)
    clock.now += 61.5
    assert client.current_epoch() == start + 61


def test_utc_offset_applied():
    client, _ = _client(offset=1.5)
    client.apply_seconds_of_day(3600)
    assert client.formatted_time() == "02:30:00"


def test_offset_wraps_past_midnight():
    client, _ = _client(offset=2)
    client.apply_seconds_of_day(23 * 3600)
    assert client.hours() == "01"
    assert 0 <= client.current_epoch_with_utc_offset() < 86400


def test_changing_offset_changes_hours():
    client, _ = _client()
    client.apply_seconds_of_day(10 * 3600)
    before = int(client.hours())
    client.utc_offset = 3
    assert int(client.hours()) == before + 3


def test_update_time_from_server():
    response = (
        "HTTP/1.1 200 OK\r\nContent-Type: text/html\r\n" + SAMPLE + "\r\n\r\n"
    ).encode("ascii")
    server, thread, received = _serve(response)
    try:
        port = server.getsockname()[1]
        client, _ = _client(host="127.0.0.1", port=port, timeout=5)
        assert client.update_time() == parse_date_line(SAMPLE)
        assert client.formatted_time() == "20:25:40"
        assert received[0].startswith(b"GET / HTTP/1.1\r\n")
    finally:
        thread.join(timeout=5)
        server.close()


def test_update_time_without_date_header():
    server, thread, _ = _serve(b"HTTP/1.1 200 OK\r\nContent-Length: 0\r\n\r\n")
    try:
        port = server.getsockname()[1]
        client, _ = _client(host="127.0.0.1", port=port, timeout=5)
        assert client.update_time() is None
        assert client.hours() == "--"
    finally:
        thread.join(timeout=5)
        server.close()


def test_update_time_connection_failure_raises():
    probe = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    probe.bind(("127.0.0.1", 0))
    port = probe.getsockname()[1]
    probe.close()
    client, _ = _client(host="127.0.0.1", port=port, timeout=5)
    with pytest.raises(OSError):
        client.update_time()