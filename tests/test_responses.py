import pytest

from responses import BufferedSink, send_html, send_json, send_text
from security_headers import SECURITY_HEADERS, apply_security_headers


class BrokenSink(BufferedSink):
    """Fails while writing the body."""

    def write(self, data: bytes) -> None:
        raise OSError("connection reset")


def test_apply_security_headers_sets_every_header():
    headers = {}
    assert apply_security_headers(headers) is None
    assert headers == dict(SECURITY_HEADERS)
    assert len(headers) == 12


def test_apply_security_headers_overwrites_existing_values():
    headers = {"X-Frame-Options": "SAMEORIGIN", "Content-Type": "text/plain"}
    apply_security_headers(headers)
    assert headers["X-Frame-Options"] == "DENY"
    assert headers["Content-Type"] == "text/plain"


def test_security_headers_are_read_only():
    with pytest.raises(TypeError):
        SECURITY_HEADERS["X-Frame-Options"] = "SAMEORIGIN"


@pytest.mark.parametrize(
    "writer, content_type",
    [
        (send_json, "application/json; charset=utf-8"),
        (send_text, "text/plain; charset=utf-8"),
        (send_html, "text/html; charset=utf-8"),
    ],
)
def test_writers_set_type_length_and_close(writer, content_type):
    sink = BufferedSink()
    writer(sink, 201, "héllo")
    assert sink.status == 201
    assert sink.headers["Content-Type"] == content_type
    assert sink.headers["Content-Length"] == str(len("héllo".encode("utf-8")))
    assert bytes(sink.body) == "héllo".encode("utf-8")
    assert sink.closed
    for name, value in SECURITY_HEADERS.items():
        assert sink.headers[name] == value


def test_writer_closes_sink_and_propagates_write_failure():
    sink = BrokenSink()
    with pytest.raises(OSError, match="connection reset"):
        send_json(sink, 200, "{}")
    assert sink.closed


def test_writing_to_closed_sink_fails():
    sink = BufferedSink()
    send_text(sink, 200, "once")
    with pytest.raises(OSError):
        send_text(sink, 200, "twice")


def test_to_response_requires_a_written_sink():
    with pytest.raises(RuntimeError):
        BufferedSink().to_response()


def test_to_response_keeps_status_body_and_headers():
    sink = BufferedSink()
    send_json(sink, 405, '{"error":"Method Not Allowed"}')
    resp = sink.to_response()
    assert resp.status_code == 405
    assert resp.body == b'{"error":"Method Not Allowed"}'
    assert resp.headers["content-type"] == "application/json; charset=utf-8"
    assert resp.headers["content-length"] == str(len(resp.body))
    assert resp.headers["strict-transport-security"] == "max-age=31536000; includeSubDomains"
