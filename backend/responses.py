"""
Response writers: encode a body, attach the header policy, write it to a sink.

A sink is anything that accepts a status line with headers, body bytes, and a
close. The FastAPI app uses BufferedSink; the serverless handlers in api/ use
HandlerSink on top of BaseHTTPRequestHandler.
"""
from http.server import BaseHTTPRequestHandler
from typing import Optional, Protocol

from starlette.responses import Response

from security_headers import apply_security_headers

JSON_CONTENT_TYPE = "application/json; charset=utf-8"
TEXT_CONTENT_TYPE = "text/plain; charset=utf-8"
HTML_CONTENT_TYPE = "text/html; charset=utf-8"


class ResponseSink(Protocol):
    def send_head(self, status: int, headers: dict[str, str]) -> None: ...

    def write(self, data: bytes) -> None: ...

    def close(self) -> None: ...


class BufferedSink:
    """Collects a single response in memory."""

    def __init__(self) -> None:
        self.status: Optional[int] = None
        self.headers: dict[str, str] = {}
        self.body = bytearray()
        self.closed = False

    def send_head(self, status: int, headers: dict[str, str]) -> None:
        if self.closed:
            raise OSError("sink is closed")
        self.status = status
        self.headers = dict(headers)

    def write(self, data: bytes) -> None:
        if self.closed:
            raise OSError("sink is closed")
        self.body.extend(data)

    def close(self) -> None:
        self.closed = True

    @property
    def written(self) -> bool:
        return self.status is not None

    def to_response(self) -> Response:
        if self.status is None:
            raise RuntimeError("No response was written")
        # Response recomputes content-length from the body; drop ours so it is not duplicated
        headers = {k: v for k, v in self.headers.items() if k.lower() != "content-length"}
        return Response(content=bytes(self.body), status_code=self.status, headers=headers)


class HandlerSink:
    """Writes straight to a BaseHTTPRequestHandler connection.

    close() flushes the response and marks the connection for closing; the
    socket file itself is closed by the handler's finish(), which runs after
    handle_one_request() has flushed wfile one last time.
    """

    def __init__(self, request_handler: BaseHTTPRequestHandler) -> None:
        self._handler = request_handler

    def send_head(self, status: int, headers: dict[str, str]) -> None:
        self._handler.send_response(status)
        for k, v in headers.items():
            self._handler.send_header(k, v)
        self._handler.end_headers()

    def write(self, data: bytes) -> None:
        # HEAD responses carry headers only
        if self._handler.command == "HEAD":
            return
        self._handler.wfile.write(data)

    def close(self) -> None:
        self._handler.close_connection = True
        self._handler.wfile.flush()


def _send(sink: ResponseSink, status: int, body: str, content_type: str) -> None:
    payload = body.encode("utf-8")
    headers: dict[str, str] = {}
    apply_security_headers(headers)
    headers["Content-Type"] = content_type
    headers["Content-Length"] = str(len(payload))
    try:
        sink.send_head(status, headers)
        sink.write(payload)
    finally:
        sink.close()


def send_json(sink: ResponseSink, status: int, body: str) -> None:
    _send(sink, status, body, JSON_CONTENT_TYPE)


def send_text(sink: ResponseSink, status: int, body: str) -> None:
    _send(sink, status, body, TEXT_CONTENT_TYPE)


def send_html(sink: ResponseSink, status: int, body: str) -> None:
    _send(sink, status, body, HTML_CONTENT_TYPE)
