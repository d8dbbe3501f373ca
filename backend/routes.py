"""
Route table and dispatcher for the three fixed routes.

Handlers are plain functions taking the request method and a response sink,
so they can run under FastAPI, under BaseHTTPRequestHandler, or in tests.
"""
import logging
from collections.abc import Callable, Mapping
from types import MappingProxyType

from models import health_json, method_not_allowed_json, orders_json
from responses import ResponseSink, send_html, send_json, send_text

logger = logging.getLogger(__name__)

Handler = Callable[[str, ResponseSink], None]

INDEX_HTML = """<!doctype html>
<html lang="en">
  <head><meta charset="utf-8"><title>Mini API</title></head>
  <body>
    <h1>Mini API Server</h1>
    <ul>
      <li><a href="/health">/health</a></li>
      <li><a href="/api/orders">/api/orders</a></li>
    </ul>
  </body>
</html>
"""


def _is_get(method: str) -> bool:
    return method.upper() == "GET"


def health(method: str, sink: ResponseSink) -> None:
    """GET /health"""
    if not _is_get(method):
        send_json(sink, 405, method_not_allowed_json())
        return
    send_json(sink, 200, health_json())


def list_orders(method: str, sink: ResponseSink) -> None:
    """GET /api/orders"""
    if not _is_get(method):
        send_json(sink, 405, method_not_allowed_json())
        return
    send_json(sink, 200, orders_json())


def index(method: str, sink: ResponseSink) -> None:
    """GET / -> HTML page linking the other routes."""
    if not _is_get(method):
        send_text(sink, 405, "Method Not Allowed")
        return
    send_html(sink, 200, INDEX_HTML)


def build_route_table() -> Mapping[str, Handler]:
    """Return the read-only path -> handler table."""
    return MappingProxyType({
        "/health": health,
        "/api/orders": list_orders,
        "/": index,
    })


def dispatch(routes: Mapping[str, Handler], method: str, path: str, sink: ResponseSink) -> bool:
    """
    Run the handler registered for path. Paths match exactly, no normalization.
    Returns False without touching the sink when no route matches.
    """
    route = routes.get(path)
    if route is None:
        logger.debug("No route for %s %s", method, path)
        return False
    if not _is_get(method):
        logger.info("%s %s -> 405", method, path)
    route(method, sink)
    return True
