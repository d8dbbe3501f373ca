"""
BaseHTTPRequestHandler adapter used by the Vercel functions under api/.
"""
from http.server import BaseHTTPRequestHandler

from responses import HandlerSink
from routes import build_route_table, dispatch

_routes = build_route_table()


def make_handler(path: str) -> type[BaseHTTPRequestHandler]:
    """Return a request handler class serving the route registered at path."""
    if path not in _routes:
        raise KeyError(f"No route registered for {path!r}")

    class handler(BaseHTTPRequestHandler):
        def _dispatch(self):
            dispatch(_routes, self.command, path, HandlerSink(self))

        do_GET = _dispatch
        do_POST = _dispatch
        do_PUT = _dispatch
        do_PATCH = _dispatch
        do_DELETE = _dispatch
        do_OPTIONS = _dispatch
        do_HEAD = _dispatch
        do_TRACE = _dispatch
        do_CONNECT = _dispatch

    return handler
