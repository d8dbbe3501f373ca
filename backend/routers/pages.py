"""
Pages API: GET /health, GET /api/orders, GET /
Every path in the route table is registered without a method list, so any
method reaches the handlers and they answer wrong methods with their own 405 body.
"""
from collections.abc import Mapping

from fastapi import APIRouter, Request
from starlette.responses import Response

from responses import BufferedSink
from routes import Handler, dispatch


def _endpoint(routes: Mapping[str, Handler], path: str):
    async def endpoint(request: Request) -> Response:
        sink = BufferedSink()
        dispatch(routes, request.method, path, sink)
        return sink.to_response()

    endpoint.__name__ = routes[path].__name__
    return endpoint


def create_router(routes: Mapping[str, Handler]) -> APIRouter:
    router = APIRouter(tags=["pages"])
    for path in routes:
        router.add_route(path, _endpoint(routes, path), include_in_schema=False)
    return router
