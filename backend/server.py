#!/usr/bin/env python3
"""
Mini API server: three fixed routes behind a hardened header policy.
- GET /health      -> {"status":"UP"}
- GET /api/orders  -> fixed list of two orders
- GET /            -> HTML index linking the routes above
Run: uvicorn server:app --host 0.0.0.0 --port 8080
"""

import logging
import os
from collections.abc import Mapping
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI

from routers.pages import create_router
from routes import Handler, build_route_table
from security_headers import SecurityHeadersMiddleware

HOST = os.environ.get("HOST", "0.0.0.0")
PORT = int(os.environ.get("PORT", 8080))
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()
SHUTDOWN_GRACE_SECONDS = int(os.environ.get("SHUTDOWN_GRACE_SECONDS", 5))

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    logger.info("Stopping server...")


def create_app(routes: Optional[Mapping[str, Handler]] = None) -> FastAPI:
    """Build the ASGI app for a route table (the default three routes if omitted)."""
    if routes is None:
        routes = build_route_table()
    app = FastAPI(
        title="Mini API",
        version="1.0",
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        redirect_slashes=False,
        lifespan=lifespan,
    )
    app.add_middleware(SecurityHeadersMiddleware)
    app.include_router(create_router(routes))
    return app


app = create_app()


# ----- Entrypoint -----


def main() -> None:
    logging.basicConfig(level=LOG_LEVEL)
    logger.info("Mini API Server started on http://localhost:%d", PORT)
    uvicorn.run(
        app,
        host=HOST,
        port=PORT,
        log_level=LOG_LEVEL.lower(),
        timeout_graceful_shutdown=SHUTDOWN_GRACE_SECONDS,
    )


if __name__ == "__main__":
    main()
