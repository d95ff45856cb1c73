"""
main.py
Process entrypoint. Loads settings, connects to MongoDB, then creates the
FastAPI app around the verified handles and serves it with uvicorn.
"""

from __future__ import annotations

import asyncio
import logging
import sys

import uvicorn
from fastapi import FastAPI

from .config import Settings, load_settings
from .db.mongo import MongoHandles, build_handles, connect, disconnect, verify_connection
from .errors import (
    ConfigurationError,
    ConnectivityError,
    StorefrontError,
    storefront_exception_handler,
)
from .middleware import RequestLogMiddleware
from .routers import fields, health
from .routers.collections import COLLECTION_SPECS, create_collection_router

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"

logger = logging.getLogger("storefront")


def create_app(handles: MongoHandles, ping_timeout_s: float = 10.0) -> FastAPI:
    app = FastAPI(title="Storefront API", version="1.0")
    app.add_middleware(RequestLogMiddleware)
    app.add_exception_handler(StorefrontError, storefront_exception_handler)

    # include routers
    app.include_router(health.router)
    app.include_router(fields.router)
    for spec in COLLECTION_SPECS:
        app.include_router(create_collection_router(spec))

    # shared, read-only after startup
    app.state.mongo = handles
    app.state.ping_timeout_s = ping_timeout_s
    return app


async def serve(settings: Settings) -> None:
    client = connect(settings)
    try:
        await verify_connection(client, timeout_s=settings.ping_timeout_s)
        logger.info("Successfully connected to MongoDB.")
        handles = build_handles(client, settings.mongodb_db)
        app = create_app(handles, ping_timeout_s=settings.ping_timeout_s)
        config = uvicorn.Config(
            app,
            host=settings.api_host,
            port=settings.api_port,
            log_config=None,
            access_log=False,
        )
        # exits the process with status 1 if the port cannot be bound
        await uvicorn.Server(config).serve()
    finally:
        disconnect(client)


def run() -> None:
    logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
    try:
        settings = load_settings()
        logging.getLogger().setLevel(settings.log_level.upper())
        asyncio.run(serve(settings))
    except (ConfigurationError, ConnectivityError) as exc:
        logger.error("Startup failed: %s", exc)
        sys.exit(1)


__all__ = ["create_app", "serve", "run"]
