"""
db/mongo.py
What this file does:
- Creates the async MongoDB client (Motor) with the Stable API pinned.
- Verifies the connection with a single bounded ping against admin.
- Resolves the database + collection handles once, as a read-only bundle.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass

from motor.motor_asyncio import (
    AsyncIOMotorClient,
    AsyncIOMotorCollection,
    AsyncIOMotorDatabase,
)
from pymongo.errors import ConfigurationError as MongoConfigurationError
from pymongo.errors import PyMongoError
from pymongo.server_api import ServerApi

from ..config import Settings
from ..errors import ConnectivityError

logger = logging.getLogger("storefront.db")

CUSTOMERS = "customers"
PRODUCTS = "products"
ORDERS = "orders"


@dataclass(frozen=True)
class MongoHandles:
    client: AsyncIOMotorClient
    db: AsyncIOMotorDatabase
    customers: AsyncIOMotorCollection
    products: AsyncIOMotorCollection
    orders: AsyncIOMotorCollection

    def collection(self, name: str) -> AsyncIOMotorCollection:
        return getattr(self, name)


def connect(settings: Settings) -> AsyncIOMotorClient:
    # Motor connects lazily; this only fails on a malformed URI or bad options.
    try:
        return AsyncIOMotorClient(
            settings.mongodb_url,
            server_api=ServerApi(settings.server_api_version),
        )
    except (MongoConfigurationError, ValueError, TypeError) as exc:
        raise ConnectivityError(f"Failed to connect to MongoDB: {exc}") from exc


async def verify_connection(client: AsyncIOMotorClient, timeout_s: float = 10.0) -> None:
    try:
        await asyncio.wait_for(client.admin.command({"ping": 1}), timeout=timeout_s)
    except asyncio.TimeoutError as exc:
        raise ConnectivityError(f"Failed to ping MongoDB: no reply within {timeout_s}s") from exc
    except PyMongoError as exc:
        raise ConnectivityError(f"Failed to ping MongoDB: {exc}") from exc


def build_handles(client: AsyncIOMotorClient, db_name: str) -> MongoHandles:
    db = client[db_name]
    return MongoHandles(
        client=client,
        db=db,
        customers=db[CUSTOMERS],
        products=db[PRODUCTS],
        orders=db[ORDERS],
    )


def disconnect(client: AsyncIOMotorClient) -> None:
    try:
        client.close()
    except Exception as exc:  # noqa: BLE001 - shutdown must not raise
        logger.error("Failed to disconnect from MongoDB: %s", exc)
        return
    logger.info("Disconnected from MongoDB.")
