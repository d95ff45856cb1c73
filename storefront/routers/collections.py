"""
collections.py
Fetch-all and fetch-by-id endpoints, one router per fixed collection.
"""

from __future__ import annotations

from dataclasses import dataclass

from fastapi import APIRouter, Depends
from pymongo.errors import PyMongoError

from ..db.mongo import CUSTOMERS, ORDERS, PRODUCTS, MongoHandles
from ..deps import get_handles
from ..errors import DatabaseOperationError, DocumentNotFoundError
from ..repos import documents_repo


@dataclass(frozen=True)
class CollectionSpec:
    name: str    # collection name, also the URL segment
    entity: str  # singular, used in error messages


COLLECTION_SPECS = (
    CollectionSpec(CUSTOMERS, "customer"),
    CollectionSpec(PRODUCTS, "product"),
    CollectionSpec(ORDERS, "order"),
)


def create_collection_router(spec: CollectionSpec) -> APIRouter:
    router = APIRouter(prefix=f"/api/{spec.name}", tags=[spec.name])

    @router.get("")
    async def list_documents(handles: MongoHandles = Depends(get_handles)):
        try:
            return await documents_repo.find_all(handles.collection(spec.name))
        except PyMongoError as exc:
            raise DatabaseOperationError(str(exc)) from exc

    @router.get("/{doc_id}")
    async def get_document(doc_id: str, handles: MongoHandles = Depends(get_handles)):
        oid = documents_repo.parse_object_id(doc_id)
        try:
            doc = await documents_repo.find_by_id(handles.collection(spec.name), oid)
        except PyMongoError as exc:
            raise DatabaseOperationError(f"Error finding {spec.entity}: {exc}") from exc
        if doc is None:
            raise DocumentNotFoundError(spec.entity)
        return doc

    return router
