"""
fields.py
GET /api/fields: field names per collection, sampled from one document each.
"""

from fastapi import APIRouter, Depends
from pymongo.errors import PyMongoError

from ..db.mongo import MongoHandles
from ..deps import get_handles
from ..errors import DatabaseOperationError
from ..repos import fields_repo

router = APIRouter()


@router.get("/api/fields")
async def list_fields(handles: MongoHandles = Depends(get_handles)):
    try:
        return await fields_repo.list_fields(handles.db)
    except PyMongoError as exc:
        raise DatabaseOperationError(str(exc)) from exc
