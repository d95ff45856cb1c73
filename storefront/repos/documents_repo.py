"""
documents_repo.py
- Reads whole collections and single documents by _id.
- Converts BSON documents into JSON-ready dicts (ObjectId -> hex string).
"""

from __future__ import annotations

import re
from typing import Any, Dict, List, Optional

from bson import ObjectId
from bson.errors import InvalidId
from fastapi.encoders import jsonable_encoder

from ..errors import InvalidIdError

_BSON_ENCODERS = {ObjectId: str}
_HEX_ID = re.compile(r"[0-9a-fA-F]{24}")


def to_jsonable(doc: Any) -> Any:
    # Recurses into nested dicts/lists, so referenced ids come out as hex too.
    return jsonable_encoder(doc, custom_encoder=_BSON_ENCODERS)


def parse_object_id(value: str) -> ObjectId:
    # bytes.fromhex skips whitespace, so ObjectId() alone lets "aa bb ..." through
    if not isinstance(value, str) or _HEX_ID.fullmatch(value) is None:
        raise InvalidIdError(value)
    try:
        return ObjectId(value)
    except (InvalidId, TypeError) as exc:
        raise InvalidIdError(value) from exc


async def find_all(col) -> List[dict]:
    cur = col.find({})
    out = []
    try:
        async for d in cur:
            out.append(to_jsonable(d))
    finally:
        await cur.close()
    return out


async def find_by_id(col, oid: ObjectId) -> Optional[Dict[str, Any]]:
    d = await col.find_one({"_id": oid})
    if d is None:
        return None
    return to_jsonable(d)
