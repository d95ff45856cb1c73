"""
health.py
Provides /health for readiness checks.
Includes Mongo ping, bounded like the startup check, so the connection is validated.
"""

import time

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from ..db.mongo import MongoHandles, verify_connection
from ..deps import get_handles, get_ping_timeout
from ..errors import ConnectivityError

router = APIRouter()


def now_ms() -> int:
    return int(time.time() * 1000)


@router.get("/health")
async def health(
    handles: MongoHandles = Depends(get_handles),
    timeout_s: float = Depends(get_ping_timeout),
):
    try:
        await verify_connection(handles.client, timeout_s=timeout_s)
    except ConnectivityError as exc:
        return JSONResponse({"ok": False, "error": exc.message}, status_code=503)
    return {"ok": True, "ts_ms": now_ms()}
