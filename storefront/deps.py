"""
deps.py
FastAPI dependency helpers for shared app state.
"""

from __future__ import annotations

from fastapi import Request

from .db.mongo import MongoHandles


def get_handles(request: Request) -> MongoHandles:
    return request.app.state.mongo


def get_ping_timeout(request: Request) -> float:
    return request.app.state.ping_timeout_s
