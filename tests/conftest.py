# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# In-memory stand-ins for the Motor client/database/collection/cursor, with
# call counters so tests can assert which queries actually ran.
# =============================================================================

import asyncio

import pytest
from bson import ObjectId
from fastapi.testclient import TestClient

from storefront.db.mongo import build_handles
from storefront.main import create_app


class FakeCursor:
    def __init__(self, docs, error=None):
        self._docs = list(docs)
        self._error = error
        self.closed = False

    def __aiter__(self):
        return self

    async def __anext__(self):
        if self._error is not None:
            raise self._error
        if not self._docs:
            raise StopAsyncIteration
        return self._docs.pop(0)

    async def close(self):
        self.closed = True


class FakeCollection:
    def __init__(self, name, docs=None, error=None):
        self.name = name
        self.docs = list(docs or [])
        self.error = error
        self.find_calls = 0
        self.find_one_calls = 0
        self.cursors = []

    def find(self, filter=None):
        self.find_calls += 1
        cur = FakeCursor([dict(d) for d in self.docs], error=self.error)
        self.cursors.append(cur)
        return cur

    async def find_one(self, filter):
        self.find_one_calls += 1
        if self.error is not None:
            raise self.error
        for d in self.docs:
            if all(d.get(k) == v for k, v in filter.items()):
                return dict(d)
        return None

    def insert(self, doc):
        doc.setdefault("_id", ObjectId())
        self.docs.append(doc)
        return doc["_id"]

    @property
    def query_count(self):
        return self.find_calls + self.find_one_calls


class FakeDatabase:
    def __init__(self, name="firstDB"):
        self.name = name
        self.collections = {}
        self.list_error = None

    def __getitem__(self, name):
        if name not in self.collections:
            self.collections[name] = FakeCollection(name)
        return self.collections[name]

    async def list_collection_names(self):
        if self.list_error is not None:
            raise self.list_error
        return list(self.collections.keys())


class FakeAdmin:
    def __init__(self):
        self.commands = []
        self.error = None
        self.delay_s = 0.0

    async def command(self, cmd):
        self.commands.append(cmd)
        if self.delay_s:
            await asyncio.sleep(self.delay_s)
        if self.error is not None:
            raise self.error
        return {"ok": 1.0}


class FakeClient:
    def __init__(self, db=None):
        self.db = db or FakeDatabase()
        self.admin = FakeAdmin()
        self.close_calls = 0
        self.close_error = None

    def __getitem__(self, name):
        return self.db

    def close(self):
        self.close_calls += 1
        if self.close_error is not None:
            raise self.close_error


@pytest.fixture
def fake_client():
    return FakeClient()


@pytest.fixture
def fake_db(fake_client):
    db = fake_client.db
    # the three collections always exist, empty unless a test fills them
    for name in ("customers", "products", "orders"):
        db[name]
    return db


@pytest.fixture
def handles(fake_client, fake_db):
    return build_handles(fake_client, "firstDB")


@pytest.fixture
def client(handles):
    return TestClient(create_app(handles))
