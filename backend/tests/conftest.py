import os
from types import SimpleNamespace

import pytest
from bson import ObjectId
from fastapi.testclient import TestClient
from pymongo import DESCENDING
from pymongo.errors import ServerSelectionTimeoutError

os.environ.setdefault("CORS_ORIGINS", "http://localhost")

from app.core.contacts import ContactStore
from app.core.settings import Settings
from app.main import create_app


class FakeCursor:
    def __init__(self, docs, error=None):
        self._docs = list(docs)
        self._error = error
        self.sorted_by = None

    def sort(self, keys):
        self.sorted_by = keys
        # Stable sorts applied last key first give a multi-key sort
        for field, direction in reversed(keys):
            self._docs.sort(key=lambda d: d[field], reverse=direction == DESCENDING)
        return self

    async def to_list(self, length=None):
        if self._error:
            raise self._error
        return [dict(d) for d in self._docs]


class FakeDatabase:
    name = "contactform"

    def __init__(self, error=None):
        self.commands = []
        self._error = error

    async def command(self, cmd):
        if self._error:
            raise self._error
        self.commands.append(cmd)
        return {"ok": 1.0}


class FakeCollection:
    name = "contacts"

    def __init__(self, error=None):
        self.docs = []
        self.indexes = []
        self.database = FakeDatabase(error)
        self._error = error

    async def create_index(self, keys):
        if self._error:
            raise self._error
        self.indexes.append(keys)
        return "_".join(f"{k}_{d}" for k, d in keys)

    async def insert_one(self, doc):
        if self._error:
            raise self._error
        doc["_id"] = ObjectId()
        self.docs.append(dict(doc))
        return SimpleNamespace(inserted_id=doc["_id"], acknowledged=True)

    def find(self, query):
        assert query == {}
        return FakeCursor(self.docs, self._error)


@pytest.fixture
def app_settings(tmp_path):
    (tmp_path / "index.html").write_text("<h1>Contact Us</h1>", encoding="utf-8")
    return Settings(_env_file=None, MONGO_URI=None, STATIC_DIR=str(tmp_path))


@pytest.fixture
def collection():
    return FakeCollection()


@pytest.fixture
def broken_collection():
    return FakeCollection(ServerSelectionTimeoutError("localhost:27017: connection refused"))


@pytest.fixture
def client(app_settings, collection):
    app = create_app(app_settings, store=ContactStore(collection))
    with TestClient(app) as c:
        yield c


@pytest.fixture
def broken_client(app_settings, broken_collection):
    app = create_app(app_settings, store=ContactStore(broken_collection))
    with TestClient(app) as c:
        yield c
