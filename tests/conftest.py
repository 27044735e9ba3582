# tests/conftest.py
"""In-memory stand-in for the Motor database used by the registries."""

import copy
import re

import pytest
from bson import ObjectId
from fastapi.testclient import TestClient
from pymongo import ReturnDocument
from pymongo.errors import DuplicateKeyError, ServerSelectionTimeoutError

from app.database import STAFF_COLLECTION, VEHICLE_COLLECTION, get_database
from app.main import app

UNIQUE_KEYS = {STAFF_COLLECTION: "staffNumber", VEHICLE_COLLECTION: "vin"}


def matches(document, query):
    for key, expected in query.items():
        value = document.get(key)
        if isinstance(expected, dict) and "$regex" in expected:
            flags = re.IGNORECASE if "i" in expected.get("$options", "") else 0
            if value is None or not re.search(expected["$regex"], value, flags):
                return False
        elif value != expected:
            return False
    return True


class FakeCursor:
    def __init__(self, documents):
        self.documents = documents

    async def to_list(self, length=None):
        return self.documents if length is None else self.documents[:length]


class InsertResult:
    def __init__(self, inserted_id):
        self.inserted_id = inserted_id


class FakeCollection:
    def __init__(self, name, database):
        self.name = name
        self.database = database
        self.documents = []
        self.unique_key = UNIQUE_KEYS.get(name)

    def _check_available(self):
        if self.database.offline:
            raise ServerSelectionTimeoutError("127.0.0.1:27017: [Errno 111] Connection refused")

    def _check_unique(self, candidate):
        if not self.unique_key:
            return
        for existing in self.documents:
            if existing["_id"] != candidate["_id"] and existing.get(self.unique_key) == candidate.get(self.unique_key):
                raise DuplicateKeyError(
                    f"E11000 duplicate key error collection: {self.name} "
                    f"dup key: {{ {self.unique_key}: \"{candidate.get(self.unique_key)}\" }}"
                )

    def find(self, query=None):
        self._check_available()
        return FakeCursor([copy.deepcopy(d) for d in self.documents if matches(d, query or {})])

    async def find_one(self, query):
        self._check_available()
        for document in self.documents:
            if matches(document, query):
                return copy.deepcopy(document)
        return None

    async def insert_one(self, document):
        self._check_available()
        stored = copy.deepcopy(document)
        stored.setdefault("_id", ObjectId())
        self._check_unique(stored)
        self.documents.append(stored)
        document["_id"] = stored["_id"]
        return InsertResult(stored["_id"])

    async def find_one_and_update(self, query, update, return_document=ReturnDocument.BEFORE):
        self._check_available()
        for index, document in enumerate(self.documents):
            if not matches(document, query):
                continue
            updated = copy.deepcopy(document)
            updated.update(copy.deepcopy(update.get("$set", {})))
            for field, value in update.get("$push", {}).items():
                updated.setdefault(field, []).append(copy.deepcopy(value))
            self._check_unique(updated)
            self.documents[index] = updated
            return copy.deepcopy(updated if return_document == ReturnDocument.AFTER else document)
        return None

    async def find_one_and_delete(self, query):
        self._check_available()
        for index, document in enumerate(self.documents):
            if matches(document, query):
                return self.documents.pop(index)
        return None


class FakeDatabase:
    def __init__(self):
        self.collections = {}
        self.offline = False

    def __getitem__(self, name):
        if name not in self.collections:
            self.collections[name] = FakeCollection(name, self)
        return self.collections[name]


@pytest.fixture
def db():
    return FakeDatabase()


@pytest.fixture
def client(db):
    async def override_get_database():
        return db

    app.dependency_overrides[get_database] = override_get_database
    # Not used as a context manager so the lifespan never connects to MongoDB
    yield TestClient(app)
    app.dependency_overrides.clear()
