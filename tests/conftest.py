"""Shared test configuration and in-memory store fakes.

The fakes implement the slice of pymongo's async collection API the
repositories use: find().to_list(), find_one, find_one_and_replace,
delete_one. Stored documents get an "_id" the way the real store adds
one, so projections are exercised.
"""

import copy
import itertools
import os
from datetime import datetime, timezone

import pytest
from httpx import ASGITransport, AsyncClient

# Tests never talk to a real account
for _name in (
    "COSMOS_KEY", "COSMOS_ENDPOINT", "COSMOS_DATABASE",
    "COSMOS_CONTAINER", "COSMOS_USERNAME", "COSMOS_LOANS_CONTAINER",
):
    os.environ.pop(_name, None)
os.environ["TIMEZONE"] = "UTC"
os.environ["APP_ENV"] = "test"

from device_loans.core.config import CosmosOptions, Settings  # noqa: E402
from device_loans.domain.models.device_loan import create_device_loan  # noqa: E402


COSMOS_ENV = {
    "COSMOS_KEY": "test-key",
    "COSMOS_ENDPOINT": "mongodb://loans-acct.mongo.cosmos.azure.com:10255/?ssl=true",
    "COSMOS_DATABASE": "loans-db",
    "COSMOS_CONTAINER": "products",
}


class FakeDeleteResult:
    def __init__(self, deleted_count: int):
        self.deleted_count = deleted_count


class FakeCursor:
    def __init__(self, docs):
        self._docs = docs

    async def to_list(self, length=None):
        return list(self._docs if length is None else self._docs[:length])


def _matches(doc, query):
    for key, condition in query.items():
        if isinstance(condition, dict):
            value = doc.get(key)
            if "$lt" in condition and not (value is not None and value < condition["$lt"]):
                return False
        elif doc.get(key) != condition:
            return False
    return True


def _project(doc, projection):
    result = copy.deepcopy(doc)
    for key, include in (projection or {}).items():
        if not include:
            result.pop(key, None)
    return result


class FakeAsyncCollection:
    """In-memory stand-in for an async collection."""

    _ids = itertools.count(1)

    def __init__(self, docs=None):
        self.docs = []
        self.queries = []
        for doc in docs or []:
            self.insert(doc)

    def insert(self, doc):
        stored = dict(doc)
        stored.setdefault("_id", f"oid-{next(self._ids)}")
        self.docs.append(stored)

    def find(self, query=None, projection=None):
        query = query or {}
        self.queries.append(query)
        return FakeCursor([_project(d, projection) for d in self.docs if _matches(d, query)])

    async def find_one(self, query, projection=None):
        self.queries.append(query)
        for doc in self.docs:
            if _matches(doc, query):
                return _project(doc, projection)
        return None

    async def find_one_and_replace(
        self, query, replacement, projection=None, upsert=False, return_document=None,
    ):
        for index, doc in enumerate(self.docs):
            if _matches(doc, query):
                self.docs[index] = dict(replacement, _id=doc["_id"])
                return _project(self.docs[index], projection)
        if not upsert:
            return None
        self.insert(replacement)
        return _project(self.docs[-1], projection)

    async def delete_one(self, query):
        for index, doc in enumerate(self.docs):
            if _matches(doc, query):
                del self.docs[index]
                return FakeDeleteResult(1)
        return FakeDeleteResult(0)


class FakeConnection:
    """Stand-in for CosmosClientManager holding named fake collections."""

    def __init__(self, options: CosmosOptions):
        self.options = options
        self.collections = {}
        self.closed = False

    def get_collection(self, name):
        return self.collections.setdefault(name, FakeAsyncCollection())

    async def close(self):
        self.closed = True


@pytest.fixture
def cosmos_env(monkeypatch):
    """Set every required Cosmos variable."""
    for name, value in COSMOS_ENV.items():
        monkeypatch.setenv(name, value)
    return COSMOS_ENV


@pytest.fixture
def configured_settings(cosmos_env):
    return Settings()


@pytest.fixture
def unconfigured_settings(monkeypatch):
    for name in COSMOS_ENV:
        monkeypatch.delenv(name, raising=False)
    return Settings()


@pytest.fixture
def fake_connection(configured_settings):
    return FakeConnection(configured_settings.require_cosmos())


@pytest.fixture
def make_client():
    """Build an httpx client bound to an app; 500 responses are returned, not raised."""
    def _make(app):
        transport = ASGITransport(app=app, raise_app_exceptions=False)
        return AsyncClient(transport=transport, base_url="http://test")
    return _make


def utc(*args) -> datetime:
    return datetime(*args, tzinfo=timezone.utc)


@pytest.fixture
def make_loan():
    """Factory for valid loans with overridable fields."""
    def _make(**overrides):
        fields = {
            "id": "loan-1",
            "device_id": "device-1",
            "borrower_id": "borrower-1",
            "loan_amount": 250,
            "start_date": utc(2025, 1, 1, 9),
            "due_date": utc(2025, 1, 15, 9),
            "status": "active",
            "created_at": utc(2025, 1, 1, 8),
        }
        fields.update(overrides)
        return create_device_loan(**fields)
    return _make
