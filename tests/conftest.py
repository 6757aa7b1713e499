"""
Shared pytest fixtures for worklog tests.

Services run against the in-memory document store. The store records every
call so tests can check which collections and documents were touched.
"""
from datetime import datetime, timezone

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from worklog.core.rate_limit import write_rate_limiter
from worklog.core.security import create_access_token
from worklog.db.document_store import InMemoryDocumentStore
from worklog.db.mongodb import get_document_store
from worklog.main import app

OWNER = "user-a"
OTHER_OWNER = "user-b"


class RecordingDocumentStore(InMemoryDocumentStore):
    """In-memory store that keeps a log of (operation, collection, id) calls."""

    def __init__(self):
        super().__init__()
        self.calls = []

    async def create_document(self, collection, data, id=None):
        document_id = await super().create_document(collection, data, id)
        self.calls.append(("create", collection, document_id))
        return document_id

    async def get_documents(self, collection):
        self.calls.append(("list", collection, None))
        return await super().get_documents(collection)

    async def get_document_by_id(self, collection, id):
        self.calls.append(("get", collection, id))
        return await super().get_document_by_id(collection, id)

    async def update_document(self, collection, id, data):
        self.calls.append(("update", collection, id))
        await super().update_document(collection, id, data)

    async def delete_document(self, collection, id):
        self.calls.append(("delete", collection, id))
        await super().delete_document(collection, id)

    def calls_for(self, operation, collection=None):
        return [
            call for call in self.calls
            if call[0] == operation and (collection is None or call[1] == collection)
        ]

    async def seed(self, collection, data, id=None):
        """Insert a raw document without recording the call."""
        return await InMemoryDocumentStore.create_document(self, collection, data, id)

    async def raw(self, collection, id):
        snapshot = await InMemoryDocumentStore.get_document_by_id(self, collection, id)
        return snapshot.data() if snapshot else None


def utc(*args) -> datetime:
    return datetime(*args, tzinfo=timezone.utc)


def auth_headers(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


# ── Store fixtures ────────────────────────────────────────────────────────────

@pytest.fixture
def store() -> RecordingDocumentStore:
    return RecordingDocumentStore()


@pytest.fixture(autouse=True)
def reset_rate_limiter():
    write_rate_limiter.reset()
    yield
    write_rate_limiter.reset()


# ── HTTP client fixture ───────────────────────────────────────────────────────

@pytest_asyncio.fixture
async def client(store) -> AsyncClient:
    """FastAPI test client with the document store overridden by the recording store."""
    app.dependency_overrides[get_document_store] = lambda: store

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()


# ── Token fixtures ────────────────────────────────────────────────────────────

@pytest.fixture
def user_token() -> str:
    """Token without a roles claim; treated as a basic user."""
    return create_access_token(OWNER)


@pytest.fixture
def other_user_token() -> str:
    return create_access_token(OTHER_OWNER, roles=["user"])


@pytest.fixture
def viewer_token() -> str:
    """Token whose roles do not include the write role."""
    return create_access_token("viewer", roles=["viewer"])
