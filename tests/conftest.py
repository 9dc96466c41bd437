import httpx
import mongomock
import pytest
from httpx import ASGITransport


class AsyncCursor:
    """Awaitable view over a mongomock cursor, shaped like pymongo's async cursors."""

    def __init__(self, cursor):
        self._cursor = cursor

    def sort(self, *args, **kwargs):
        self._cursor = self._cursor.sort(*args, **kwargs)
        return self

    def limit(self, count):
        self._cursor = self._cursor.limit(count)
        return self

    async def to_list(self, length=None):
        docs = list(self._cursor)
        return docs if length is None else docs[:length]


class AsyncCollection:
    def __init__(self, collection):
        self.sync = collection

    def find(self, *args, **kwargs):
        return AsyncCursor(self.sync.find(*args, **kwargs))

    async def find_one(self, *args, **kwargs):
        return self.sync.find_one(*args, **kwargs)

    async def insert_one(self, document):
        return self.sync.insert_one(document)

    async def update_one(self, *args, **kwargs):
        return self.sync.update_one(*args, **kwargs)

    async def delete_one(self, *args, **kwargs):
        return self.sync.delete_one(*args, **kwargs)

    async def aggregate(self, pipeline):
        return AsyncCursor(self.sync.aggregate(pipeline))


class AsyncDatabase:
    def __init__(self, database):
        self._database = database

    def __getitem__(self, name):
        return AsyncCollection(self._database[name])


@pytest.fixture
def mock_env(monkeypatch):
    monkeypatch.setenv("ACCESS_TOKEN_SECRET", "test-secret")
    monkeypatch.setenv("ENVIRONMENT", "development")


@pytest.fixture
def database():
    return AsyncDatabase(mongomock.MongoClient()["hotel-booking"])


@pytest.fixture
def rooms(database):
    return database["rooms"]


@pytest.fixture
def bookings(database):
    return database["bookings"]


@pytest.fixture
async def client(mock_env, database):
    from app.config import Settings
    from app.main import app, init_services

    init_services(app, Settings(_env_file=None), database)
    async with httpx.AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as c:
        yield c
