from __future__ import annotations

import os

# Settings refuse to load without a store URI; the app module builds one at import.
os.environ.setdefault("MONGO_URI", "mongodb://localhost:27017")

import pytest
from httpx import ASGITransport, AsyncClient
from mongomock_motor import AsyncMongoMockClient

from attendance_portal.config import Settings
from attendance_portal.db import AppContext, init_store
from attendance_portal.main import create_app


@pytest.fixture
async def context():
    client = AsyncMongoMockClient()
    ctx = AppContext(client=client, database=client["attendance"])
    await init_store(ctx)
    return ctx


@pytest.fixture
async def client(context):
    app = create_app(Settings(mongo_uri="mongodb://localhost:27017", _env_file=None))
    app.state.context = context
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


@pytest.fixture
async def make_student(client):
    async def _make(email: str = "asha@example.com", name: str = "Asha", roll_number="12") -> dict:
        res = await client.post("/students/add", json={"name": name, "email": email, "roll_number": roll_number})
        assert res.status_code == 201, res.text
        return res.json()

    return _make


@pytest.fixture
async def make_class(client):
    async def _make(name: str = "Physics") -> dict:
        res = await client.post("/classes/add", json={"name": name})
        assert res.status_code == 201, res.text
        return res.json()

    return _make
