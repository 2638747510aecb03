from __future__ import annotations

import pytest
from pydantic import ValidationError

from attendance_portal.config import Settings
from attendance_portal.main import create_app


async def test_root_reports_liveness(client):
    res = await client.get("/")

    assert res.status_code == 200
    assert res.text == "Attendance portal backend is running"


def test_settings_require_mongo_uri(monkeypatch):
    monkeypatch.delenv("MONGO_URI", raising=False)

    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_settings_reject_non_mongo_uri(monkeypatch):
    monkeypatch.setenv("MONGO_URI", "postgres://localhost:5432/db")

    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_settings_defaults(monkeypatch):
    monkeypatch.setenv("MONGO_URI", "mongodb://db.internal:27017")
    monkeypatch.setenv("CORS_ORIGINS", "http://a.test, http://b.test,")

    settings = Settings(_env_file=None)

    assert settings.mongo_db_name == "attendance"
    assert settings.port == 3000
    assert settings.mongo_uri.hosts()[0]["host"] == "db.internal"
    assert settings.cors_origin_list == ["http://a.test", "http://b.test"]


async def test_health_pings_store(client):
    res = await client.get("/health")

    assert res.status_code == 200
    assert res.json() == {"status": "ok", "app": "Attendance Portal"}


async def test_startup_fails_when_store_unreachable():
    app = create_app(
        Settings(mongo_uri="mongodb://127.0.0.1:1/?serverSelectionTimeoutMS=200", _env_file=None)
    )

    with pytest.raises(RuntimeError, match="MongoDB connection failed"):
        async with app.router.lifespan_context(app):
            pass
