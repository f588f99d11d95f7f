from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Garante que o pacote backoffice seja importável durante os testes locais
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from fastapi.testclient import TestClient  # noqa: E402

from backoffice.app import create_app  # noqa: E402
from backoffice.core import config as core_config  # noqa: E402
from backoffice.db import models  # noqa: E402
from backoffice.db import session as db_session  # noqa: E402

STRONG_PASSWORD = "Senha@123"


def _clear_caches() -> None:
    core_config.get_settings.cache_clear()
    db_session.get_engine.cache_clear()
    db_session._get_sessionmaker.cache_clear()  # type: ignore[attr-defined]


@pytest.fixture()
def db_env(tmp_path, monkeypatch):
    """Configura um SQLite temporário e reseta caches de settings/engine."""
    db_file = tmp_path / "test.db"
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{db_file}")
    monkeypatch.setenv("JWT_SECRET", "test-secret")
    monkeypatch.setenv("APP_ENV", "test")
    _clear_caches()

    engine = db_session.get_engine()
    models.Base.metadata.drop_all(bind=engine)
    models.Base.metadata.create_all(bind=engine)

    yield db_file

    models.Base.metadata.drop_all(bind=engine)
    engine.dispose()
    _clear_caches()


@pytest.fixture()
def client(db_env):
    with TestClient(create_app()) as test_client:
        yield test_client


@pytest.fixture()
def auth_client(client):
    """Client already holding the accessToken/refreshToken cookies."""
    resp = client.post(
        "/authentication/sign-up",
        json={"name": "Admin", "email": "admin@example.com", "password": STRONG_PASSWORD},
    )
    assert resp.status_code == 201
    resp = client.post("/authentication/sign-in", json={"email": "admin@example.com", "password": STRONG_PASSWORD})
    assert resp.status_code == 200
    return client
