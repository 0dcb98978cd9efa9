"""Shared fixtures: an app on a throwaway SQLite database and token helpers."""

import os

os.environ.setdefault("JWT_SECRET", "test-secret-for-ideas-api")

from datetime import timedelta
from pathlib import Path
from typing import Callable, Dict, Iterator, Optional

import pytest
from fastapi.testclient import TestClient

from ideas_api.core.config import Settings
from ideas_api.core.security import TokenCodec
from ideas_api.main import create_app

TEST_SECRET = "test-secret-for-ideas-api"

OWNER_ID = "user-owner"
OTHER_ID = "user-other"


def make_settings(tmp_path: Path, **overrides) -> Settings:
    values = {
        "jwt_secret": TEST_SECRET,
        "database_url": f"sqlite+aiosqlite:///{tmp_path / 'ideas.db'}",
        # Bare {message} bodies; stack traces are covered in test_app
        "environment": "production",
        "log_level": "WARNING",
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return make_settings(tmp_path)


@pytest.fixture
def client(settings: Settings) -> Iterator[TestClient]:
    with TestClient(create_app(settings)) as test_client:
        yield test_client


@pytest.fixture
def codec() -> TokenCodec:
    return TokenCodec(TEST_SECRET)


@pytest.fixture
def auth_headers(codec: TokenCodec) -> Callable[..., Dict[str, str]]:
    def _headers(user_id: str = OWNER_ID, ttl: Optional[timedelta] = None) -> Dict[str, str]:
        return {"Authorization": f"Bearer {codec.sign({'id': user_id}, ttl)}"}

    return _headers


@pytest.fixture
def idea_body() -> Dict[str, object]:
    return {
        "title": "Solar kettle",
        "description": "A kettle that boils water with sunlight",
        "summary": "Off-grid tea",
        "tags": "energy, kitchen",
    }


@pytest.fixture
def create_idea(client: TestClient, auth_headers, idea_body) -> Callable[..., dict]:
    def _create(user_id: str = OWNER_ID, **fields) -> dict:
        body = {**idea_body, **fields}
        response = client.post("/api/ideas", json=body, headers=auth_headers(user_id))
        assert response.status_code == 201, response.text
        return response.json()

    return _create
