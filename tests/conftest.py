"""Shared test fixtures."""

import pytest
from fastapi.testclient import TestClient

from app.config import Settings
from app.main import create_app
from app.services.todo_store import TodoStore


@pytest.fixture
def store() -> TodoStore:
    """Empty todo store."""
    return TodoStore()


@pytest.fixture
def settings() -> Settings:
    """Development settings with the default static directory."""
    return Settings(
        environment="development",
        server_url="http://testserver",
        allowed_origins=["https://chat.openai.com"],
    )


@pytest.fixture
def app(settings: Settings):
    return create_app(settings)


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)


@pytest.fixture
def delete_todo(client: TestClient):
    """DELETE with a JSON body; TestClient.delete() does not accept one."""

    def _delete(username: str, index):
        return client.request("DELETE", f"/todos/{username}", json={"todoIdx": index})

    return _delete
