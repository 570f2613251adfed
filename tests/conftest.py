"""Pytest configuration and fixtures for assignment_hub.

Uses assignment_hub.main:app for HTTP tests. Sources are faked in memory, so
no database is needed; the service dependency is swapped through FastAPI
dependency_overrides.
"""

import os
from collections.abc import Callable, Mapping
from datetime import UTC, datetime, timedelta
from typing import Any

# Settings validation needs a secret; set it before the app is imported.
os.environ.setdefault("SECRET_KEY", "test-secret-key")

import pytest
from httpx import ASGITransport, AsyncClient
from jose import jwt

from assignment_hub.api.v1.dependencies import get_my_assignments_service
from assignment_hub.application.use_cases.my_assignments import MyAssignmentsService
from assignment_hub.core.config import get_settings
from assignment_hub.domain.enums import ItemType, StatusClass
from assignment_hub.main import app

FIXED_NOW = datetime(2025, 6, 15, 12, 0, 0, tzinfo=UTC)


class FakeSource:
    """In-memory IAssignmentSource recording the calls it receives."""

    def __init__(
        self,
        item_type: ItemType,
        rows: list[Mapping[str, Any]] | None = None,
        *,
        active_count: int = 0,
        error: Exception | None = None,
    ) -> None:
        self.item_type = item_type
        self.rows = rows or []
        self.active_count = active_count
        self.error = error
        self.calls: list[dict[str, Any]] = []

    async def fetch_assigned(
        self,
        user_id: int,
        *,
        project_id: int | None = None,
        status_class: StatusClass | None = None,
    ) -> list[Mapping[str, Any]]:
        self.calls.append(
            {"user_id": user_id, "project_id": project_id, "status_class": status_class}
        )
        if self.error is not None:
            raise self.error
        return list(self.rows)

    async def count_active(self, user_id: int) -> int:
        self.calls.append({"user_id": user_id, "count": True})
        if self.error is not None:
            raise self.error
        return self.active_count


def _row(
    id: int = 1,
    *,
    title: str = "Item",
    status: str = "pending",
    due_date: datetime | None = None,
    created_at: datetime = datetime(2025, 6, 1, 9, 0, 0, tzinfo=UTC),
    **extra: Any,
) -> dict[str, Any]:
    row: dict[str, Any] = {
        "id": id,
        "title": title,
        "description": "",
        "status": status,
        "priority": "high",
        "due_date": due_date,
        "created_at": created_at,
        "assigned_at": None,
        "completed_at": None,
        "project_id": 10,
        "project_name": "Tower A",
        "assigned_by_name": "Asha Rao",
        "sub_type": None,
    }
    row.update(extra)
    return row


@pytest.fixture
def fixed_now() -> datetime:
    """Request time used by clock-injected services."""
    return FIXED_NOW


@pytest.fixture
def make_row() -> Callable[..., dict[str, Any]]:
    """Factory for a canonical source row (override any column by keyword)."""
    return _row


@pytest.fixture
def make_source() -> Callable[..., FakeSource]:
    """Factory for FakeSource instances."""
    return FakeSource


@pytest.fixture
def empty_sources() -> dict[ItemType, FakeSource]:
    """One empty FakeSource per item type, keyed by type."""
    return {t: FakeSource(t) for t in ItemType}


@pytest.fixture
def use_service():
    """Install a MyAssignmentsService for the request path; undone after the test."""

    def _install(service: MyAssignmentsService) -> MyAssignmentsService:
        app.dependency_overrides[get_my_assignments_service] = lambda: service
        return service

    yield _install
    app.dependency_overrides.pop(get_my_assignments_service, None)


def _mint_token(claims: dict[str, Any], expires_in: timedelta = timedelta(minutes=5)) -> str:
    """Sign claims the way the identity service does."""
    settings = get_settings()
    payload = {**claims, "exp": datetime.now(UTC) + expires_in}
    return jwt.encode(
        payload, settings.secret_key.get_secret_value(), algorithm=settings.algorithm
    )


@pytest.fixture
def make_token() -> Callable[..., str]:
    """Factory for signed bearer tokens."""
    return _mint_token


@pytest.fixture
def auth_headers() -> dict[str, str]:
    """Bearer headers for user 42."""
    token = _mint_token({"sub": "42", "email": "engineer@example.com"})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def settings_env(monkeypatch: pytest.MonkeyPatch):
    """Set env vars for one test and reload settings; restored afterwards."""

    def _set(**values: str) -> None:
        for key, value in values.items():
            monkeypatch.setenv(key, value)
        get_settings.cache_clear()

    yield _set
    monkeypatch.undo()
    get_settings.cache_clear()


@pytest.fixture
async def client() -> AsyncClient:
    """Async HTTP client against the FastAPI app (ASGI)."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
