"""
Tests for the orders API endpoints.

Tests FastAPI routes with use cases wired to fake repositories.
Validates response schemas and error mapping.
"""

from decimal import Decimal
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from ordering.application.orders.list_orders import ListOrdersUseCase
from ordering.core.config import settings
from ordering.domain.orders.entities import Order
from ordering.domain.orders.errors import OrderRepositoryError, OrdersDomainError
from ordering.domain.orders.ports import OrderRepository
from ordering.infrastructure.orders import (
    InMemoryOrderRepository,
    SqlOrderRepositoryAdapter,
)
from ordering.interfaces.orders.dependencies import (
    get_list_orders_use_case,
    get_order_repository,
)
from ordering.interfaces.orders.schemas import ErrorResponse
from ordering.main import app

client = TestClient(app)


@pytest.fixture(autouse=True)
def _clear_overrides():
    yield
    app.dependency_overrides.clear()


def _override_repo(repo: OrderRepository) -> None:
    app.dependency_overrides[get_list_orders_use_case] = lambda: ListOrdersUseCase(repo)


class TestHealthEndpoint:
    """Tests for GET /api/v1/health."""

    def test_health_ok(self) -> None:
        response = client.get("/api/v1/health")

        assert response.status_code == 200
        assert response.json() == {"status": "ok", "version": settings.version}


class TestListOrdersEndpoint:
    """Tests for GET /api/v1/orders."""

    def test_lists_orders_in_repository_order(self) -> None:
        _override_repo(
            InMemoryOrderRepository(
                [
                    Order(id="2", price=Decimal("5"), tax=Decimal("1"), final_price=Decimal("6")),
                    Order(id="1"),
                ]
            )
        )

        response = client.get("/api/v1/orders")

        assert response.status_code == 200
        body = response.json()
        assert body["count"] == 2
        assert [o["id"] for o in body["orders"]] == ["2", "1"]
        assert Decimal(body["orders"][0]["final_price"]) == Decimal("6")

    def test_empty_store(self) -> None:
        _override_repo(InMemoryOrderRepository())

        response = client.get("/api/v1/orders")

        assert response.status_code == 200
        assert response.json() == {"orders": [], "count": 0}

    def test_repository_failure_returns_503(self) -> None:
        repo = MagicMock(spec=OrderRepository)
        repo.get_orders.side_effect = OrderRepositoryError("connection refused")
        _override_repo(repo)

        response = client.get("/api/v1/orders")

        assert response.status_code == 503
        assert response.json() == {"error": "Order repository unavailable"}

    def test_other_domain_error_returns_500(self) -> None:
        """Internal details never reach the client."""
        repo = MagicMock(spec=OrderRepository)
        repo.get_orders.side_effect = OrdersDomainError("secret detail")
        _override_repo(repo)

        response = client.get("/api/v1/orders")

        assert response.status_code == 500
        assert "secret detail" not in response.text


class TestDependencies:
    """Tests for the composition root."""

    def test_default_store_is_in_memory(self) -> None:
        get_order_repository.cache_clear()
        try:
            assert isinstance(get_order_repository(), InMemoryOrderRepository)
        finally:
            get_order_repository.cache_clear()

    def test_repository_is_built_once(self) -> None:
        get_order_repository.cache_clear()
        try:
            assert get_order_repository() is get_order_repository()
        finally:
            get_order_repository.cache_clear()

    def test_unknown_store_rejected(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(settings, "order_store", "redis")
        get_order_repository.cache_clear()
        try:
            with pytest.raises(ValueError):
                get_order_repository()
        finally:
            get_order_repository.cache_clear()

    def test_sql_store_requires_database_url(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(settings, "order_store", "sql")
        monkeypatch.setattr(settings, "database_url", None)
        get_order_repository.cache_clear()
        try:
            with pytest.raises(ValueError, match="DATABASE_URL"):
                get_order_repository()
        finally:
            get_order_repository.cache_clear()

    def test_sql_store_creates_orders_table(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """A freshly wired SQL store is readable without manual setup."""
        monkeypatch.setattr(settings, "order_store", "sql")
        monkeypatch.setattr(settings, "database_url", "sqlite://")
        get_order_repository.cache_clear()
        try:
            repo = get_order_repository()
            assert isinstance(repo, SqlOrderRepositoryAdapter)
            assert repo.get_orders() == []
        finally:
            get_order_repository.cache_clear()


class TestErrorResponseSchema:
    """Tests for the ErrorResponse contract."""

    def test_only_error_field(self) -> None:
        assert set(ErrorResponse.model_fields) == {"error"}
