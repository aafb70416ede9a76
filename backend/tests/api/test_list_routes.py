"""
Tests for list and item API endpoints.
"""

import pytest
from fastapi.testclient import TestClient
from unittest.mock import AsyncMock

from api import app
from api.dependencies import get_list_service
from modules.access.exceptions import ListAccessDeniedError, NotAuthenticatedError
from modules.access.models import AccessLevel
from modules.lists.exceptions import ItemNotFoundError, ListNotFoundError, NotListOwnerError
from modules.lists.models import ListWithAccess
from modules.lists.service import ListService
from shared.tasks import BackgroundTaskDispatcher
from tests.conftest import create_test_token, make_item, make_list

client = TestClient(app)

AUTH = {"Authorization": f"Bearer {create_test_token()}"}


@pytest.fixture
def list_service(override_dependency, jwt_settings):
    return override_dependency(get_list_service, AsyncMock(spec=ListService))


class TestListEndpoints:

    def test_anonymous_list_query_is_empty(self, list_service):
        list_service.list_lists.return_value = []

        response = client.get("/api/lists")

        assert response.status_code == 200
        assert response.json() == []
        list_service.list_lists.assert_awaited_once_with(None)

    def test_list_lists(self, list_service):
        owned = ListWithAccess(
            **make_list(owner_id="test-user-123").model_dump(),
            access_level=AccessLevel.ADMIN,
            is_shared=False,
        )
        list_service.list_lists.return_value = [owned]

        response = client.get("/api/lists", headers=AUTH)

        assert response.status_code == 200
        data = response.json()
        assert data[0]["title"] == "Mercado"
        assert data[0]["is_shared"] is False
        list_service.list_lists.assert_awaited_once_with("test-user-123")

    def test_invalid_token_on_query_is_anonymous(self, list_service):
        list_service.list_lists.return_value = []

        response = client.get("/api/lists", headers={"Authorization": "Bearer nope"})

        assert response.status_code == 200
        list_service.list_lists.assert_awaited_once_with(None)

    def test_create_list(self, list_service):
        list_service.create_list.return_value = make_list(owner_id="test-user-123", title="Churrasco")

        response = client.post("/api/lists", json={"title": "Churrasco"}, headers=AUTH)

        assert response.status_code == 201
        assert response.json()["title"] == "Churrasco"
        user_id, request = list_service.create_list.await_args.args
        assert user_id == "test-user-123"
        assert request.title == "Churrasco"

    def test_create_list_requires_auth(self, list_service):
        response = client.post("/api/lists", json={"title": "Churrasco"})

        assert response.status_code == 401
        list_service.create_list.assert_not_awaited()

    def test_create_list_rejects_empty_title(self, list_service):
        response = client.post("/api/lists", json={"title": ""}, headers=AUTH)

        assert response.status_code == 422

    def test_update_list_passes_dispatcher(self, list_service):
        list_service.update_list.return_value = make_list(title="Feira")

        response = client.patch("/api/lists/list-1", json={"title": "Feira"}, headers=AUTH)

        assert response.status_code == 200
        user_id, list_id, request, tasks = list_service.update_list.await_args.args
        assert (user_id, list_id) == ("test-user-123", "list-1")
        assert request.to_patch() == {"title": "Feira"}
        assert isinstance(tasks, BackgroundTaskDispatcher)

    def test_update_list_access_denied(self, list_service):
        list_service.update_list.side_effect = ListAccessDeniedError(
            "list-1", "test-user-123", AccessLevel.EDIT
        )

        response = client.patch("/api/lists/list-1", json={"title": "Feira"}, headers=AUTH)

        assert response.status_code == 403
        body = response.json()
        assert body["error"] == "LIST_ACCESS_DENIED"
        assert body["details"]["required_level"] == "edit"

    def test_delete_list(self, list_service):
        response = client.delete("/api/lists/list-1", headers=AUTH)

        assert response.status_code == 204
        list_service.delete_list.assert_awaited_once_with("test-user-123", "list-1")

    def test_delete_list_not_owner(self, list_service):
        list_service.delete_list.side_effect = NotListOwnerError("list-1", "test-user-123")

        response = client.delete("/api/lists/list-1", headers=AUTH)

        assert response.status_code == 403
        assert response.json()["error"] == "NOT_LIST_OWNER"

    def test_delete_missing_list(self, list_service):
        list_service.delete_list.side_effect = ListNotFoundError("list-9")

        response = client.delete("/api/lists/list-9", headers=AUTH)

        assert response.status_code == 404
        assert response.json()["details"] == {"list_id": "list-9"}


class TestItemEndpoints:

    def test_get_items(self, list_service):
        list_service.get_list_items.return_value = [make_item(), make_item("item-2", order=1)]

        response = client.get("/api/lists/list-1/items", headers=AUTH)

        assert response.status_code == 200
        assert [item["id"] for item in response.json()] == ["item-1", "item-2"]
        list_service.get_list_items.assert_awaited_once_with("test-user-123", "list-1")

    def test_add_item(self, list_service):
        list_service.add_item.return_value = make_item(name="Milk", order=3)

        response = client.post(
            "/api/lists/list-1/items",
            json={"name": "Milk", "category": "Laticínios"},
            headers=AUTH,
        )

        assert response.status_code == 201
        assert response.json()["order"] == 3
        user_id, list_id, request, tasks = list_service.add_item.await_args.args
        assert request.name == "Milk"
        assert request.category == "Laticínios"
        assert isinstance(tasks, BackgroundTaskDispatcher)

    def test_add_item_requires_auth(self, list_service):
        response = client.post("/api/lists/list-1/items", json={"name": "Milk"})

        assert response.status_code == 401

    def test_reorder_items(self, list_service):
        response = client.put(
            "/api/lists/list-1/items/order",
            json={"item_orders": [{"item_id": "a", "order": 1}, {"item_id": "b", "order": 0}]},
            headers=AUTH,
        )

        assert response.status_code == 204
        user_id, list_id, orders = list_service.reorder_items.await_args.args
        assert list_id == "list-1"
        assert [(o.item_id, o.order) for o in orders] == [("a", 1), ("b", 0)]

    def test_update_item_sends_only_present_fields(self, list_service):
        list_service.update_item.return_value = make_item()

        response = client.patch(
            "/api/items/item-1",
            json={"is_completed": True, "notes": None},
            headers=AUTH,
        )

        assert response.status_code == 200
        user_id, item_id, request = list_service.update_item.await_args.args
        assert item_id == "item-1"
        assert request.to_patch() == {"is_completed": True, "notes": None}

    def test_update_missing_item(self, list_service):
        list_service.update_item.side_effect = ItemNotFoundError("item-9")

        response = client.patch("/api/items/item-9", json={"name": "Pão"}, headers=AUTH)

        assert response.status_code == 404
        assert response.json()["error"] == "ITEM_NOT_FOUND"

    def test_delete_item(self, list_service):
        response = client.delete("/api/items/item-1", headers=AUTH)

        assert response.status_code == 204
        list_service.delete_item.assert_awaited_once_with("test-user-123", "item-1")

    def test_service_auth_error_maps_to_401(self, list_service):
        list_service.delete_item.side_effect = NotAuthenticatedError()

        response = client.delete("/api/items/item-1", headers=AUTH)

        assert response.status_code == 401
        assert response.json()["error"] == "NOT_AUTHENTICATED"


class TestPatchValidation:

    def test_null_title_is_422(self, list_service):
        response = client.patch("/api/lists/list-1", json={"title": None}, headers=AUTH)

        assert response.status_code == 422
        list_service.update_list.assert_not_awaited()

    def test_null_item_name_is_422(self, list_service):
        response = client.patch("/api/items/item-1", json={"name": None}, headers=AUTH)

        assert response.status_code == 422
        list_service.update_item.assert_not_awaited()
