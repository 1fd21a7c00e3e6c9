"""Tests for profile updates and admin user management."""

from __future__ import annotations

import uuid

import pytest
from fastapi.testclient import TestClient

from conftest import API, bearer, create_user, login, register


@pytest.fixture()
def admin_headers(client: TestClient, session) -> dict[str, str]:
    create_user(session, "admin@shop.io", role="admin")
    return bearer(login(client, "admin@shop.io"))


def test_update_own_profile(client: TestClient):
    access = register(client, "edit@shop.io").json()["data"]["access_token"]

    response = client.patch(
        f"{API}/users/me",
        json={"first_name": "  Grace ", "phone": "+1 555 0100"},
        headers=bearer(access),
    )

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["first_name"] == "Grace"
    assert data["last_name"] == "Lovelace"
    assert data["phone"] == "+1 555 0100"


def test_profile_update_cannot_change_role(client: TestClient):
    access = register(client, "sneaky@shop.io").json()["data"]["access_token"]

    response = client.patch(f"{API}/users/me", json={"role": "admin"}, headers=bearer(access))

    assert response.status_code == 400


def test_admin_lists_users(client: TestClient, admin_headers):
    register(client, "c1@shop.io")
    register(client, "c2@shop.io")

    response = client.get(f"{API}/users", headers=admin_headers)

    assert response.status_code == 200
    emails = {u["email"] for u in response.json()["data"]}
    assert emails == {"admin@shop.io", "c1@shop.io", "c2@shop.io"}


def test_admin_gets_user_by_id(client: TestClient, admin_headers):
    user_id = register(client, "find@shop.io").json()["data"]["user"]["id"]

    response = client.get(f"{API}/users/{user_id}", headers=admin_headers)

    assert response.status_code == 200
    assert response.json()["data"]["email"] == "find@shop.io"


def test_admin_get_unknown_user_is_not_found(client: TestClient, admin_headers):
    response = client.get(f"{API}/users/{uuid.uuid4()}", headers=admin_headers)

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "USER_NOT_FOUND"


def test_admin_promotes_user(client: TestClient, admin_headers):
    user_id = register(client, "promote@shop.io").json()["data"]["user"]["id"]

    response = client.patch(
        f"{API}/users/{user_id}/role", json={"role": "admin"}, headers=admin_headers
    )

    assert response.status_code == 200
    assert response.json()["data"]["role"] == "admin"
    # New tokens carry the new role
    promoted = bearer(login(client, "promote@shop.io"))
    assert client.get(f"{API}/users", headers=promoted).status_code == 200


def test_admin_role_update_rejects_unknown_role(client: TestClient, admin_headers):
    user_id = register(client, "weird@shop.io").json()["data"]["user"]["id"]

    response = client.patch(
        f"{API}/users/{user_id}/role", json={"role": "superuser"}, headers=admin_headers
    )

    assert response.status_code == 400


def test_admin_soft_deletes_user(client: TestClient, admin_headers):
    created = register(client, "remove@shop.io").json()["data"]
    user_id = created["user"]["id"]

    response = client.delete(f"{API}/users/{user_id}", headers=admin_headers)

    assert response.status_code == 200
    assert client.get(f"{API}/users/{user_id}", headers=admin_headers).status_code == 404
    assert client.get(f"{API}/auth/me", headers=bearer(created["access_token"])).status_code == 404
    # The email is free again
    assert register(client, "remove@shop.io").status_code == 201
