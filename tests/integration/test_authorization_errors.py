"""Caller resolution and permission failures over HTTP."""

from __future__ import annotations

import pytest
from httpx import AsyncClient

from tests.utils import ADMIN_ID, PERSONAL_ID, VIEWER_ID, as_caller

pytestmark = pytest.mark.asyncio

USERS = "/api/v1/users"


async def test_missing_caller_header_is_bad_request(async_client: AsyncClient) -> None:
    response = await async_client.get(USERS)

    assert response.status_code == 400
    payload = response.json()
    assert payload["type"] == "bad_request"
    assert payload["detail"] == "Authorization header must be a numeric user ID"


@pytest.mark.parametrize("raw", ["abc", "-1", "1.0", "Bearer 1"])
async def test_malformed_caller_is_bad_request(async_client: AsyncClient, raw: str) -> None:
    response = await async_client.get(USERS, headers={"Authorization": raw})

    assert response.status_code == 400


async def test_unknown_caller_is_unauthorized(async_client: AsyncClient) -> None:
    response = await async_client.get(USERS, headers=as_caller(999))

    assert response.status_code == 401
    assert response.json()["detail"] == "Caller 999 is not a registered user"


async def test_malformed_caller_wins_over_missing_permission(async_client: AsyncClient) -> None:
    response = await async_client.delete(f"{USERS}/1", headers={"Authorization": "x"})

    assert response.status_code == 400


async def test_viewer_cannot_create(async_client: AsyncClient) -> None:
    response = await async_client.post(
        USERS,
        headers=as_caller(VIEWER_ID),
        json={"name": "Blocked", "roles": ["PERSONAL"], "groups": ["GROUP_1"]},
    )

    assert response.status_code == 403
    payload = response.json()
    assert payload["type"] == "forbidden"
    assert payload["detail"] == "Not allowed to perform action due to insufficient permissions"
    assert "errors" not in payload

    listing = await async_client.get(USERS, headers=as_caller(ADMIN_ID))
    assert len(listing.json()) == 6


async def test_permission_check_runs_before_payload_validation(async_client: AsyncClient) -> None:
    response = await async_client.post(USERS, headers=as_caller(VIEWER_ID), json={})

    assert response.status_code == 403


async def test_personal_user_cannot_view(async_client: AsyncClient) -> None:
    response = await async_client.get(f"{USERS}/1", headers=as_caller(PERSONAL_ID))

    assert response.status_code == 403


@pytest.mark.parametrize(
    ("method", "path", "body"),
    [
        ("PATCH", f"{USERS}/2", {"name": "Nope"}),
        ("DELETE", f"{USERS}/2", None),
    ],
)
async def test_viewer_cannot_mutate(async_client: AsyncClient, method, path, body) -> None:
    response = await async_client.request(method, path, headers=as_caller(VIEWER_ID), json=body)

    assert response.status_code == 403

    still_there = await async_client.get(f"{USERS}/2", headers=as_caller(ADMIN_ID))
    assert still_there.json()["name"] == "Grabriel Monroe"


async def test_missing_permissions_exposed_when_enabled(
    async_client: AsyncClient,
    override_app_settings,
) -> None:
    override_app_settings(expose_missing_permissions=True)

    response = await async_client.delete(f"{USERS}/2", headers=as_caller(VIEWER_ID))

    assert response.status_code == 403
    errors = response.json()["errors"]
    assert errors == [
        {"message": "Missing permission DELETE", "code": "missing_permission"},
    ]


async def test_role_change_applies_to_next_request(async_client: AsyncClient) -> None:
    denied = await async_client.get(USERS, headers=as_caller(PERSONAL_ID))
    assert denied.status_code == 403

    await async_client.patch(
        f"{USERS}/{PERSONAL_ID}",
        headers=as_caller(ADMIN_ID),
        json={"roles": ["VIEWER"]},
    )

    allowed = await async_client.get(USERS, headers=as_caller(PERSONAL_ID))
    assert allowed.status_code == 200


async def test_custom_caller_header(
    async_client: AsyncClient,
    override_app_settings,
) -> None:
    override_app_settings(caller_header="X-User-Id")

    response = await async_client.get(USERS, headers={"X-User-Id": "1"})
    assert response.status_code == 200

    missing = await async_client.get(USERS, headers={"Authorization": "1"})
    assert missing.status_code == 400
    assert missing.json()["detail"] == "X-User-Id header must be a numeric user ID"


async def test_overlong_caller_id_is_bad_request(async_client: AsyncClient) -> None:
    response = await async_client.get(USERS, headers={"Authorization": "9" * 5000})

    assert response.status_code == 400
    assert response.json()["type"] == "bad_request"
