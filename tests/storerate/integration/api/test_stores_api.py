"""Tests for the store directory endpoints."""

from uuid import uuid4

import pytest

from tests.shared.fixtures.api_client import (
    auth_headers,
    create_store_as_admin,
    create_user_as_admin,
    login,
    signup,
)


def test_create_store_without_owner(test_client, admin_headers):
    store = create_store_as_admin(test_client, admin_headers, "hello@books.com")

    assert store["owner"] is None
    assert store["averageRating"] is None
    assert store["totalRatings"] == 0
    assert store["ratings"] == []


def test_create_store_promotes_owner(test_client, api_v1_prefix, admin_headers):
    user_id = signup(test_client, "future@owner.com", name="Future Owner")["user"]["id"]

    store = create_store_as_admin(
        test_client,
        admin_headers,
        "hello@books.com",
        owner_id=user_id,
    )

    assert store["owner"]["email"] == "future@owner.com"
    user = test_client.get(
        f"{api_v1_prefix}/users/{user_id}",
        headers=admin_headers,
    ).json()["user"]
    assert user["role"] == "STORE_OWNER"


@pytest.fixture
def owned_store(test_client, admin_headers):
    owner = create_user_as_admin(
        test_client,
        admin_headers,
        "owner@shop.com",
        role="STORE_OWNER",
    )
    create_store_as_admin(
        test_client,
        admin_headers,
        "one@shop.com",
        owner_id=owner["id"],
    )
    return owner


@pytest.mark.parametrize(
    ("email", "owner", "status_code", "code"),
    [
        ("ONE@shop.com", None, 400, "DUPLICATE_STORE_EMAIL"),
        ("two@shop.com", "existing", 400, "OWNER_ALREADY_HAS_STORE"),
        ("ghost@shop.com", "unknown", 404, "OWNER_NOT_FOUND"),
    ],
)
def test_create_store_errors(  # NOQA: PLR0913
    test_client,
    api_v1_prefix,
    admin_headers,
    owned_store,
    email,
    owner,
    status_code,
    code,
):
    payload = {"name": "Another Store", "email": email, "address": "8 Dock Street"}
    if owner == "existing":
        payload["ownerId"] = owned_store["id"]
    elif owner == "unknown":
        payload["ownerId"] = str(uuid4())

    response = test_client.post(
        f"{api_v1_prefix}/stores",
        json=payload,
        headers=admin_headers,
    )

    assert response.status_code == status_code, response.text
    assert response.json()["code"] == code


def test_only_admin_creates_stores(test_client, api_v1_prefix, user_headers):
    response = test_client.post(
        f"{api_v1_prefix}/stores",
        json={"name": "Nope", "email": "nope@shop.com", "address": "x"},
        headers=user_headers,
    )

    assert response.status_code == 403


def test_list_stores_for_any_role(
    test_client,
    api_v1_prefix,
    admin_headers,
    user_headers,
):
    for name, email in (("Beta Bikes", "beta@shop.com"), ("Alpha Art", "alpha@shop.com")):
        create_store_as_admin(test_client, admin_headers, email, name=name)

    for headers in (admin_headers, user_headers):
        response = test_client.get(f"{api_v1_prefix}/stores", headers=headers)
        assert response.status_code == 200
        assert [s["name"] for s in response.json()["stores"]] == [
            "Alpha Art",
            "Beta Bikes",
        ]


def test_list_stores_requires_authentication(test_client, api_v1_prefix):
    response = test_client.get(f"{api_v1_prefix}/stores")

    assert response.status_code == 401


def test_list_stores_filters(test_client, api_v1_prefix, admin_headers):
    create_store_as_admin(
        test_client,
        admin_headers,
        "river@shop.com",
        name="River Cafe",
        address="1 River Road",
    )
    create_store_as_admin(
        test_client,
        admin_headers,
        "hill@shop.com",
        name="Hill Bakery",
        address="2 Hill Road",
    )

    response = test_client.get(
        f"{api_v1_prefix}/stores",
        params={"address": "RIVER", "sortBy": "createdAt", "sortOrder": "desc"},
        headers=admin_headers,
    )

    body = response.json()
    assert [s["name"] for s in body["stores"]] == ["River Cafe"]
    assert body["pagination"]["total"] == 1

    bad = test_client.get(
        f"{api_v1_prefix}/stores",
        params={"sortBy": "rating"},
        headers=admin_headers,
    )
    assert bad.status_code == 400


def test_page_far_past_the_end_is_empty(test_client, api_v1_prefix, user_headers):
    response = test_client.get(
        f"{api_v1_prefix}/stores",
        params={"page": 10**18},
        headers=user_headers,
    )

    assert response.status_code == 200
    body = response.json()
    assert body["stores"] == []
    assert body["pagination"]["total"] == 0


def test_get_store(test_client, api_v1_prefix, admin_headers, user_headers):
    store = create_store_as_admin(test_client, admin_headers, "hello@books.com")

    response = test_client.get(
        f"{api_v1_prefix}/stores/{store['id']}",
        headers=user_headers,
    )

    assert response.status_code == 200
    assert response.json()["store"]["email"] == "hello@books.com"

    missing = test_client.get(
        f"{api_v1_prefix}/stores/{uuid4()}",
        headers=user_headers,
    )
    assert missing.status_code == 404
    assert missing.json()["code"] == "STORE_NOT_FOUND"


def test_my_store(test_client, api_v1_prefix, admin_headers, user_headers):
    owner = create_user_as_admin(
        test_client,
        admin_headers,
        "owner@shop.com",
        role="STORE_OWNER",
    )
    owner_headers = auth_headers(login(test_client, "owner@shop.com"))

    no_store = test_client.get(f"{api_v1_prefix}/stores/my-store", headers=owner_headers)
    assert no_store.status_code == 404
    assert no_store.json()["detail"] == "You do not own a store"

    create_store_as_admin(
        test_client,
        admin_headers,
        "mine@shop.com",
        name="Mine",
        owner_id=owner["id"],
    )
    response = test_client.get(f"{api_v1_prefix}/stores/my-store", headers=owner_headers)
    assert response.status_code == 200
    assert response.json()["store"]["name"] == "Mine"

    as_user = test_client.get(f"{api_v1_prefix}/stores/my-store", headers=user_headers)
    assert as_user.status_code == 403
