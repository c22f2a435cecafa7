"""Tests for submitting, updating and reading ratings."""

from uuid import uuid4

import pytest

from tests.shared.fixtures.api_client import (
    auth_headers,
    create_store_as_admin,
    create_user_as_admin,
    login,
    signup,
)


@pytest.fixture
def store(test_client, admin_headers):
    owner = create_user_as_admin(
        test_client,
        admin_headers,
        "owner@shop.com",
        role="STORE_OWNER",
        name="Olive Owner",
    )
    return create_store_as_admin(
        test_client,
        admin_headers,
        "contact@deli.com",
        name="Olive's Deli",
        owner_id=owner["id"],
    )


@pytest.fixture
def owner_headers(test_client, store):
    return auth_headers(login(test_client, "owner@shop.com"))


@pytest.fixture
def bob_headers(test_client):
    return auth_headers(signup(test_client, "bob@example.com", name="Bob")["token"])


def _rate(client, prefix, headers, store_id, rating):
    return client.post(
        f"{prefix}/ratings",
        json={"storeId": store_id, "rating": rating},
        headers=headers,
    )


def _store_entry(client, prefix, headers, store_id):
    stores = client.get(f"{prefix}/stores", headers=headers).json()["stores"]
    return next(s for s in stores if s["id"] == store_id)


def test_average_follows_submissions_and_updates(  # NOQA: PLR0913
    test_client,
    api_v1_prefix,
    store,
    user_headers,
    bob_headers,
    admin_headers,
):
    response = _rate(test_client, api_v1_prefix, user_headers, store["id"], 5)
    assert response.status_code == 201
    assert response.json()["message"] == "Rating submitted successfully"

    entry = _store_entry(test_client, api_v1_prefix, admin_headers, store["id"])
    assert (entry["averageRating"], entry["totalRatings"]) == ("5.0", 1)

    _rate(test_client, api_v1_prefix, bob_headers, store["id"], 3)
    entry = _store_entry(test_client, api_v1_prefix, admin_headers, store["id"])
    assert (entry["averageRating"], entry["totalRatings"]) == ("4.0", 2)

    response = test_client.put(
        f"{api_v1_prefix}/ratings/{store['id']}",
        json={"rating": 1},
        headers=user_headers,
    )
    assert response.status_code == 200
    assert response.json()["message"] == "Rating updated successfully"
    assert response.json()["rating"]["rating"] == 1

    entry = _store_entry(test_client, api_v1_prefix, admin_headers, store["id"])
    assert (entry["averageRating"], entry["totalRatings"]) == ("2.0", 2)


def test_store_list_shows_own_rating_to_users(
    test_client,
    api_v1_prefix,
    store,
    user_headers,
    bob_headers,
):
    rating = _rate(test_client, api_v1_prefix, user_headers, store["id"], 4).json()

    mine = _store_entry(test_client, api_v1_prefix, user_headers, store["id"])
    assert mine["userRating"] == 4
    assert mine["userRatingId"] == rating["rating"]["id"]

    theirs = _store_entry(test_client, api_v1_prefix, bob_headers, store["id"])
    assert theirs["userRating"] is None
    assert theirs["userRatingId"] is None


def test_store_list_keeps_own_rating_after_promotion(
    test_client,
    api_v1_prefix,
    store,
    admin_headers,
    user_headers,
):
    rating = _rate(test_client, api_v1_prefix, user_headers, store["id"], 5).json()
    profile = test_client.get(f"{api_v1_prefix}/auth/profile", headers=user_headers)
    create_store_as_admin(
        test_client,
        admin_headers,
        "second@shop.com",
        name="Second Shop",
        owner_id=profile.json()["user"]["id"],
    )

    entry = _store_entry(test_client, api_v1_prefix, user_headers, store["id"])
    assert entry["userRating"] == 5
    assert entry["userRatingId"] == rating["rating"]["id"]


def test_second_submission_is_rejected(test_client, api_v1_prefix, store, user_headers):
    _rate(test_client, api_v1_prefix, user_headers, store["id"], 4)

    response = _rate(test_client, api_v1_prefix, user_headers, store["id"], 2)

    assert response.status_code == 400
    assert response.json()["code"] == "DUPLICATE_RATING"


@pytest.mark.parametrize("rating", [0, 6, 4.5, "5", True])
def test_invalid_rating_values(test_client, api_v1_prefix, store, user_headers, rating):
    response = _rate(test_client, api_v1_prefix, user_headers, store["id"], rating)

    assert response.status_code == 400
    assert response.json()["errors"]["rating"] == "Rating must be between 1 and 5"


def test_rating_unknown_store(test_client, api_v1_prefix, user_headers):
    response = _rate(test_client, api_v1_prefix, user_headers, str(uuid4()), 3)

    assert response.status_code == 404
    assert response.json()["code"] == "STORE_NOT_FOUND"


def test_update_without_rating(test_client, api_v1_prefix, store, user_headers):
    response = test_client.put(
        f"{api_v1_prefix}/ratings/{store['id']}",
        json={"rating": 3},
        headers=user_headers,
    )

    assert response.status_code == 404
    assert response.json()["code"] == "RATING_NOT_FOUND"


def test_only_users_rate(test_client, api_v1_prefix, store, admin_headers, owner_headers):
    for headers in (admin_headers, owner_headers):
        response = _rate(test_client, api_v1_prefix, headers, store["id"], 5)
        assert response.status_code == 403


def test_my_ratings(test_client, api_v1_prefix, store, user_headers):
    _rate(test_client, api_v1_prefix, user_headers, store["id"], 5)

    response = test_client.get(
        f"{api_v1_prefix}/ratings/my-ratings",
        headers=user_headers,
    )

    assert response.status_code == 200
    [item] = response.json()["ratings"]
    assert item["rating"] == 5
    assert item["store"]["name"] == "Olive's Deli"


def test_owner_sees_store_ratings(
    test_client,
    api_v1_prefix,
    store,
    owner_headers,
    user_headers,
    bob_headers,
):
    _rate(test_client, api_v1_prefix, user_headers, store["id"], 5)
    _rate(test_client, api_v1_prefix, bob_headers, store["id"], 4)

    response = test_client.get(
        f"{api_v1_prefix}/ratings/store/{store['id']}",
        headers=owner_headers,
    )

    assert response.status_code == 200
    body = response.json()
    assert body["averageRating"] == "4.5"
    assert body["totalRatings"] == 2
    assert {r["user"]["email"] for r in body["ratings"]} == {
        "alice@example.com",
        "bob@example.com",
    }

    detail = test_client.get(
        f"{api_v1_prefix}/stores/my-store",
        headers=owner_headers,
    ).json()["store"]
    assert detail["averageRating"] == "4.5"
    assert len(detail["ratings"]) == 2


def test_owner_cannot_read_other_store(
    test_client,
    api_v1_prefix,
    store,
    admin_headers,
    owner_headers,
):
    other = create_store_as_admin(
        test_client,
        admin_headers,
        "other@shop.com",
        name="Other Shop",
    )

    response = test_client.get(
        f"{api_v1_prefix}/ratings/store/{other['id']}",
        headers=owner_headers,
    )
    assert response.status_code == 403

    missing = test_client.get(
        f"{api_v1_prefix}/ratings/store/{uuid4()}",
        headers=owner_headers,
    )
    assert missing.status_code == 404
