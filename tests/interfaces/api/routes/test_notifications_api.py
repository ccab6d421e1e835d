"""Integration tests for the notification endpoints."""

from __future__ import annotations

from notification_hub.domain.entities import Actor

ADA = Actor(id=42, first_name="Ada", last_name="Lovelace", public_url="/users/ada")
BOB = Actor(id=7, first_name="Bob")


def _create(client, headers, **payload):
    body = {"action_key": "resource-comment", **payload}
    return client.post("/notifications/", json=body, headers=headers)


def test_requests_without_token_are_rejected(client):
    response = client.get("/notifications/")

    assert response.status_code in {401, 403}


def test_invalid_token_is_unauthorized(client):
    response = client.get(
        "/notifications/", headers={"Authorization": "Bearer not-a-token"}
    )

    assert response.status_code == 401


def test_create_notification_reaches_followers_but_not_the_doer(client, auth_headers):
    follow = client.post(
        "/followers/",
        json={"resource_id": 10, "resource_class": "blog.Post"},
        headers=auth_headers(BOB),
    )
    assert follow.status_code == 201

    response = _create(
        client,
        auth_headers(ADA),
        icon_key="comment",
        resource={"id": 10, "class_name": "blog.Post"},
        include_user_ids=[42],
        details={"text": "hello"},
    )

    assert response.status_code == 201
    created = response.json()
    assert created["resource_id"] == 10
    assert created["user_id"] == 42
    assert created["details"]["doer"]["firstName"] == "Ada"

    bob_count = client.get("/notifications/unviewed/count", headers=auth_headers(BOB))
    ada_count = client.get("/notifications/unviewed/count", headers=auth_headers(ADA))
    assert bob_count.json() == {"total": 1}
    assert ada_count.json() == {"total": 0}


def test_create_without_recipients_returns_null(client, auth_headers):
    response = _create(client, auth_headers(ADA), include_user_ids=[42])

    assert response.status_code == 201
    assert response.json() is None


def test_feed_renders_and_marks_rows_viewed(client, auth_headers, registry):
    registry.register(
        "resource-comment",
        lambda viewer, system_name: {
            "system": system_name,
            "text": viewer.notification.details.get("text"),
        },
    )
    _create(client, auth_headers(ADA), include_user_ids=[7], details={"text": "hi"})
    _create(client, auth_headers(ADA), action_key="unrendered", include_user_ids=[7])

    response = client.get("/notifications/?page=1&page_size=10", headers=auth_headers(BOB))

    assert response.status_code == 200
    feed = response.json()
    assert feed["total_items"] == 2
    assert feed["total_pages"] == 1
    assert [item["status"] for item in feed["items"]] == [False, False]
    rendered_ids = {
        str(item["id"])
        for item in feed["items"]
        if item["notification"]["action_key"] == "resource-comment"
    }
    assert set(feed["views"]) == rendered_ids
    assert list(feed["views"].values()) == [{"system": "Test Hub", "text": "hi"}]

    count = client.get("/notifications/unviewed/count", headers=auth_headers(BOB))
    assert count.json() == {"total": 0}


def test_feed_page_out_of_range_is_not_found(client, auth_headers):
    response = client.get("/notifications/?page=3", headers=auth_headers(BOB))

    assert response.status_code == 404
    assert response.json()["detail"] == "Página no encontrada"


def test_mark_viewed_endpoint(client, auth_headers):
    _create(client, auth_headers(ADA), include_user_ids=[7])
    feed = client.get("/notifications/", headers=auth_headers(BOB)).json()
    row_id = feed["items"][0]["id"]
    _create(client, auth_headers(ADA), include_user_ids=[7])

    assert client.post(
        "/notifications/viewed", json={"ids": []}, headers=auth_headers(BOB)
    ).status_code == 204
    count = client.get("/notifications/unviewed/count", headers=auth_headers(BOB))
    assert count.json() == {"total": 1}

    feed = client.get("/notifications/", headers=auth_headers(BOB)).json()
    newest_id = feed["items"][0]["id"]
    assert newest_id != row_id
    response = client.post(
        "/notifications/viewed",
        json={"ids": [newest_id, newest_id, row_id]},
        headers=auth_headers(BOB),
    )
    assert response.status_code == 204
    count = client.get("/notifications/unviewed/count", headers=auth_headers(BOB))
    assert count.json() == {"total": 0}
