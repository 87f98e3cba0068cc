"""Tests for the slider endpoints."""

from datetime import datetime, timezone
from uuid import uuid4


def _slide_row(display_order: int) -> dict:
    return {
        "id": uuid4(),
        "image_url": f"https://cdn.example.com/slide-{display_order}.jpg",
        "title": None,
        "link_url": "/events",
        "display_order": display_order,
        "is_active": True,
        "created_at": datetime(2024, 5, 1, tzinfo=timezone.utc),
    }


def test_public_slider_returns_active_slides_in_display_order(client, fake_db) -> None:
    fake_db.all_results.append([_slide_row(0), _slide_row(1)])

    response = client.get("/api/slider")

    assert response.status_code == 200
    data = response.json()["data"]
    assert [slide["displayOrder"] for slide in data] == [0, 1]
    assert data[0]["linkUrl"] == "/events"

    sql, _ = fake_db.statements[0]
    assert "is_active = true" in sql
    assert "ORDER BY display_order ASC, created_at DESC" in sql


def test_public_slider_hides_database_errors(client, fake_db) -> None:
    fake_db.all_results.append(RuntimeError("boom"))

    response = client.get("/api/slider")

    assert response.status_code == 500
    assert response.json() == {"error": "Internal Server Error"}


def test_reorder_requires_admin(client, fake_db, user_token) -> None:
    client.cookies.set("token", user_token)

    response = client.patch("/api/slider/reorder", json=[{"id": str(uuid4()), "displayOrder": 1}])

    assert response.status_code == 403
    assert fake_db.many_calls == []


def test_reorder_updates_every_slide_in_one_batch(client, fake_db, admin_token) -> None:
    client.cookies.set("token", admin_token)
    first, second = str(uuid4()), str(uuid4())

    response = client.patch(
        "/api/slider/reorder",
        json=[{"id": first, "displayOrder": 2}, {"id": second, "displayOrder": 1}],
    )

    assert response.status_code == 200
    assert response.json() == {"success": True}
    assert fake_db.many_calls[0][1] == [(first, 2), (second, 1)]


def test_reorder_with_empty_list_is_a_no_op(client, fake_db, admin_token) -> None:
    client.cookies.set("token", admin_token)

    response = client.patch("/api/slider/reorder", json=[])

    assert response.status_code == 200
    assert fake_db.many_calls == []


def test_admin_create_slide_uses_sort_order(client, fake_db, admin_token) -> None:
    client.cookies.set("token", admin_token)
    fake_db.one_results.append(_slide_row(3))

    response = client.post(
        "/api/admin/slider",
        json={"imageUrl": "https://cdn.example.com/slide-3.jpg", "sortOrder": 3},
    )

    assert response.status_code == 201
    assert response.json()["data"]["displayOrder"] == 3
    assert fake_db.statements[0][1] == ("https://cdn.example.com/slide-3.jpg", None, None, 3)


def test_admin_create_slide_requires_image_url(client, admin_token) -> None:
    client.cookies.set("token", admin_token)

    response = client.post("/api/admin/slider", json={"title": "No image"})

    assert response.status_code == 400
    assert response.json() == {"error": "Image URL is required"}
