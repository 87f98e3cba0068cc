"""Tests for the notification endpoints."""

from datetime import datetime, timezone
from uuid import uuid4

from realtime.notifier import NEW_NOTIFICATION_EVENT, user_channel


def _notification_row(recipient_id: str, *, is_read: bool = False, **overrides) -> dict:
    row = {
        "id": uuid4(),
        "recipient_id": recipient_id,
        "type": "system_alert",
        "reference_id": None,
        "title": "Welcome",
        "message": "Your account was approved.",
        "metadata": '{"source": "admin"}',
        "is_read": is_read,
        "created_at": datetime(2024, 5, 1, tzinfo=timezone.utc),
        "read_at": None,
    }
    row.update(overrides)
    return row


def test_read_all_requires_session(client, fake_db) -> None:
    response = client.patch("/api/notifications/read-all")

    assert response.status_code == 401
    assert response.json() == {"error": "Unauthorized"}
    assert fake_db.statements == []


def test_read_all_with_invalid_token(client, fake_db) -> None:
    client.cookies.set("token", "forged.token.value")

    response = client.patch("/api/notifications/read-all")

    assert response.status_code == 401
    assert fake_db.statements == []


def test_read_all_only_touches_callers_notifications(client, fake_db, user_token, user_id) -> None:
    client.cookies.set("token", user_token)

    first = client.patch("/api/notifications/read-all")
    second = client.patch("/api/notifications/read-all")

    assert first.status_code == 200
    assert first.json() == {"success": True}
    assert second.json() == {"success": True}

    sql, args = fake_db.statements[0]
    assert "UPDATE notifications" in sql
    assert "is_read = true" in sql
    assert "WHERE recipient_id = $1::uuid" in sql
    assert args == (user_id,)


def test_read_all_hides_database_errors(client, fake_db, user_token) -> None:
    client.cookies.set("token", user_token)
    fake_db.execute_results.append(RuntimeError("deadlock detected"))

    response = client.patch("/api/notifications/read-all")

    assert response.status_code == 500
    assert response.json() == {"error": "Internal Server Error"}


def test_list_notifications_counts_unread_on_page(client, fake_db, user_token, user_id) -> None:
    client.cookies.set("token", user_token)
    fake_db.all_results.append(
        [_notification_row(user_id), _notification_row(user_id, is_read=True)]
    )

    response = client.get("/api/notifications")

    assert response.status_code == 200
    body = response.json()
    assert body["meta"] == {"unreadCount": 1}
    assert body["data"][0]["metadata"] == {"source": "admin"}
    assert body["data"][0]["recipientId"] == user_id
    assert fake_db.statements[0][1] == (user_id, 50)


def test_unread_count(client, fake_db, user_token) -> None:
    client.cookies.set("token", user_token)
    fake_db.value_results.append(4)

    response = client.get("/api/notifications/unread-count")

    assert response.json() == {"unreadCount": 4}


def test_mark_one_read_is_scoped_to_caller(client, fake_db, user_token, user_id) -> None:
    client.cookies.set("token", user_token)
    notification_id = str(uuid4())

    response = client.patch(f"/api/notifications/{notification_id}/read")

    assert response.status_code == 200
    assert fake_db.statements[0][1] == (notification_id, user_id)


def test_admin_create_notification_publishes_event(client, fake_db, pusher_client, admin_token) -> None:
    client.cookies.set("token", admin_token)
    recipient_id = str(uuid4())
    fake_db.one_results.append(_notification_row(recipient_id, metadata=None))

    response = client.post(
        "/api/admin/notifications",
        json={
            "recipientId": recipient_id,
            "type": "system_alert",
            "title": "Welcome",
            "message": "Your account was approved.",
        },
    )

    assert response.status_code == 201
    notification = response.json()["data"]
    channel, event, data = pusher_client.triggers[0]
    assert channel == user_channel(recipient_id)
    assert event == NEW_NOTIFICATION_EVENT
    assert data["id"] == notification["id"]


def test_admin_create_notification_survives_relay_failure(
    client, fake_db, pusher_client, admin_token
) -> None:
    client.cookies.set("token", admin_token)
    pusher_client.fail_trigger = True
    recipient_id = str(uuid4())
    fake_db.one_results.append(_notification_row(recipient_id))

    response = client.post(
        "/api/admin/notifications",
        json={"recipientId": recipient_id, "type": "admin_announcement", "title": "Hi", "message": "News"},
    )

    assert response.status_code == 201
    assert pusher_client.triggers == []


def test_admin_create_notification_rejects_unknown_type(client, fake_db, admin_token) -> None:
    client.cookies.set("token", admin_token)

    response = client.post(
        "/api/admin/notifications",
        json={"recipientId": str(uuid4()), "type": "party", "title": "Hi", "message": "News"},
    )

    assert response.status_code == 400
    assert fake_db.statements == []
