"""Tests for POST /api/auth/logout."""


def _set_cookies(response) -> list[str]:
    return response.headers.get_list("set-cookie")


def test_logout_clears_both_session_cookies(client, fake_db) -> None:
    response = client.post("/api/auth/logout")

    assert response.status_code == 200
    assert response.json() == {"success": True}

    cookies = _set_cookies(response)
    access = next(c for c in cookies if c.startswith("token="))
    refresh = next(c for c in cookies if c.startswith("refreshToken="))
    assert "Max-Age=0" in access
    assert "Path=/" in access
    assert "Max-Age=0" in refresh
    assert "Path=/api/auth" in refresh
    assert fake_db.statements == []


def test_logout_is_idempotent_with_a_session(client, user_token) -> None:
    client.cookies.set("token", user_token)

    first = client.post("/api/auth/logout")
    second = client.post("/api/auth/logout")

    assert first.status_code == 200
    assert second.status_code == 200
    assert second.json() == {"success": True}
