"""API tests for admin login and the bearer-token guard."""

from datetime import timedelta

from travel_admin.core.security import create_token


def test_login_with_username(client, admin):
    r = client.post("/api/auth/login", json={"username": "admin", "password": "admin123"})
    assert r.status_code == 200
    body = r.json()
    assert body["success"] is True
    assert body["user"] == {"id": admin.id, "username": "admin", "email": "admin@slimeline.com"}
    assert body["token"]


def test_login_with_email(client, admin):
    r = client.post("/api/auth/login", json={"username": "admin@slimeline.com", "password": "admin123"})
    assert r.status_code == 200


def test_login_bad_password(client, admin):
    r = client.post("/api/auth/login", json={"username": "admin", "password": "nope"})
    assert r.status_code == 401
    assert r.json()["detail"] == "Invalid credentials"


def test_login_unknown_user(client, admin):
    r = client.post("/api/auth/login", json={"username": "ghost", "password": "admin123"})
    assert r.status_code == 401


def test_check(client, auth_headers):
    r = client.get("/api/auth/check", headers=auth_headers)
    assert r.status_code == 200
    assert r.json()["authenticated"] is True
    assert r.json()["user"]["username"] == "admin"


def test_check_without_token(client):
    r = client.get("/api/auth/check")
    assert r.status_code == 401
    assert r.json()["detail"] == "No token provided"


def test_check_with_garbage_token(client):
    r = client.get("/api/auth/check", headers={"Authorization": "Bearer not-a-jwt"})
    assert r.status_code == 401


def test_expired_token(client, admin):
    token = create_token({"id": admin.id, "username": "admin", "email": admin.email}, timedelta(minutes=-1))
    r = client.get("/api/auth/check", headers={"Authorization": f"Bearer {token}"})
    assert r.status_code == 401


def test_token_for_deleted_admin(client, db, admin, auth_headers):
    db.delete(admin)
    db.commit()
    r = client.get("/api/auth/check", headers=auth_headers)
    assert r.status_code == 401
    assert r.json()["detail"] == "User no longer exists"


def test_logout(client):
    assert client.post("/api/auth/logout").json() == {"success": True}
