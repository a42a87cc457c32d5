"""
Tests for login, token-protected access and the password reset flow.

The SMTP relay is replaced by a fake through monkeypatch; no mail leaves the
test process.
"""

from datetime import datetime, timedelta

from adapters import mail_adapter, mongo_adapter
from test_fixtures import client, db, make_user


# =============================================================================
# LOGIN
# =============================================================================


def test_login_returns_token_and_summary(db):
    """
    Verifies:
    - 200 with message, statusCode and token
    - the user summary uses userName and never carries the password
    - the token opens protected routes
    """
    user = make_user(db, password="secret123", username="sarahm")

    r = client.post("/api/login", json={"email": user["email"], "password": "secret123"})
    assert r.status_code == 200
    body = r.json()
    assert body["message"] == "Login Successfully"
    assert body["statusCode"] == 200
    assert body["user"] == {
        "id": str(user["_id"]),
        "userName": "sarahm",
        "email": user["email"],
        "firstName": "Sarah",
        "lastName": "Martinez",
    }

    r2 = client.get(
        f"/api/users/{user['_id']}",
        headers={"Authorization": f"Bearer {body['token']}"},
    )
    assert r2.status_code == 200


def test_login_wrong_password(db):
    user = make_user(db, password="secret123")
    r = client.post("/api/login", json={"email": user["email"], "password": "nope123"})
    assert r.status_code == 400
    assert r.json()["message"] == "Invalid Credentials"


def test_login_unknown_email(db):
    r = client.post("/api/login", json={"email": "ghost@example.com", "password": "secret123"})
    assert r.status_code == 400
    assert r.json()["message"] == "Invalid Credentials"


# =============================================================================
# TOKEN VERIFIER AT THE HTTP BOUNDARY
# =============================================================================


def test_protected_route_without_token(db):
    r = client.get("/api/users")
    assert r.status_code == 403
    assert r.json() == {"message": "Access denied, no token provided"}


def test_protected_route_with_bad_token(db):
    r = client.get("/api/users", headers={"Authorization": "Bearer not-a-jwt"})
    assert r.status_code == 400
    assert r.json() == {"message": "Invalid or expired token"}


# =============================================================================
# FORGOT / RESET PASSWORD
# =============================================================================


def test_forgot_and_reset_password_flow(db, monkeypatch):
    """
    Verifies:
    - a 40 hex character token with a future expiry is stored
    - the mail goes to the user with the reset URL in the body
    - reset hashes the new password, clears the token and does not echo the password
    - the token cannot be used twice
    """
    user = make_user(db, password="oldpass1")
    sent = []

    def fake_send(to, subject, body):
        sent.append((to, subject, body))
        return True

    monkeypatch.setattr(mail_adapter, "send_mail", fake_send)

    r = client.post("/api/forgot-password", json={"email": user["email"]})
    assert r.status_code == 200
    assert r.json()["message"] == "Password reset email sent successfully"

    stored = db[mongo_adapter.USERS].find_one({"_id": user["_id"]})
    token = stored["resetPasswordToken"]
    assert len(token) == 40
    int(token, 16)
    assert stored["resetPasswordExpire"] > datetime.utcnow() + timedelta(minutes=55)

    assert len(sent) == 1
    to, subject, body = sent[0]
    assert to == user["email"]
    assert subject == "Password Reset Request"
    assert f"/api/reset-password/{token}" in body

    r2 = client.post(f"/api/reset-password/{token}", json={"password": "newpass1"})
    assert r2.status_code == 200
    assert r2.json()["message"] == "Password successfully updated"
    assert "newpass1" not in r2.text

    stored = db[mongo_adapter.USERS].find_one({"_id": user["_id"]})
    assert "resetPasswordToken" not in stored
    assert "resetPasswordExpire" not in stored

    login = client.post("/api/login", json={"email": user["email"], "password": "newpass1"})
    assert login.status_code == 200

    again = client.post(f"/api/reset-password/{token}", json={"password": "another1"})
    assert again.status_code == 400
    assert again.json()["message"] == "Invalid or expired reset token"


def test_forgot_password_unknown_email(db, monkeypatch):
    monkeypatch.setattr(mail_adapter, "send_mail", lambda *a: True)
    r = client.post("/api/forgot-password", json={"email": "ghost@example.com"})
    assert r.status_code == 400
    assert r.json()["message"] == "No user found with this email address"


def test_forgot_password_mail_failure(db, monkeypatch):
    user = make_user(db)
    monkeypatch.setattr(mail_adapter, "send_mail", lambda *a: False)

    r = client.post("/api/forgot-password", json={"email": user["email"]})
    assert r.status_code == 500
    assert r.json()["message"] == "Error sending email"


def test_reset_password_expired_token(db):
    make_user(
        db,
        resetPasswordToken="a" * 40,
        resetPasswordExpire=datetime.utcnow() - timedelta(minutes=1),
    )
    r = client.post(f"/api/reset-password/{'a' * 40}", json={"password": "newpass1"})
    assert r.status_code == 400
    assert r.json()["message"] == "Invalid or expired reset token"


def test_reset_password_short_password(db):
    r = client.post("/api/reset-password/whatever", json={"password": "123"})
    assert r.status_code == 400
    assert r.json()["message"].startswith("password")
