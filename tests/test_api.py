"""API endpoint tests for the root, health and authentication routes."""

from datetime import timedelta
from unittest.mock import MagicMock

from sqlalchemy.exc import OperationalError

from src.config import get_settings
from src.database import get_db
from src.main import app
from src.models.user import User
from src.services.auth import create_access_token


def test_root(client):
    """Test the plain text acknowledgement."""
    response = client.get("/")
    assert response.status_code == 200
    assert response.text == "http get request sent to root api endpoint"


def test_health_check(client):
    """Test health check endpoint."""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_register_user(client, db):
    """Test user registration stores a hash, not the password."""
    response = client.post(
        "/api/users",
        json={"name": "New User", "email": "newuser@example.com", "password": "password123"},
    )
    assert response.status_code == 200
    assert response.json()["token"]

    user = db.query(User).filter(User.email == "newuser@example.com").one()
    assert user.name == "New User"
    assert user.password_hash != "password123"
    assert user.password_hash.startswith("$2")


def test_register_duplicate_email(client, db, auth_headers):
    """Test registration with duplicate email fails and creates nothing."""
    response = client.post(
        "/api/users",
        json={"name": "Duplicate", "email": auth_headers.email, "password": "password123"},
    )
    assert response.status_code == 400
    assert response.json() == {"errors": [{"msg": "User already exists"}]}
    assert db.query(User).filter(User.email == auth_headers.email).count() == 1


def test_register_validation_errors(client, db):
    """Test every failing field is reported with its own message."""
    response = client.post(
        "/api/users", json={"name": "  ", "email": "not-an-email", "password": "12345"}
    )
    assert response.status_code == 422
    errors = {error["param"]: error["msg"] for error in response.json()["errors"]}
    assert errors == {
        "name": "Please enter your name",
        "email": "Please enter your email",
        "password": "Please enter a password with at least 6 characters",
    }
    assert all(error["location"] == "body" for error in response.json()["errors"])
    assert db.query(User).count() == 0


def test_register_missing_fields(client):
    """Test missing keys are reported like empty ones."""
    response = client.post("/api/users", json={})
    assert response.status_code == 422
    assert {error["param"] for error in response.json()["errors"]} == {"name", "email", "password"}


def test_login(client, auth_headers):
    """Test user login."""
    response = client.post(
        "/api/login", json={"email": auth_headers.email, "password": "testpass123"}
    )
    assert response.status_code == 200
    assert response.json()["token"]


def test_login_wrong_password(client, auth_headers):
    """Test login with wrong password."""
    response = client.post(
        "/api/login", json={"email": auth_headers.email, "password": "wrongpass"}
    )
    assert response.status_code == 400
    assert response.json() == {"errors": [{"msg": "Invalid email or password!"}]}


def test_login_unknown_email(client):
    """Test login with an email nobody registered."""
    response = client.post(
        "/api/login", json={"email": "nobody@example.com", "password": "whatever"}
    )
    assert response.status_code == 400
    assert response.json()["errors"][0]["msg"] == "Invalid email or password!"


def test_login_validation_errors(client):
    """Test login requires a valid email and a password."""
    response = client.post("/api/login", json={"email": "bad"})
    assert response.status_code == 422
    messages = [error["msg"] for error in response.json()["errors"]]
    assert "Please enter a valid email" in messages
    assert "A password is required!" in messages


def test_get_current_user(client, auth_headers):
    """Test getting current user info."""
    response = client.get("/api/auth", headers=auth_headers)
    assert response.status_code == 200
    data = response.json()
    assert data == {"id": auth_headers.user_id, "name": "Test User", "email": auth_headers.email}


def test_bearer_header_accepted(client, auth_headers):
    """Test the token can also be sent as a bearer credential."""
    headers = {"Authorization": f"Bearer {auth_headers['x-auth-token']}"}
    response = client.get("/api/auth", headers=headers)
    assert response.status_code == 200
    assert response.json()["id"] == auth_headers.user_id


def test_missing_token(client):
    """Test protected routes reject requests without a token."""
    response = client.get("/api/auth")
    assert response.status_code == 401
    assert response.json() == {"msg": "No token, authorization denied"}


def test_invalid_token(client):
    """Test protected routes reject a garbage token."""
    response = client.get("/api/auth", headers={"x-auth-token": "not.a.token"})
    assert response.status_code == 401
    assert response.json() == {"msg": "Token is not valid"}


def test_expired_token(client, auth_headers):
    """Test protected routes reject a token past its expiry."""
    settings = get_settings()
    token = create_access_token(
        auth_headers.user_id, settings.jwt_secret, timedelta(seconds=-1), settings.jwt_algorithm
    )
    response = client.get("/api/auth", headers={"x-auth-token": token})
    assert response.status_code == 401
    assert response.json() == {"msg": "Token has expired"}


def test_token_for_removed_user(client, db, auth_headers):
    """Test a still-valid token whose user no longer exists."""
    db.query(User).filter(User.id == auth_headers.user_id).delete()
    db.commit()

    response = client.get("/api/auth", headers=auth_headers)
    assert response.status_code == 404
    assert response.json() == {"msg": "User not found"}


def test_storage_failure_returns_500(client, auth_headers):
    """Test an unexpected store error becomes a generic 500."""
    broken = MagicMock()
    broken.query.side_effect = OperationalError("SELECT", {}, Exception("connection lost"))

    def override_get_db():
        yield broken

    app.dependency_overrides[get_db] = override_get_db

    response = client.get("/api/auth", headers=auth_headers)
    assert response.status_code == 500
    assert response.text == "Server error"
    assert "connection lost" not in response.text
