from datetime import datetime, timedelta, timezone
from types import SimpleNamespace

import jwt
import pytest

from blogsphere.config import Settings
from blogsphere.dependencies import CredentialVerifier, InvalidToken, MalformedHeader, MissingToken
from blogsphere.services.auth import issue_token
from conftest import TEST_SECRET


@pytest.fixture
def verifier():
    return CredentialVerifier(Settings(jwt_secret=TEST_SECRET, database_url="sqlite://"))


def make_user():
    return SimpleNamespace(id=7, name="Leia", email="leia@example.com")


class TestCredentialVerifier:
    def test_missing_header(self, verifier):
        with pytest.raises(MissingToken):
            verifier.verify(None)
        with pytest.raises(MissingToken):
            verifier.verify("")

    @pytest.mark.parametrize("header", ["abc.def.ghi", "Token abc", "Bearer", "Bearer a b"])
    def test_malformed_header(self, verifier, header):
        with pytest.raises(MalformedHeader):
            verifier.verify(header)

    def test_issued_token_round_trip(self, verifier):
        token = issue_token(make_user(), verifier.settings)
        claims = verifier.verify(f"Bearer {token}")
        assert claims == {"email": "leia@example.com", "name": "Leia", "id": 7}

    def test_scheme_is_case_insensitive(self, verifier):
        token = issue_token(make_user(), verifier.settings)
        assert verifier.verify(f"bearer {token}")["id"] == 7

    def test_bare_claims_are_accepted(self, verifier):
        token = jwt.encode({"id": 1, "name": "Luke", "email": "luke@example.com"}, TEST_SECRET, algorithm="HS256")
        assert verifier.verify(f"Bearer {token}")["id"] == 1

    def test_wrong_secret(self, verifier):
        token = jwt.encode({"payload": {"id": 1}}, "another-secret-entirely-0123456789", algorithm="HS256")
        with pytest.raises(InvalidToken):
            verifier.verify(f"Bearer {token}")

    def test_expired_token(self, verifier):
        expired = datetime.now(timezone.utc) - timedelta(hours=1)
        token = jwt.encode({"payload": {"id": 1}, "exp": expired}, TEST_SECRET, algorithm="HS256")
        with pytest.raises(InvalidToken):
            verifier.verify(f"Bearer {token}")

    def test_garbage_token(self, verifier):
        with pytest.raises(InvalidToken):
            verifier.verify("Bearer not-a-jwt")

    def test_token_without_user_id(self, verifier):
        token = jwt.encode({"payload": {"name": "nobody"}}, TEST_SECRET, algorithm="HS256")
        with pytest.raises(InvalidToken):
            verifier.verify(f"Bearer {token}")


class TestProtectedRoutes:
    def test_missing_token(self, client):
        response = client.post("/api/v1/like", json={"userId": 1, "blogId": 1})
        assert response.status_code == 401
        assert response.json() == {"success": False, "message": "Unauthorized: Missing token"}

    def test_malformed_header(self, client):
        response = client.post("/api/v1/like", json={"userId": 1, "blogId": 1}, headers={"Authorization": "abc"})
        assert response.status_code == 401
        assert response.json()["message"] == "Unauthorized: Invalid token format"

    def test_invalid_token(self, client):
        response = client.post(
            "/api/v1/saveblog",
            json={"userId": 1, "blogId": 1},
            headers={"Authorization": "Bearer not-a-jwt"},
        )
        assert response.status_code == 401
        assert response.json()["message"] == "Unauthorized: Invalid token"

    def test_auth_is_checked_before_validation(self, client):
        response = client.post("/api/v1/comment", json={"userId": 1, "blogId": 1, "body": "x"})
        assert response.status_code == 401

    def test_public_routes_need_no_token(self, client):
        assert client.get("/api/v1/allblogs").status_code == 200
        assert client.get("/health").json() == {"status": "ok"}
