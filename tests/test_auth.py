import pytest

from rssagg.core.auth import parse_auth_header
from rssagg.core.exceptions import UnauthenticatedError

from conftest import auth


def test_parse_auth_header_returns_key():
    assert parse_auth_header({"Authorization": "ApiKey abc123"}) == "abc123"


def test_parse_auth_header_takes_second_token():
    assert parse_auth_header({"Authorization": "ApiKey abc 123"}) == "abc"


@pytest.mark.parametrize("headers", [{}, {"Authorization": ""}])
def test_parse_auth_header_missing(headers):
    with pytest.raises(UnauthenticatedError) as exc_info:
        parse_auth_header(headers)
    assert exc_info.value.status_code == 401
    assert exc_info.value.detail == "no auth header included in request"


@pytest.mark.parametrize("value", ["ApiKey", "Bearer abc123", "apikey abc123", "abc123"])
def test_parse_auth_header_malformed(value):
    with pytest.raises(UnauthenticatedError) as exc_info:
        parse_auth_header({"Authorization": value})
    assert exc_info.value.detail == "malformed authorization header"


@pytest.mark.parametrize(
    "method,path",
    [
        ("GET", "/v1/users"),
        ("POST", "/v1/feeds"),
        ("POST", "/v1/feed_follows"),
        ("GET", "/v1/feed_follows/"),
        ("DELETE", "/v1/feed_follows/5f0e9a9c-6d3b-4a52-9f0e-3f6f2f3b8a11"),
    ],
)
def test_authenticated_endpoints_require_header(client, method, path):
    response = client.request(method, path)
    assert response.status_code == 401
    assert response.json() == {"error": "no auth header included in request"}


def test_malformed_header_is_401(client):
    response = client.get("/v1/users", headers={"Authorization": "Bearer something"})
    assert response.status_code == 401
    assert response.json() == {"error": "malformed authorization header"}


def test_unknown_api_key_is_404(client, make_user):
    make_user()
    response = client.get("/v1/users", headers={"Authorization": "ApiKey " + "0" * 64})
    assert response.status_code == 404
    assert "error" in response.json()


def test_api_key_is_case_sensitive(client, make_user):
    user = make_user()
    response = client.get(
        "/v1/users", headers={"Authorization": f"ApiKey {user['api_key'].upper()}"}
    )
    assert response.status_code == 404


def test_valid_api_key_resolves_user(client, make_user):
    user = make_user("bob")
    response = client.get("/v1/users", headers=auth(user))
    assert response.status_code == 200
    assert response.json()["id"] == user["id"]
