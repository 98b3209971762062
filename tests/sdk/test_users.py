"""Tests for SDK user and social graph functions."""

import pytest
from unittest.mock import patch

from peloton_client.sdk import users
from peloton_client.sdk.errors import NotAuthenticatedError


class TestRequiresLogin:
    @pytest.mark.parametrize("call", [
        lambda c: users.me(c),
        lambda c: users.user(c, "1"),
        lambda c: users.followers(c, "1"),
        lambda c: users.following(c, "1"),
    ])
    def test_no_network_before_login(self, client, call):
        with patch.object(client._session, "request") as mock_req:
            with pytest.raises(NotAuthenticatedError):
                call(client)
            mock_req.assert_not_called()


class TestMe:
    def test_returns_body(self, authed_client):
        with patch.object(authed_client, "get") as mock_get:
            mock_get.return_value = {"id": "42", "username": "rider"}
            assert users.me(authed_client)["username"] == "rider"
            mock_get.assert_called_once_with("/me", timeout=None)


class TestUser:
    def test_defaults_to_session_user(self, authed_client):
        with patch.object(authed_client, "get") as mock_get:
            mock_get.return_value = {"id": "42"}
            users.user(authed_client)
            mock_get.assert_called_once_with("/user/42", timeout=None)

    def test_explicit_user(self, authed_client):
        with patch.object(authed_client, "get") as mock_get:
            mock_get.return_value = {"id": "abc"}
            users.user(authed_client, user_id="abc")
            mock_get.assert_called_once_with("/user/abc", timeout=None)


class TestFollowers:
    def test_default_pagination(self, authed_client):
        with patch.object(authed_client, "get") as mock_get:
            mock_get.return_value = {"data": [], "total": 0}
            users.followers(authed_client)
            mock_get.assert_called_once_with(
                "/user/42/followers", params={"limit": 10, "page": 0}, timeout=None,
            )

    def test_custom_pagination(self, authed_client):
        with patch.object(authed_client, "get") as mock_get:
            mock_get.return_value = {"data": []}
            users.followers(authed_client, user_id="7", limit=50, page=3)
            mock_get.assert_called_once_with(
                "/user/7/followers", params={"limit": 50, "page": 3}, timeout=None,
            )


class TestFollowing:
    def test_default_pagination(self, authed_client):
        with patch.object(authed_client, "get") as mock_get:
            mock_get.return_value = {"data": [{"id": "9"}]}
            result = users.following(authed_client)
            assert result["data"][0]["id"] == "9"
            mock_get.assert_called_once_with(
                "/user/42/following", params={"limit": 10, "page": 0}, timeout=None,
            )

    def test_query_string_on_the_wire(self, stubbed_client, stub_transport):
        stubbed_client.set_session("peloton_session_id=t", user_id="42")
        stub_transport.add("GET", "/api/user/42/following", body={"data": []})

        users.following(stubbed_client, page=1)
        assert stub_transport.sent[-1].path_url == "/api/user/42/following?limit=10&page=1"


class TestPerCallTimeout:
    @pytest.mark.parametrize("fn", [users.me, users.user, users.followers, users.following])
    def test_reaches_transport(self, authed_client, fake_response, fn):
        with patch.object(authed_client._session, "request") as mock_req:
            mock_req.return_value = fake_response(body={})
            fn(authed_client, timeout=4)
            assert mock_req.call_args.kwargs["timeout"] == 4
