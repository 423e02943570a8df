"""
Tests for the frontend API client.
"""

import pytest
from unittest.mock import patch, MagicMock

from portfolio.frontend.api_client import ApiClient, ApiError


def api_response(status_code=200, data=None):
    response = MagicMock()
    response.status_code = status_code
    response.json.return_value = data if data is not None else {}
    response.text = str(data)
    return response


@pytest.fixture
def mock_request():
    with patch("portfolio.frontend.api_client.requests.request") as mock:
        yield mock


def test_login_keeps_token(mock_request):
    mock_request.return_value = api_response(data={"token": "abc"})
    client = ApiClient("http://api.test")

    assert client.login("pw") == "abc"
    assert client.is_authenticated

    method, url = mock_request.call_args.args
    assert (method, url) == ("POST", "http://api.test/api/v1/auth")
    assert mock_request.call_args.kwargs["json"] == {"password": "pw"}


def test_requests_carry_bearer_token(mock_request):
    mock_request.return_value = api_response(data=[])
    client = ApiClient("http://api.test", token="abc")

    client.list_blogs(include_drafts=True)

    kwargs = mock_request.call_args.kwargs
    assert kwargs["headers"] == {"Authorization": "Bearer abc"}
    assert kwargs["params"] == {"all": "true"}


def test_error_detail_raised(mock_request):
    mock_request.return_value = api_response(409, {"detail": "A blog with this slug already exists"})
    client = ApiClient("http://api.test", token="abc")

    with pytest.raises(ApiError) as exc_info:
        client.create_blog({"title": "t"})

    assert exc_info.value.status_code == 409
    assert exc_info.value.detail == "A blog with this slug already exists"


def test_get_missing_blog_returns_none(mock_request):
    mock_request.return_value = api_response(404, {"detail": "Blog not found"})

    assert ApiClient("http://api.test").get_blog("missing") is None


def test_verify_clears_expired_token(mock_request):
    mock_request.return_value = api_response(401, {"detail": "Unauthorized"})
    client = ApiClient("http://api.test", token="stale")

    assert client.verify() is False
    assert client.token is None


def test_logout_forgets_token(mock_request):
    mock_request.return_value = api_response(data={"message": "Logged out"})
    client = ApiClient("http://api.test", token="abc")

    client.logout()

    assert not client.is_authenticated
