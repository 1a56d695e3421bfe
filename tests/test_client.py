from unittest.mock import MagicMock

import requests

from investor_shield_client import InvestorShieldClient


def _response(status_code=200, json_body=None):
    response = MagicMock()
    response.status_code = status_code
    response.content = b"{}" if json_body is not None else b""
    response.json.return_value = json_body
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.HTTPError(response=response)
    else:
        response.raise_for_status.return_value = None
    return response


def _client(*responses):
    session = MagicMock()
    session.request.side_effect = list(responses)
    return InvestorShieldClient(base_url="http://api.local/", session=session), session


def test_login_stores_token_for_later_calls():
    client, session = _client(
        _response(json_body={"user": {"id": "u1", "name": "Asha"}, "token": "tok"}),
        _response(json_body={"found": False, "message": "Advisor not found in SEBI database"}),
    )
    user, error = client.login("asha@investors.in", "secret123")
    assert error is None
    assert user == {"id": "u1", "name": "Asha"}
    assert client.token == "tok"

    data, error = client.verify_advisor("Nobody", reg_number="INH1")
    assert data["found"] is False
    kwargs = session.request.call_args.kwargs
    assert kwargs["url"] == "http://api.local/api/v1/verify-advisor"
    assert kwargs["json"] == {"name": "Nobody", "regNumber": "INH1"}
    assert kwargs["headers"] == {"Authorization": "Bearer tok"}


def test_http_error_is_reported():
    client, _ = _client(_response(status_code=401, json_body={"detail": "Invalid credentials"}))
    user, error = client.login("asha@investors.in", "wrong-pass")
    assert user is None
    assert error == {"status_code": 401, "message": "Invalid credentials"}
    assert client.token is None


def test_connection_error_is_reported():
    session = MagicMock()
    session.request.side_effect = requests.ConnectionError("refused")
    client = InvestorShieldClient(base_url="http://api.local", token="tok", session=session)
    reviews, error = client.recent_reviews()
    assert reviews == []
    assert error["status_code"] is None
    assert "refused" in error["message"]


def test_list_helpers_unwrap_payload():
    client, session = _client(_response(json_body={"apps": [{"appName": "Zerodha"}]}))
    apps, error = client.legitimate_apps()
    assert error is None
    assert apps == [{"appName": "Zerodha"}]
    assert session.request.call_args.kwargs["method"] == "GET"


def test_add_review_and_check_app_payloads():
    client, session = _client(
        _response(json_body={"review": {"id": "r1"}, "message": "Review added successfully"}),
        _response(json_body={"status": "suspicious"}),
    )
    review, error = client.add_review("a1", 5, "Great")
    assert review == {"id": "r1"}
    assert session.request.call_args.kwargs["json"] == {"advisorId": "a1", "rating": 5, "comment": "Great"}

    data, _ = client.check_app("UnknownXYZ")
    assert data["status"] == "suspicious"
    assert session.request.call_args.kwargs["json"] == {"appName": "UnknownXYZ"}


def test_empty_success_body_is_reported_as_error():
    client, _ = _client(_response(json_body=None), _response(json_body=None))
    user, error = client.register("asha@investors.in", "secret123", "Asha")
    assert user is None
    assert error["status_code"] is None
    assert "/auth/register" in error["message"]
    assert client.token is None

    review, error = client.add_review("a1", 4, "Helpful")
    assert review is None
    assert "/add-review" in error["message"]
