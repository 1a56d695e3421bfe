import pytest

from investor_shield_api.app.core.config import settings
from investor_shield_api.app.core.security import create_access_token

from .conftest import API, register


# ---------------------------------------------------------------------------
# Authentication
# ---------------------------------------------------------------------------

def test_register_returns_user_and_token(client):
    body = register(client)
    assert body["user"]["email"] == "asha@investors.in"
    assert body["user"]["name"] == "Asha Verma"
    assert "password" not in body["user"]
    assert body["token"]
    assert body["tokenType"] == "bearer"


def test_duplicate_registration_is_rejected(client):
    register(client)
    response = client.post(
        f"{API}/auth/register",
        json={"email": "asha@investors.in", "password": "another1", "name": "Other"},
    )
    assert response.status_code == 400
    assert response.json()["detail"] == "User already exists"


def test_registration_validation(client):
    response = client.post(
        f"{API}/auth/register",
        json={"email": "not-an-email", "password": "123", "name": ""},
    )
    assert response.status_code == 422


def test_login(client):
    register(client)
    ok = client.post(f"{API}/auth/login", json={"email": "asha@investors.in", "password": "secret123"})
    assert ok.status_code == 200
    assert ok.json()["user"]["name"] == "Asha Verma"

    bad = client.post(f"{API}/auth/login", json={"email": "asha@investors.in", "password": "wrong-pass"})
    assert bad.status_code == 401
    assert bad.json()["detail"] == "Invalid credentials"

    unknown = client.post(f"{API}/auth/login", json={"email": "nobody@investors.in", "password": "secret123"})
    assert unknown.status_code == 401


def test_me(client, auth):
    user, headers = auth
    response = client.get(f"{API}/auth/me", headers=headers)
    assert response.status_code == 200
    assert response.json() == user


@pytest.mark.parametrize(
    "method, path",
    [
        ("post", "/verify-advisor"),
        ("post", "/check-app"),
        ("post", "/add-review"),
        ("get", "/recent-reviews"),
        ("get", "/top-rated-advisors"),
        ("get", "/legitimate-apps"),
        ("get", "/recent-advisors"),
    ],
)
def test_routes_require_token(client, method, path):
    response = getattr(client, method)(f"{API}{path}")
    assert response.status_code == 401


def test_invalid_and_orphaned_tokens(client):
    bad = client.get(f"{API}/legitimate-apps", headers={"Authorization": "Bearer junk"})
    assert bad.status_code == 401
    orphan = create_access_token({"sub": "user-from-previous-run"})
    response = client.get(f"{API}/legitimate-apps", headers={"Authorization": f"Bearer {orphan}"})
    assert response.status_code == 401
    assert response.json()["detail"] == "User no longer exists"


# ---------------------------------------------------------------------------
# Advisors
# ---------------------------------------------------------------------------

def test_verify_known_advisor(client, headers):
    response = client.post(f"{API}/verify-advisor", json={"name": "Rajesh Kumar"}, headers=headers)
    assert response.status_code == 200
    body = response.json()
    assert body["found"] is True
    assert body["advisor"]["trustScore"] == 85
    assert body["advisor"]["complaintsCount"] == 1
    assert body["advisor"]["regNumber"] == "INH200001234"
    assert body["reviews"] == 2
    assert body["avgRating"] == 4.5


def test_verify_by_registration_number(client, headers):
    response = client.post(
        f"{API}/verify-advisor",
        json={"name": "Does Not Match", "regNumber": "INH200005678"},
        headers=headers,
    )
    body = response.json()
    assert body["found"] is True
    assert body["advisor"]["name"] == "Dr. Priya Sharma"
    assert body["reviews"] == 0
    assert body["avgRating"] == 0


def test_verify_unknown_advisor(client, headers):
    response = client.post(f"{API}/verify-advisor", json={"name": "Nobody"}, headers=headers)
    assert response.status_code == 200
    assert response.json() == {"found": False, "message": "Advisor not found in SEBI database"}


def test_verify_requires_name(client, headers):
    response = client.post(f"{API}/verify-advisor", json={"name": "  "}, headers=headers)
    assert response.status_code == 422


def test_recent_advisors(client, headers):
    response = client.get(f"{API}/recent-advisors", params={"limit": 2}, headers=headers)
    names = [a["name"] for a in response.json()["advisors"]]
    assert names == ["Rajesh Kumar", "Dr. Priya Sharma"]


def test_top_rated_advisors(client, headers):
    response = client.get(f"{API}/top-rated-advisors", headers=headers)
    advisors = response.json()["advisors"]
    assert len(advisors) == 1
    assert advisors[0]["name"] == "Rajesh Kumar"
    assert advisors[0]["avgRating"] == 4.5
    assert advisors[0]["reviewCount"] == 2


def test_get_advisor(client, headers, store):
    advisor = store.advisors.all()[1]
    response = client.get(f"{API}/advisors/{advisor.id}", headers=headers)
    assert response.json()["name"] == "Dr. Priya Sharma"
    assert client.get(f"{API}/advisors/missing", headers=headers).status_code == 404


def test_create_advisor_requires_admin(client, headers, monkeypatch):
    monkeypatch.setattr(settings, "admin_token", "admin-secret")
    payload = {"name": "Neha Gupta", "regNumber": "INH200004321", "isRegistered": True, "trustScore": 70}

    assert client.post(f"{API}/advisors", json=payload).status_code == 401
    assert client.post(f"{API}/advisors", json=payload, headers=headers).status_code == 403

    admin = {"Authorization": "Bearer admin-secret"}
    created = client.post(f"{API}/advisors", json=payload, headers=admin)
    assert created.status_code == 201
    assert created.json()["trustScore"] == 70

    duplicate = client.post(f"{API}/advisors", json=payload, headers=admin)
    assert duplicate.status_code == 400

    found = client.post(f"{API}/verify-advisor", json={"name": "neha"}, headers=headers)
    assert found.json()["advisor"]["id"] == created.json()["id"]


def test_admin_routes_disabled_without_token(client, monkeypatch):
    monkeypatch.setattr(settings, "admin_token", "")
    response = client.post(
        f"{API}/advisors", json={"name": "X"}, headers={"Authorization": "Bearer "}
    )
    assert response.status_code in (401, 403)


# ---------------------------------------------------------------------------
# Apps
# ---------------------------------------------------------------------------

def test_check_legitimate_app(client, headers):
    response = client.post(f"{API}/check-app", json={"appName": "Upstox"}, headers=headers)
    body = response.json()
    assert body["status"] == "legitimate"
    assert body["riskFactors"] == []
    assert body["app"]["developer"] == "RKSV Securities India Pvt Ltd"


def test_check_seeded_suspicious_app(client, headers):
    response = client.post(f"{API}/check-app", json={"appName": "quicktrade"}, headers=headers)
    body = response.json()
    assert body["status"] == "suspicious"
    assert len(body["riskFactors"]) == 3
    assert body["recommendation"].startswith("⚠️ Do not use this app")


def test_check_unknown_app_is_stable(client, headers, store):
    first = client.post(
        f"{API}/check-app",
        json={"appName": "UnknownXYZ", "url": "https://unknownxyz.example"},
        headers=headers,
    ).json()
    assert first["status"] == "suspicious"
    assert first["app"]["isLegit"] is False
    assert first["riskFactors"] == [
        "App not found in verified database",
        "Unknown developer",
        "No regulatory registration found",
    ]
    second = client.post(f"{API}/check-app", json={"appName": "UnknownXYZ", "url": ""}, headers=headers).json()
    assert second["app"]["id"] == first["app"]["id"]
    assert len(store.apps) == 4


def test_check_app_rejects_bad_url(client, headers):
    response = client.post(f"{API}/check-app", json={"appName": "X", "url": "not a url"}, headers=headers)
    assert response.status_code == 422


def test_legitimate_apps(client, headers):
    response = client.get(f"{API}/legitimate-apps", headers=headers)
    apps = response.json()["apps"]
    assert [a["appName"] for a in apps] == ["Zerodha", "Upstox"]
    assert all(a["isLegit"] for a in apps)


def test_get_app(client, headers, store):
    app = store.apps.all()[0]
    assert client.get(f"{API}/apps/{app.id}", headers=headers).json()["appName"] == "QuickTrade Pro"
    assert client.get(f"{API}/apps/missing", headers=headers).status_code == 404


# ---------------------------------------------------------------------------
# Reviews
# ---------------------------------------------------------------------------

def _rajesh(store):
    return store.advisors.all()[0]


def test_add_review_then_recent(client, auth, store):
    user, headers = auth
    advisor = _rajesh(store)
    response = client.post(
        f"{API}/add-review",
        json={"advisorId": advisor.id, "rating": 5, "comment": "  Clear and honest advice.  "},
        headers=headers,
    )
    assert response.status_code == 201
    body = response.json()
    assert body["message"] == "Review added successfully"
    review = body["review"]
    assert review["userId"] == user["id"]
    assert review["isVerified"] is False
    assert review["comment"] == "Clear and honest advice."

    recent = client.get(f"{API}/recent-reviews", params={"limit": 1}, headers=headers).json()["reviews"]
    assert len(recent) == 1
    assert recent[0]["id"] == review["id"]
    assert recent[0]["advisorName"] == "Rajesh Kumar"
    assert recent[0]["userName"] == "Asha Verma"


def test_seeded_reviews_show_anonymous_authors(client, headers):
    recent = client.get(f"{API}/recent-reviews", headers=headers).json()["reviews"]
    assert len(recent) == 2
    assert {r["userName"] for r in recent} == {"Anonymous"}


@pytest.mark.parametrize("rating", [0, 6])
def test_rating_out_of_range(client, headers, store, rating):
    response = client.post(
        f"{API}/add-review",
        json={"advisorId": _rajesh(store).id, "rating": rating, "comment": "text"},
        headers=headers,
    )
    assert response.status_code == 422


def test_review_requires_comment(client, headers, store):
    response = client.post(
        f"{API}/add-review",
        json={"advisorId": _rajesh(store).id, "rating": 3, "comment": "   "},
        headers=headers,
    )
    assert response.status_code == 422


def test_reviews_by_advisor(client, headers, store):
    advisor = _rajesh(store)
    reviews = client.get(f"{API}/reviews/{advisor.id}", headers=headers).json()["reviews"]
    assert [r["rating"] for r in reviews] == [4, 5]
    assert client.get(f"{API}/reviews/unknown", headers=headers).json() == {"reviews": []}


def test_review_updates_verification_summary(client, headers, store):
    priya = store.advisors.all()[1]
    for rating in (3, 4):
        client.post(
            f"{API}/add-review",
            json={"advisorId": priya.id, "rating": rating, "comment": "fine"},
            headers=headers,
        )
    body = client.post(f"{API}/verify-advisor", json={"name": "Priya"}, headers=headers).json()
    assert body["reviews"] == 2
    assert body["avgRating"] == 3.5


def test_get_review_detail(client, headers, store):
    review = store.reviews.all()[0]
    body = client.get(f"{API}/reviews/{review.id}/detail", headers=headers).json()
    assert body["rating"] == 4
    assert client.get(f"{API}/reviews/missing/detail", headers=headers).status_code == 404


def test_read_failure_is_reported_generically(client, headers, monkeypatch):
    from investor_shield_api.app.services.aggregation_service import AggregationService

    async def boom(cls, store, limit):
        raise RuntimeError("store unavailable")

    monkeypatch.setattr(AggregationService, "recent_reviews", classmethod(boom))
    response = client.get(f"{API}/recent-reviews", headers=headers)
    assert response.status_code == 500
    assert response.json()["detail"] == "Failed to fetch reviews"


def test_review_comment_is_returned_as_written(client, headers, store):
    text = "Don't trust \"guaranteed\" returns & tips"
    advisor = _rajesh(store)
    created = client.post(
        f"{API}/add-review",
        json={"advisorId": advisor.id, "rating": 2, "comment": text},
        headers=headers,
    ).json()["review"]
    assert created["comment"] == text

    recent = client.get(f"{API}/recent-reviews", params={"limit": 1}, headers=headers).json()["reviews"][0]
    assert recent["comment"] == text
    by_advisor = client.get(f"{API}/reviews/{advisor.id}", headers=headers).json()["reviews"]
    assert by_advisor[-1]["comment"] == text
    detail = client.get(f"{API}/reviews/{created['id']}/detail", headers=headers).json()
    assert detail["comment"] == text


def test_lookup_failures_are_reported_generically(client, headers, monkeypatch):
    from investor_shield_api.app.services.lookup_service import LookupService

    async def boom(cls, *args, **kwargs):
        raise RuntimeError("store unavailable")

    monkeypatch.setattr(LookupService, "find_advisor", classmethod(boom))
    monkeypatch.setattr(LookupService, "find_app", classmethod(boom))

    verify = client.post(f"{API}/verify-advisor", json={"name": "Rajesh"}, headers=headers)
    assert verify.status_code == 500
    assert verify.json()["detail"] == "Failed to verify advisor"

    check = client.post(f"{API}/check-app", json={"appName": "Zerodha"}, headers=headers)
    assert check.status_code == 500
    assert check.json()["detail"] == "Failed to check app"
