"""Investor Shield API client.

A thin wrapper around the REST API for scripts and integrations that
need the same operations as the web client: registering and logging
in, verifying advisors, checking trading apps and reading or writing
reviews.  The client uses the ``requests`` library internally.

Every method returns a tuple ``(data, error)``.  On success ``data``
holds the decoded JSON body and ``error`` is ``None``; on failure
``data`` is ``None`` (or an empty list for listing methods) and
``error`` is a dictionary with ``status_code`` and ``message``.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Result = Tuple[Optional[Any], Optional[Dict[str, Any]]]


def _unexpected_body(path: str) -> Dict[str, Any]:
    logger.error("API request to %s returned no JSON object", path)
    return {"status_code": None, "message": f"Unexpected response body from {path}"}


class InvestorShieldClient:
    """Client for the Investor Shield API (version 1 routes)."""

    def __init__(
        self,
        *,
        base_url: str,
        token: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Server root, e.g. ``http://localhost:8000``.  The
                ``/api/v1`` prefix is added by the client.
            token: Optional bearer token from a previous login.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/") + "/api/v1"
        self.token = token
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helper
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, params: Dict[str, Any] | None = None,
        json_body: Any | None = None
    ) -> Result:
        """Perform an HTTP request to the API and decode the JSON reply."""
        url = f"{self.base_url}{path}"
        headers: Dict[str, str] = {}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                params=params,
                json=json_body,
                headers=headers,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    message = err_json.get("detail") or err_json.get("message") or str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    def _list(self, path: str, key: str, params: Dict[str, Any] | None = None) -> Tuple[List[Dict[str, Any]], Optional[Dict[str, Any]]]:
        data, error = self._request("GET", path, params=params)
        if error:
            return [], error
        if isinstance(data, dict) and isinstance(data.get(key), list):
            return data[key], None
        return [], None

    # ------------------------------------------------------------------
    # Authentication
    # ------------------------------------------------------------------
    def _authenticate(self, path: str, payload: Dict[str, Any]) -> Result:
        data, error = self._request("POST", path, json_body=payload)
        if error:
            return None, error
        if not isinstance(data, dict):
            return None, _unexpected_body(path)
        self.token = data.get("token")
        return data.get("user"), None

    def register(self, email: str, password: str, name: str) -> Result:
        """Register a new account and keep its token for later calls."""
        return self._authenticate(
            "/auth/register", {"email": email, "password": password, "name": name}
        )

    def login(self, email: str, password: str) -> Result:
        """Log in and keep the returned token for later calls."""
        return self._authenticate("/auth/login", {"email": email, "password": password})

    # ------------------------------------------------------------------
    # Advisors and apps
    # ------------------------------------------------------------------
    def verify_advisor(self, name: str, reg_number: Optional[str] = None) -> Result:
        payload: Dict[str, Any] = {"name": name}
        if reg_number:
            payload["regNumber"] = reg_number
        return self._request("POST", "/verify-advisor", json_body=payload)

    def check_app(self, app_name: str, url: Optional[str] = None) -> Result:
        payload: Dict[str, Any] = {"appName": app_name}
        if url:
            payload["url"] = url
        return self._request("POST", "/check-app", json_body=payload)

    def recent_advisors(self, limit: int = 3):
        return self._list("/recent-advisors", "advisors", {"limit": limit})

    def top_rated_advisors(self, limit: int = 3):
        return self._list("/top-rated-advisors", "advisors", {"limit": limit})

    def legitimate_apps(self):
        return self._list("/legitimate-apps", "apps")

    # ------------------------------------------------------------------
    # Reviews
    # ------------------------------------------------------------------
    def add_review(self, advisor_id: str, rating: int, comment: str) -> Result:
        data, error = self._request(
            "POST",
            "/add-review",
            json_body={"advisorId": advisor_id, "rating": rating, "comment": comment},
        )
        if error:
            return None, error
        if not isinstance(data, dict):
            return None, _unexpected_body("/add-review")
        return data.get("review"), None

    def reviews_for_advisor(self, advisor_id: str):
        return self._list(f"/reviews/{advisor_id}", "reviews")

    def recent_reviews(self, limit: int = 10):
        return self._list("/recent-reviews", "reviews", {"limit": limit})
