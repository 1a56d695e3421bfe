"""
Application package initializer.

The API is organised into small pieces: ``core`` holds configuration,
logging, security and the in‑memory record store; ``schemas`` holds
the Pydantic payloads; ``services`` holds the lookup, aggregation and
review logic; and ``api/v1/endpoints`` exposes one router per domain
(auth, advisors, apps, reviews).
"""

from .main import app, create_app  # noqa: F401
