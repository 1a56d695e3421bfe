"""
Top‑level package for the Investor Shield API.

Makes ``investor_shield_api`` importable so that modules within ``app``
can be referenced by fully qualified names such as
``investor_shield_api.app.main``.  All functionality lives in
submodules under ``app``.
"""

__all__ = []
