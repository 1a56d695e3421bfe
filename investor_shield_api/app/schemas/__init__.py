"""
Pydantic schema definitions for API payloads.

Each domain (users, advisors, trading apps, reviews) defines its own
request and response models.  Schemas are separate from the store
records so the wire format (camelCase JSON) is decoupled from the
Python field names.
"""
