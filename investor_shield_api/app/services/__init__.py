"""
Service layer abstraction.

Each service encapsulates business logic for a domain and operates on
a ``RecordStore`` passed in by the caller.  Handlers in
``api/v1/endpoints`` only translate between HTTP and these services.
"""
