"""
Service layer abstraction.

The album store lives here, independent of FastAPI, so the same
object can be driven by route handlers and by tests.
"""
