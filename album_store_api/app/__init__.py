"""
Application package initializer.

This package contains the main entrypoint for the API and its
submodules: configuration and logging under ``core``, request and
response models under ``schemas``, the in‑memory album store under
``services`` and the HTTP routes under ``api/v1``.
"""

from .main import app  # noqa: F401
