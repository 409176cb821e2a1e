"""
Top‑level package for the Album Store API.

This file makes ``album_store_api`` a Python package so that modules
within ``app`` can be imported using fully qualified names like
``album_store_api.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
