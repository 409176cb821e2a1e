"""
Version 1 of the API.

Album routes are served at the root (``/albums``) rather than under a
version prefix so existing clients keep working.
"""
