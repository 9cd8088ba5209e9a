"""
Top‑level package for the Museum Management API.

This file makes ``museum_api`` a Python package so that modules within
``app`` can be imported using fully qualified names like
``museum_api.app.main``.  The package provides no public exports; all
functionality lives in submodules under ``app``.
"""

__all__ = []
