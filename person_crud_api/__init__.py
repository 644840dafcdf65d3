"""
Top‑level package for the Person CRUD API.

This file makes ``person_crud_api`` a Python package so that modules
within ``app`` can be imported using fully qualified names like
``person_crud_api.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
