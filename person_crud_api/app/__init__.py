"""
Application package initializer.

The application is organised in three layers: HTTP routes live in
``api/endpoints``, business rules in ``services`` and persistence in
``repositories``.  Request and response payloads are described by the
Pydantic models in ``schemas``.
"""

from .main import app  # noqa: F401
