"""
Application package initializer.

This package contains the main entrypoint for the API and all of its
submodules: configuration, logging, errors and the in-memory store in
``core``, Pydantic models in ``schemas``, business logic in
``services`` and HTTP routes under ``api``.
"""

from .main import app  # noqa: F401
