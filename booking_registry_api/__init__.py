"""
Top-level package for the Booking Registry API.

The HTTP service lives in the ``app`` subpackage
(``booking_registry_api.app.main:app``); ``client`` holds a small
``requests`` based client for talking to a running instance.
"""

__all__ = []
