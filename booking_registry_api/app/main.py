"""
Main entrypoint for the Booking Registry API.

This module assembles the FastAPI application, sets up logging,
creates the booking store and includes the API router.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``.  Importing the app here
makes it easy to run with uvicorn or another ASGI server, e.g.::

    uvicorn booking_registry_api.app.main:app --reload

The application title and version are provided via ``Settings`` from
``core.config``.
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from .api.v1.router import router as api_router
from .core.config import Settings, settings as default_settings
from .core.errors import BookingRegistryError
from .core.logging_config import setup_logging
from .core.seed import seed_store
from .core.store import BookingStore

logger = logging.getLogger(__name__)


async def booking_registry_error_handler(request: Request, exc: BookingRegistryError) -> JSONResponse:
    logger.warning(
        "%s %s rejected with %s: %s",
        request.method,
        request.url.path,
        exc.status_code,
        exc.message,
    )
    return JSONResponse(status_code=exc.status_code, content=exc.to_body())


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(BookingRegistryError, booking_registry_error_handler)


def create_app(settings: Optional[Settings] = None, store: Optional[BookingStore] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use.  Defaults to the module level settings
        read from the environment.
    store : Optional[BookingStore]
        Store to serve.  When omitted a new store is created and, if
        ``settings.seed_bookings`` is true, filled with the demo
        bookings.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)
    app.state.settings = settings

    if store is None:
        store = BookingStore()
        if settings.seed_bookings:
            seed_store(store)
    app.state.store = store

    register_exception_handlers(app)
    app.include_router(api_router, prefix="/api")

    @app.on_event("startup")
    async def startup_event() -> None:
        logger.info(
            "%s running at http://localhost:%s",
            settings.project_name,
            settings.port,
        )

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
