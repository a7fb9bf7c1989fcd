"""
Main entrypoint for the CarShop mock API.

This module assembles the FastAPI application: logging, CORS, error
handlers, the fixture store, the identity resolver and the API router.
The ``create_app`` function builds and configures the app, which is
then instantiated at module import time as ``app``.  Run it with
uvicorn, e.g.::

    uvicorn carshop_api.app.main:app --reload --port 3001

or simply ``python run.py``.
"""

import logging
from typing import Any, Dict, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.router import ENDPOINTS, router as api_router
from .core.config import Settings, settings as default_settings
from .core.errors import register_exception_handlers
from .core.fixtures import FixtureStore, build_fixture_store
from .core.logging_config import setup_logging
from .core.security import IDENTITY_HEADER, HeaderIdentityResolver, IdentityResolver
from .services.sink import AcknowledgingSink


logger = logging.getLogger(__name__)


def create_app(
    store: Optional[FixtureStore] = None,
    identity_resolver: Optional[IdentityResolver] = None,
    sink: Optional[AcknowledgingSink] = None,
    settings: Optional[Settings] = None,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    store : Optional[FixtureStore]
        Data served by the API.  Defaults to the demo fixtures.
    identity_resolver : Optional[IdentityResolver]
        Strategy mapping a request to a user.  Defaults to the
        ``x-user-email`` header lookup against ``store.users``.
    sink : Optional[AcknowledgingSink]
        Receiver of simulated creates.
    settings : Optional[Settings]
        Configuration; defaults to the environment‑driven settings.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)

    store = store or build_fixture_store()
    app.state.store = store
    app.state.identity_resolver = identity_resolver or HeaderIdentityResolver(store.users)
    app.state.sink = sink or AcknowledgingSink()

    # Only the configured front‑end may call the API from a browser.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.cors_origin],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)

    app.include_router(api_router, prefix="/api")

    @app.get("/", tags=["index"])
    async def index() -> Dict[str, Any]:
        """List the available endpoints and how to authenticate."""
        return {
            "service": settings.project_name,
            "version": settings.api_version,
            "identityHeader": IDENTITY_HEADER,
            "endpoints": [
                {"method": method, "path": path, "auth": auth} for method, path, auth in ENDPOINTS
            ],
        }

    @app.on_event("startup")
    async def startup_event() -> None:
        logger.info("%s running on port %s", settings.project_name, settings.port)
        logger.info("Available endpoints:")
        for method, path, auth in ENDPOINTS:
            logger.info("  %-6s %-28s (%s)", method, path, auth)
        logger.info("To simulate a logged-in user send the header %s: customer@carshop.com", IDENTITY_HEADER)

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
