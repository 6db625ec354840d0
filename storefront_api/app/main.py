"""
Main entrypoint for the Storefront API.

This module assembles the FastAPI application, sets up logging and
includes the versioned router.  The ``create_app`` function builds
and configures the app, which is then instantiated at module
import time as ``app``.  Run it with uvicorn or another ASGI server,
e.g.::

    uvicorn storefront_api.app.main:app --reload

The in‑memory ``Store`` and the ``CompletionClient`` are attached to
``app.state`` so that each application (and each test) owns its data.
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .core.completion import CompletionClient
from .core.config import settings
from .core.logging_config import setup_logging
from .core.seed import seed_store
from .core.store import Store
from .api.v1.router import router as v1_router


logger = logging.getLogger(__name__)


def register_exception_handlers(app: FastAPI) -> None:
    """Map validation and domain errors to 400 and anything else to 500."""

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": "Invalid input", "errors": jsonable_encoder(exc.errors())},
        )

    # Covers pydantic's ValidationError as well as InvalidQuantityError
    # and DuplicateUserError.
    @app.exception_handler(ValueError)
    async def value_error_handler(request: Request, exc: ValueError) -> JSONResponse:
        logger.info("Rejected %s %s: %s", request.method, request.url.path, exc)
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": str(exc)})

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "Internal server error"},
        )


def create_app(store: Optional[Store] = None, completion: Optional[CompletionClient] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    store : Optional[Store]
        Store to serve.  When omitted a fresh store is created and,
        if ``settings.seed_data`` is true, seeded with the demo catalog.
    completion : Optional[CompletionClient]
        Text‑completion collaborator.  Defaults to an OpenAI backed
        client configured from settings.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)

    if store is None:
        store = Store()
        if settings.seed_data:
            seed_store(store)
    app.state.store = store
    app.state.completion = completion if completion is not None else CompletionClient()

    register_exception_handlers(app)
    app.include_router(v1_router, prefix="/api")
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
