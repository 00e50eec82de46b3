"""
FastAPI application factory shared by every entry point
"""
import logging
from fastapi import FastAPI
from api.config import settings
from api.routers import signup


def create_app() -> FastAPI:
    """
    Build the ASGI app for the handle_signup function.

    The signup route answers every path, so the docs and OpenAPI
    routes are switched off to keep them from shadowing it.
    """
    logging.basicConfig(level=settings.log_level.upper())

    app = FastAPI(
        title=settings.app_name,
        description="Serverless handle_signup function",
        version=settings.app_version,
        debug=settings.debug,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )

    app.include_router(signup.router)
    return app
