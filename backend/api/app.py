"""
FastAPI application factory.

Creates and configures the FastAPI application instance.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from shared.config import get_settings
from shared.exceptions import CartwiseError
from .routes import health, users
from modules.lists.routes import router as lists_router, items_router
from modules.sharing.routes import router as shares_router, invites_router
from modules.notifications.routes import router as notifications_router
from modules.profiles.routes import router as profile_router
from modules.suggestions.routes import router as ai_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Runs startup and shutdown logic.
    """
    # Startup
    settings = get_settings()
    logger.info(f"Starting {settings.app_name} on {settings.host}:{settings.port}")
    yield
    # Shutdown
    logger.info(f"Shutting down {settings.app_name}")


async def cartwise_error_handler(request: Request, exc: CartwiseError) -> JSONResponse:
    """Translate domain errors into JSON responses with the error's status code."""
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.code}: {exc.message}")
    else:
        logger.info(f"{request.method} {request.url.path} -> {exc.status_code} {exc.code}")
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%SZ",
    )


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI instance
    """
    settings = get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title=settings.app_name,
        description="Collaborative shopping lists with sharing, notifications and AI suggestions",
        version=settings.app_version,
        lifespan=lifespan,
        docs_url="/api/docs" if settings.debug else None,
        redoc_url="/api/redoc" if settings.debug else None,
    )

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    app.add_exception_handler(CartwiseError, cartwise_error_handler)

    # Register routes
    app.include_router(health.router, prefix="/api", tags=["health"])
    app.include_router(users.router, prefix="/api/users", tags=["users"])
    app.include_router(lists_router, prefix="/api/lists", tags=["lists"])
    app.include_router(items_router, prefix="/api/items", tags=["lists"])
    app.include_router(shares_router, prefix="/api/lists", tags=["sharing"])
    app.include_router(invites_router, prefix="/api/invites", tags=["sharing"])
    app.include_router(notifications_router, prefix="/api/notifications", tags=["notifications"])
    app.include_router(profile_router, prefix="/api/profile", tags=["profile"])
    app.include_router(ai_router, prefix="/api/ai", tags=["ai"])

    return app


# Application instance for uvicorn
app = create_app()
