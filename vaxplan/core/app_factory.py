"""
Application factory for FastAPI.

Builds the VaxPlan application: middleware, exception handlers, the
versioned API router and the health endpoint.
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from vaxplan.api.exception_handlers import register_exception_handlers
from vaxplan.api.middleware.logging_middleware import RequestLoggingMiddleware
from vaxplan.api.router import api_router
from vaxplan.config.settings import Settings, get_settings

logger = logging.getLogger(__name__)


class AppFactory:
    """
    Factory for creating and configuring FastAPI applications.

    Each configuration step is handled by a dedicated method.
    """

    def __init__(self, settings: Settings | None = None) -> None:
        """
        Initialize app factory.

        Args:
            settings: Application settings (uses default if not provided)
        """
        self._settings = settings or get_settings()

    def create_app(self) -> FastAPI:
        """
        Create and configure the FastAPI application.

        Returns:
            Configured FastAPI application instance.
        """
        app = self._create_base_app()

        self._configure_middleware(app)
        self._configure_exception_handlers(app)
        self._configure_routes(app)
        self._configure_health_endpoint(app)

        logger.info(f"Application created: {self._settings.PROJECT_NAME}")
        return app

    def _create_base_app(self) -> FastAPI:
        return FastAPI(
            title=self._settings.PROJECT_NAME,
            description=self._settings.PROJECT_DESCRIPTION,
            version=self._settings.VERSION,
            docs_url=f"{self._settings.API_V1_STR}/docs" if self._settings.DEBUG else None,
            redoc_url=f"{self._settings.API_V1_STR}/redoc" if self._settings.DEBUG else None,
        )

    def _configure_middleware(self, app: FastAPI) -> None:
        """
        Configure application middleware.

        Added last runs first: request logging wraps the app, CORS wraps logging.
        """
        app.add_middleware(RequestLoggingMiddleware)

        app.add_middleware(
            CORSMiddleware,
            allow_origins=self._get_cors_origins(),
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

        logger.info("Middleware configured")

    def _configure_exception_handlers(self, app: FastAPI) -> None:
        register_exception_handlers(app)

    def _configure_routes(self, app: FastAPI) -> None:
        app.include_router(api_router, prefix=self._settings.API_V1_STR)
        logger.info("Routes configured")

    def _configure_health_endpoint(self, app: FastAPI) -> None:
        """Add health check endpoint."""

        @app.get("/health", tags=["health"])
        async def health_check() -> dict[str, str]:
            """
            Verify application health status.

            Returns basic status, version and environment information.
            """
            return {
                "status": "ok",
                "version": self._settings.VERSION,
                "environment": self._settings.ENVIRONMENT,
            }

    def _get_cors_origins(self) -> list[str]:
        """Any origin in debug mode, the configured list otherwise."""
        if self._settings.DEBUG:
            return ["*"]
        return self._settings.cors_origins_list


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Create FastAPI application using the factory.

    Args:
        settings: Optional settings override

    Returns:
        Configured FastAPI application
    """
    factory = AppFactory(settings)
    return factory.create_app()
