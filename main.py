import logging
from typing import Optional

from fastapi import FastAPI
from url_shortener.config import settings
from url_shortener.dependencies import build_shortener
from url_shortener.events import ALL_EVENTS, log_event
from url_shortener.api.v1 import urls
from url_shortener.api.v1.redirect import build_redirect_router
from url_shortener.services.shortener import UrlShortener


logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)


def create_app(shortener: Optional[UrlShortener] = None) -> FastAPI:
    """
    Create the FastAPI app around a UrlShortener.

    Args:
        shortener: Instance to serve; built from settings when omitted
    """
    if shortener is None:
        shortener = build_shortener()
    shortener.on(ALL_EVENTS, log_event)

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="A URL shortener service built with FastAPI",
        debug=settings.debug
    )
    app.state.shortener = shortener

    @app.get("/")
    def read_root():
        """Root endpoint with API information"""
        return {
            "message": f"Welcome to {settings.app_name}",
            "version": settings.app_version,
            "docs": "/docs",
            "redoc": "/redoc"
        }

    @app.get("/health")
    def health_check():
        """Health check endpoint"""
        return {"status": "healthy", "environment": settings.environment}

    ######## Include routers
    app.include_router(urls.router, prefix="/api/v1")
    app.include_router(build_redirect_router(shortener.config.short_url_path))

    return app


app = create_app()
