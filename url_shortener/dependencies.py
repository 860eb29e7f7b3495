"""
FastAPI dependencies for dependency injection.

The UrlShortener is built once by the application factory and stored on
app.state; routes receive it through get_shortener. Tests (or another
host application) inject their own instance via create_app(shortener=...).
"""

from fastapi import Request

from url_shortener.config import Settings, settings
from url_shortener.services.shortener import UrlShortener


def build_shortener(app_settings: Settings = settings, **overrides) -> UrlShortener:
    """
    Construct a UrlShortener from settings.

    The data provider and hash generator named in the settings are resolved
    here, so a misconfiguration fails at startup, not on the first request.
    """
    return UrlShortener(
        app_settings.shortener_config(**overrides),
        app_base_url=app_settings.app_full_base_url,
    )


def get_shortener(request: Request) -> UrlShortener:
    """Get the UrlShortener the application was created with"""
    return request.app.state.shortener
