from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, status, Request
from fastapi.responses import RedirectResponse
from url_shortener.services.shortener import UrlShortener
from url_shortener.dependencies import get_shortener
from url_shortener.schemas.url import ALIAS_RE


def build_redirect_router(short_url_path: Optional[str] = None) -> APIRouter:
    """
    Router for GET /{short_url_path}/{alias} (or /{alias} without a prefix).

    Built per application because the prefix comes from configuration.
    Include it last: without a prefix the route matches any single segment.
    """
    prefix = f"/{short_url_path.strip('/')}" if short_url_path else ""
    router = APIRouter(prefix=prefix, tags=["redirect"])

    @router.get("/{alias}")
    def redirect_to_long_url(
        alias: str,
        request: Request,
        shortener: UrlShortener = Depends(get_shortener)
    ):
        """
        Redirect to the original URL.

        The raw request path goes to expand_by_path so listeners see what
        the client actually asked for.
        """
        if not ALIAS_RE.fullmatch(alias):
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Short URL not found"
            )

        long_url = shortener.expand_by_path(request.url.path)

        if long_url is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Short URL not found"
            )

        return RedirectResponse(url=long_url, status_code=status.HTTP_302_FOUND)

    return router
