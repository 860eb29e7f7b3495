import logging

from fastapi import APIRouter, Depends, HTTPException, status
from url_shortener.schemas.url import URLCreate, URLExpansion, URLResponse
from url_shortener.services.shortener import UrlShortener
from url_shortener.dependencies import get_shortener
from url_shortener.exceptions import ConfigurationError, DuplicateKeyError

router = APIRouter(prefix="/urls", tags=["urls"])

logger = logging.getLogger(__name__)


@router.post("/", response_model=URLResponse, status_code=status.HTTP_201_CREATED)
def create_short_url(
    url_data: URLCreate,
    shortener: UrlShortener = Depends(get_shortener)
):
    """Create a new short URL, optionally under a caller chosen alias"""
    long_url = url_data.long_url
    try:
        short_url = shortener.shorten(long_url, url_data.alias)
    except DuplicateKeyError as e:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=f"Alias '{e.key}' is already taken"
        )
    except ConfigurationError as e:
        logger.error("Shortener misconfigured: %s", e)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e)
        )

    alias = short_url.rsplit("/", 1)[-1]
    return URLResponse(long_url=long_url, alias=alias, short_url=short_url)


@router.get("/{alias}", response_model=URLExpansion)
def get_url_info(
    alias: str,
    shortener: UrlShortener = Depends(get_shortener)
):
    """Get the long URL behind an alias without redirecting"""
    long_url = shortener.expand_by_alias(alias)
    if long_url is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Short URL not found"
        )
    return URLExpansion(alias=alias, long_url=long_url)
