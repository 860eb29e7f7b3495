import re

from pydantic import BaseModel, HttpUrl, Field, TypeAdapter, ValidationError, field_validator
from typing import Optional

# Aliases served over HTTP are ASCII letters only, like generated ones
ALIAS_PATTERN = r"^[A-Za-z]+$"
ALIAS_RE = re.compile(ALIAS_PATTERN)

_http_url = TypeAdapter(HttpUrl)


class URLBase(BaseModel):
    long_url: str = Field(..., description="The original URL to be shortened")

    @field_validator("long_url")
    @classmethod
    def check_http_url(cls, value: str) -> str:
        """Validate as an http(s) URL but keep the caller's exact string"""
        try:
            _http_url.validate_python(value)
        except ValidationError as e:
            raise ValueError(f"Invalid URL: {e.errors()[0]['msg']}") from None
        return value


class URLCreate(URLBase):
    alias: Optional[str] = Field(
        None,
        min_length=1,
        max_length=64,
        pattern=ALIAS_PATTERN,
        description="Use this alias instead of a generated one",
    )


class URLResponse(BaseModel):
    """Response of a successful shorten call"""
    long_url: str
    alias: str
    short_url: str


class URLExpansion(BaseModel):
    alias: str
    long_url: str
