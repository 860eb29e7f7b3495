from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Any, Optional


class ShortenerConfig(BaseModel):
    """
    Options of a single UrlShortener instance, resolved once at construction.

    Accepts both snake_case names and camelCase keys
    (dataProvider, urlLength, ...):

        ShortenerConfig(dataProvider="memory", baseUrl="https://s.test")
        ShortenerConfig(data_provider="memory", base_url="https://s.test")
    """

    # Data provider selector: instance, class, DataProviderBackend or its value
    data_provider: Any = Field(..., alias="dataProvider")
    url_length: int = Field(6, ge=1, alias="urlLength")
    retry_on_duplicate: bool = Field(False, alias="retryOnDuplicate")
    base_url: Optional[str] = Field(None, alias="baseUrl")
    short_url_path: Optional[str] = Field(None, alias="shortUrlPath")
    # HashGenerator instance, callable, HashGeneratorType or its value
    hash_generator: Any = Field(None, alias="hashGenerator")
    # None means retry until the backend accepts a candidate
    max_retries: Optional[int] = Field(5, ge=0, alias="maxRetries")

    model_config = ConfigDict(
        populate_by_name=True,
        arbitrary_types_allowed=True,
        frozen=True,
        extra="forbid",
    )

    @field_validator("short_url_path")
    @classmethod
    def strip_path_slashes(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        value = value.strip("/")
        return value or None


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Loading priority (highest to lowest):
    1. Environment variables
    2. .env file
    3. Default values below
    """

    # Environment
    environment: str = "development"
    debug: bool = True
    log_level: str = "INFO"

    # Application
    app_name: str = "URL Shortener"
    app_version: str = "1.0.0"
    # Fallback used when base_url is not set
    app_full_base_url: Optional[str] = "http://127.0.0.1:8000"

    # URL Shortener specific
    data_provider: str = "memory"  # Options: "memory", "redis", "sqlalchemy"
    url_length: int = 6
    retry_on_duplicate: bool = False
    max_retries: Optional[int] = 5  # "null" in the environment means no cap
    base_url: Optional[str] = None
    short_url_path: Optional[str] = None
    hash_generator: str = "sha512"  # Options: "sha512", "random"

    # Storage backends
    database_url: str = "sqlite:///./url_shortener.db"
    redis_url: str = "redis://localhost:6379/0"
    storage_ttl: Optional[int] = None  # Redis key TTL in seconds, None keeps keys forever

    # Pydantic v2 configuration
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        env_parse_none_str="null"
    )

    def shortener_config(self, **overrides) -> ShortenerConfig:
        """Build the ShortenerConfig described by these settings"""
        options = {
            "data_provider": self.data_provider,
            "url_length": self.url_length,
            "retry_on_duplicate": self.retry_on_duplicate,
            "max_retries": self.max_retries,
            "base_url": self.base_url,
            "short_url_path": self.short_url_path,
            "hash_generator": self.hash_generator,
        }
        options.update(overrides)
        return ShortenerConfig(**options)


# Create settings instance
settings = Settings()
