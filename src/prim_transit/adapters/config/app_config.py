"""12-factor configuration adapter using environment variables."""

import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # PRIM API configuration
    prim_api_key: str = Field(default="", description="PRIM marketplace API key")
    prim_base_url: str = Field(
        default="https://prim.iledefrance-mobilites.fr/marketplace",
        description="Base URL of the PRIM marketplace, without trailing slash",
    )
    prim_api_timeout: float = Field(
        default=10.0, description="Timeout for PRIM API requests in seconds"
    )

    # Request sizes
    traffic_report_count: int = Field(
        default=100, description="Number of line reports requested from Navitia"
    )
    line_stops_count: int = Field(
        default=500, description="Number of stop points requested per line"
    )
    search_count: int = Field(default=20, description="Number of places requested per search")
    search_result_limit: int = Field(
        default=10, description="Maximum number of search results returned"
    )
    bulk_max_stops: int = Field(
        default=10, description="Maximum number of stops per bulk passages request"
    )

    # Logging
    log_level: str = Field(default="INFO", description="Log level (DEBUG, INFO, WARNING, ERROR)")

    @field_validator("prim_base_url")
    @classmethod
    def validate_prim_base_url(cls, v: str) -> str:
        """Strip trailing slashes so endpoint paths can be appended."""
        v = v.strip().rstrip("/")
        if not v.startswith(("http://", "https://")):
            raise ValueError("prim_base_url must be an http(s) URL")
        return v

    @field_validator("prim_api_timeout")
    @classmethod
    def validate_prim_api_timeout(cls, v: float) -> float:
        """Validate timeout is positive."""
        if v <= 0:
            raise ValueError("prim_api_timeout must be greater than 0")
        return v

    @field_validator(
        "traffic_report_count",
        "line_stops_count",
        "search_count",
        "search_result_limit",
        "bulk_max_stops",
    )
    @classmethod
    def validate_positive_count(cls, v: int) -> int:
        """Validate request sizes are at least 1."""
        if v < 1:
            raise ValueError("counts and limits must be at least 1")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a standard logging level name."""
        level = v.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError("log_level must be one of DEBUG, INFO, WARNING, ERROR, CRITICAL")
        return level
