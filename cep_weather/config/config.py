from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Config(BaseSettings):
    """
    Application settings loaded from environment variables and .env files.

    Covers the two upstream lookup services, HTTP timeouts, the API server
    and logging.
    """

    # Upstream services
    address_base_url: str = Field(
        default="https://cep.awesomeapi.com.br",
        description="Base URL of the CEP address lookup service",
    )
    weather_base_url: str = Field(
        default="https://api.open-meteo.com",
        description="Base URL of the Open-Meteo forecast service",
    )

    # HTTP client
    request_timeout: float = Field(
        default=10.0, gt=0, description="Overall time limit per request in seconds, redirects included"
    )
    connect_timeout: float = Field(default=5.0, gt=0, description="Connect timeout in seconds")

    # API Configuration
    api_host: str = Field(default="0.0.0.0", description="FastAPI host")
    api_port: int = Field(default=8000, ge=1, le=65535, description="FastAPI port")

    # Logging Configuration
    environment: str = Field(default="development", description="Environment name")
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(default="text", description="Log format (json/text)")

    @field_validator("address_base_url", "weather_base_url")
    def strip_trailing_slash(cls, v):
        return v.rstrip("/")

    @field_validator("log_level")
    def validate_log_level(cls, v):
        """Validate log level."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of {valid_levels}")
        return v.upper()

    @field_validator("log_format")
    def validate_log_format(cls, v):
        if v.lower() not in ("json", "text"):
            raise ValueError(f"Invalid log format: {v}. Must be 'json' or 'text'")
        return v.lower()

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


config = Config()
