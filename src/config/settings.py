"""
Settings module - Configurações centralizadas do serviço de legendas usando Pydantic Settings.
Segue o princípio de Single Responsibility (SOLID).
"""
from typing import List
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, field_validator


class Settings(BaseSettings):
    """Configurações da aplicação."""

    # Application
    app_name: str = Field(default="Captions Service", alias="APP_NAME")
    app_version: str = Field(default="1.0.0", alias="APP_VERSION")
    app_environment: str = Field(default="production", alias="APP_ENVIRONMENT")

    # Server
    host: str = Field(default="0.0.0.0", alias="HOST")
    port: int = Field(default=3001, alias="PORT")
    api_prefix: str = Field(default="/api", alias="API_PREFIX")

    # Cache
    captions_cache_ttl_seconds: int = Field(default=24 * 60 * 60, alias="CAPTIONS_CACHE_TTL_SECONDS")  # 24 horas
    error_cache_ttl_seconds: int = Field(default=5 * 60, alias="ERROR_CACHE_TTL_SECONDS")  # 5 minutos
    error_retry_after_seconds: int = Field(default=300, alias="ERROR_RETRY_AFTER_SECONDS")

    # Rate limiting
    rate_limit_enabled: bool = Field(default=True, alias="RATE_LIMIT_ENABLED")
    rate_limit_requests: int = Field(default=100, alias="RATE_LIMIT_REQUESTS")
    rate_limit_window_minutes: int = Field(default=15, alias="RATE_LIMIT_WINDOW_MINUTES")
    rate_limit_storage_uri: str = Field(default="memory://", alias="RATE_LIMIT_STORAGE_URI")

    # YouTube
    default_language: str = Field(default="en", alias="YOUTUBE_DEFAULT_LANGUAGE")
    youtube_proxy_url: str = Field(default="", alias="YOUTUBE_PROXY_URL")

    # API
    cors_origins: str = Field(default="*", alias="CORS_ORIGINS")

    # Logging
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_file: str = Field(default="", alias="LOG_FILE")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Valida o nível de log."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v = v.upper()
        if v not in valid_levels:
            raise ValueError(f"Log level must be one of {valid_levels}")
        return v

    @field_validator("rate_limit_requests", "rate_limit_window_minutes")
    @classmethod
    def validate_positive(cls, v: int) -> int:
        """Quota e janela precisam ser positivas."""
        if v <= 0:
            raise ValueError("Rate limit values must be positive")
        return v

    @property
    def rate_limit(self) -> str:
        """Quota no formato aceito pelo slowapi/limits (ex: '100/15 minutes')."""
        return f"{self.rate_limit_requests}/{self.rate_limit_window_minutes} minutes"

    def get_cors_origins(self) -> List[str]:
        """Retorna lista de origens CORS permitidas."""
        if self.cors_origins == "*":
            return ["*"]
        return [origin.strip() for origin in self.cors_origins.split(",")]


# Instância global de configurações
settings = Settings()
