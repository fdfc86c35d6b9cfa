from __future__ import annotations

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    env: str = "development"
    port: int = 3001
    api_prefix: str = "/api"
    allowed_origins: str = "http://localhost:5173,http://127.0.0.1:5173,http://localhost:3000"

    completion_provider: str = "gemini"

    gemini_api_key: str | None = Field(
        default=None,
        validation_alias=AliasChoices("gemini_api_key", "vite_gemini_api_key"),
    )
    gemini_model: str = "gemini-2.0-flash"
    gemini_base_url: str = "https://generativelanguage.googleapis.com/v1beta"

    openai_api_key: str | None = None
    openai_model: str = "gpt-4.1-mini"

    request_timeout_seconds: float = 30.0
    rate_limit_per_minute: int = 120
    max_body_bytes: int = 10 * 1024 * 1024

    static_dir: str | None = None
    log_level: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore", case_sensitive=False)

    @property
    def cors_origins(self) -> list[str]:
        return [origin.strip() for origin in self.allowed_origins.split(",") if origin.strip()]

    @property
    def cors_origin_regex(self) -> str | None:
        # Any localhost port while developing, so the UI dev server can move around.
        if self.env.lower() == "development":
            return r"^https?://(localhost|127\.0\.0\.1|\[::1\])(:\d+)?$"
        return None

    @property
    def is_production(self) -> bool:
        return self.env.lower() == "production"

    @property
    def active_model(self) -> str:
        if self.completion_provider.lower() == "openai":
            return self.openai_model
        return self.gemini_model


settings = Settings()
