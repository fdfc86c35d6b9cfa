from __future__ import annotations

from learning_api.core.config import Settings
from learning_api.services.providers.base import CompletionProvider
from learning_api.services.providers.gemini_provider import GeminiProvider
from learning_api.services.providers.openai_provider import OpenAIProvider


def build_provider(settings: Settings) -> CompletionProvider:
    kind = settings.completion_provider.lower()
    if kind == "gemini":
        return GeminiProvider(
            api_key=settings.gemini_api_key,
            model=settings.gemini_model,
            base_url=settings.gemini_base_url,
            timeout=settings.request_timeout_seconds,
        )
    if kind == "openai":
        return OpenAIProvider(
            api_key=settings.openai_api_key,
            model=settings.openai_model,
            timeout=settings.request_timeout_seconds,
        )
    raise ValueError(f"Unknown completion provider: {settings.completion_provider!r}")
