from __future__ import annotations

import openai
from openai import AsyncOpenAI

from learning_api.services.providers.base import CompletionProvider, ProviderError


class OpenAIProvider(CompletionProvider):
    name = "openai"

    def __init__(self, api_key: str | None, model: str = "gpt-4.1-mini", timeout: float = 30.0) -> None:
        self.model = model
        # Retries stay with the caller: one user action, one model call.
        self.client = AsyncOpenAI(api_key=api_key, timeout=timeout, max_retries=0) if api_key else None

    def _ready(self) -> AsyncOpenAI:
        if self.client is None:
            raise ProviderError("OpenAI API key missing")
        return self.client

    async def complete(self, prompt: str) -> str:
        client = self._ready()
        try:
            response = await client.responses.create(model=self.model, input=prompt)
        except openai.APITimeoutError as exc:
            raise ProviderError("OpenAI request timed out") from exc
        except openai.APIStatusError as exc:
            raise ProviderError(f"OpenAI returned HTTP {exc.status_code}") from exc
        except openai.OpenAIError as exc:
            raise ProviderError(f"OpenAI request failed: {exc}") from exc

        text = response.output_text or ""
        if not text.strip():
            raise ProviderError("OpenAI returned an empty completion")
        return text

    async def list_models(self) -> list[str]:
        client = self._ready()
        try:
            page = await client.models.list()
        except openai.OpenAIError as exc:
            raise ProviderError(f"OpenAI request failed: {exc}") from exc
        return sorted(model.id for model in page.data)

    async def aclose(self) -> None:
        if self.client is not None:
            await self.client.close()
