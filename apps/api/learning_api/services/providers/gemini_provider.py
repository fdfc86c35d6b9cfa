from __future__ import annotations

import httpx

from learning_api.services.providers.base import CompletionProvider, ProviderError


class GeminiProvider(CompletionProvider):
    name = "gemini"

    def __init__(
        self,
        api_key: str | None,
        model: str = "gemini-2.0-flash",
        base_url: str = "https://generativelanguage.googleapis.com/v1beta",
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.api_key = api_key
        self.model = model
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    def _headers(self) -> dict:
        if not self.api_key:
            raise ProviderError("Gemini API key missing")
        return {"x-goog-api-key": self.api_key, "Content-Type": "application/json"}

    async def _request(self, method: str, path: str, payload: dict | None = None) -> dict:
        headers = self._headers()
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.request(method, f"{self.base_url}{path}", headers=headers, json=payload)
                response.raise_for_status()
                return response.json()
        except httpx.TimeoutException as exc:
            raise ProviderError(f"Gemini request timed out after {self.timeout}s") from exc
        except httpx.HTTPStatusError as exc:
            raise ProviderError(f"Gemini returned HTTP {exc.response.status_code}") from exc
        except httpx.HTTPError as exc:
            raise ProviderError(f"Gemini request failed: {exc}") from exc
        except ValueError as exc:
            raise ProviderError("Gemini returned a non-JSON body") from exc

    @staticmethod
    def _extract_text(payload) -> str:
        candidates = payload.get("candidates") if isinstance(payload, dict) else None
        if not candidates:
            feedback = payload.get("promptFeedback") if isinstance(payload, dict) else None
            reason = feedback.get("blockReason") if isinstance(feedback, dict) else None
            raise ProviderError(f"Gemini returned no candidates{f' ({reason})' if reason else ''}")

        first = candidates[0] if isinstance(candidates, list) else None
        content = first.get("content") if isinstance(first, dict) else None
        parts = content.get("parts") if isinstance(content, dict) else None
        if not isinstance(parts, list):
            raise ProviderError("Gemini returned an unexpected response shape")
        return "".join(part["text"] for part in parts if isinstance(part, dict) and isinstance(part.get("text"), str))

    async def complete(self, prompt: str) -> str:
        payload = await self._request(
            "POST",
            f"/models/{self.model}:generateContent",
            {"contents": [{"parts": [{"text": prompt}]}]},
        )
        text = self._extract_text(payload)
        if not text.strip():
            raise ProviderError("Gemini returned an empty completion")
        return text

    async def list_models(self) -> list[str]:
        payload = await self._request("GET", "/models")
        return [
            row["name"].removeprefix("models/")
            for row in payload.get("models", [])
            if row.get("name") and "generateContent" in row.get("supportedGenerationMethods", [])
        ]
