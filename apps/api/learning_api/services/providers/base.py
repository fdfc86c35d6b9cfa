from __future__ import annotations

from abc import ABC, abstractmethod


class ProviderError(Exception):
    """Any failure of the completion capability: transport, status, quota or empty output."""


class CompletionProvider(ABC):
    name: str

    @abstractmethod
    async def complete(self, prompt: str) -> str:
        raise NotImplementedError

    @abstractmethod
    async def list_models(self) -> list[str]:
        raise NotImplementedError

    async def aclose(self) -> None:
        return None
