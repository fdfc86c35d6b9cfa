"""Pytest configuration and fixtures."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from learning_api.core.config import Settings
from learning_api.main import create_app
from learning_api.services.ai_service import AIService
from learning_api.services.providers.base import CompletionProvider, ProviderError


class FakeProvider(CompletionProvider):
    """Returns canned completions (or raises) and records every prompt it gets."""

    name = "fake"
    model = "fake-model"

    def __init__(self, reply: str = "", error: Exception | None = None) -> None:
        self.reply = reply
        self.error = error
        self.prompts: list[str] = []

    async def complete(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.reply

    async def list_models(self) -> list[str]:
        return [self.model]


@pytest.fixture
def provider() -> FakeProvider:
    return FakeProvider()


@pytest.fixture
def failing_provider() -> FakeProvider:
    return FakeProvider(error=ProviderError("quota exceeded"))


@pytest.fixture
def ai_service(provider: FakeProvider) -> AIService:
    return AIService(provider)


@pytest.fixture
def test_settings() -> Settings:
    return Settings(_env_file=None, env="test", rate_limit_per_minute=0)


@pytest.fixture
def app(provider: FakeProvider, test_settings: Settings):
    return create_app(provider=provider, app_settings=test_settings)


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)
