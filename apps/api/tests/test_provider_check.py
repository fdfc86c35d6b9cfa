"""The provider_check developer script."""

import importlib.util
from pathlib import Path

import pytest

from learning_api.services.providers.base import ProviderError

from .conftest import FakeProvider

SCRIPT = Path(__file__).resolve().parents[1] / "scripts" / "provider_check.py"


@pytest.fixture
def provider_check():
    spec = importlib.util.spec_from_file_location("provider_check", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_lists_models_and_sends_default_prompt(provider_check, monkeypatch, capsys):
    fake = FakeProvider(reply="ready")
    monkeypatch.setattr(provider_check, "build_provider", lambda settings: fake)

    assert provider_check.main(["--list-models", "--prompt", "ping"]) == 0

    out = capsys.readouterr().out
    assert "list models  OK  (1 available)" in out
    assert "- fake-model" in out
    assert "completion   OK  'ready'" in out
    assert fake.prompts == ["ping"]


def test_default_prompt_when_no_flags(provider_check, monkeypatch):
    fake = FakeProvider(reply="ready")
    monkeypatch.setattr(provider_check, "build_provider", lambda settings: fake)

    assert provider_check.main([]) == 0
    assert fake.prompts == [provider_check.DEFAULT_PROMPT]


def test_failure_exit_code(provider_check, monkeypatch, capsys):
    fake = FakeProvider(error=ProviderError("Gemini returned HTTP 403"))
    monkeypatch.setattr(provider_check, "build_provider", lambda settings: fake)

    assert provider_check.main(["--prompt", "ping"]) == 1
    assert "FAILED  Gemini returned HTTP 403" in capsys.readouterr().out
