"""
scripts/provider_check.py

Connectivity check for the configured completion provider.

Usage:
    python apps/api/scripts/provider_check.py --list-models
    python apps/api/scripts/provider_check.py --prompt "Explain recursion in one sentence"

Reads the same settings as the API (.env / environment), e.g.
  COMPLETION_PROVIDER   gemini | openai
  GEMINI_API_KEY        (VITE_GEMINI_API_KEY also accepted)
  OPENAI_API_KEY

Exit codes:
  0: every requested check passed
  1: a check failed
"""

from __future__ import annotations

import argparse
import asyncio
import sys

from learning_api.core.config import settings
from learning_api.core.logging import configure_logging
from learning_api.services.providers.base import ProviderError
from learning_api.services.providers.factory import build_provider

DEFAULT_PROMPT = "Reply with the single word: ready"


async def run(list_models: bool, prompt: str | None) -> int:
    provider = build_provider(settings)
    print(f"Provider: {provider.name}  model: {settings.active_model}")
    failed = False
    try:
        if list_models:
            try:
                models = await provider.list_models()
            except ProviderError as exc:
                print(f"  list models  FAILED  {exc}")
                failed = True
            else:
                print(f"  list models  OK  ({len(models)} available)")
                for name in models:
                    print(f"    - {name}")

        if prompt is not None:
            try:
                text = await provider.complete(prompt)
            except ProviderError as exc:
                print(f"  completion   FAILED  {exc}")
                failed = True
            else:
                print(f"  completion   OK  {text.strip()[:200]!r}")
    finally:
        await provider.aclose()
    return 1 if failed else 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Check the configured completion provider.")
    parser.add_argument("--list-models", action="store_true", help="list models usable for text generation")
    parser.add_argument("--prompt", help="send a prompt and print the completion")
    args = parser.parse_args(argv)

    configure_logging(settings.log_level)
    prompt = args.prompt
    if not args.list_models and prompt is None:
        prompt = DEFAULT_PROMPT
    return asyncio.run(run(args.list_models, prompt))


if __name__ == "__main__":
    sys.exit(main())
