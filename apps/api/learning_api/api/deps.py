from __future__ import annotations

from fastapi import Request

from learning_api.services.ai_service import AIService


def get_ai_service(request: Request) -> AIService:
    return request.app.state.ai_service
