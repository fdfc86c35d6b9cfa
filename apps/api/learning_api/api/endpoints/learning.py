from __future__ import annotations

from fastapi import APIRouter, Depends

from learning_api.api.deps import get_ai_service
from learning_api.schemas.learning import ErrorResponse, QuizRequest, QuizResponse, RoadmapRequest, RoadmapResponse
from learning_api.services.ai_service import AIService

router = APIRouter(tags=["learning"], responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}})


@router.post("/quiz", response_model=QuizResponse)
async def quiz(payload: QuizRequest | None = None, ai_service: AIService = Depends(get_ai_service)):
    payload = payload or QuizRequest()
    return await ai_service.generate_quiz(payload.text)


@router.post("/roadmap", response_model=RoadmapResponse)
async def roadmap(payload: RoadmapRequest | None = None, ai_service: AIService = Depends(get_ai_service)):
    payload = payload or RoadmapRequest()
    return await ai_service.generate_roadmap(payload.topic, payload.level)
