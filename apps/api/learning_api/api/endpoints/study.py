from __future__ import annotations

from fastapi import APIRouter, Depends

from learning_api.api.deps import get_ai_service
from learning_api.schemas.learning import AnswerResponse, AskRequest, ErrorResponse, SummarizeRequest, SummaryResponse
from learning_api.services.ai_service import AIService

router = APIRouter(tags=["study"], responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}})


# A missing body is treated like an empty one so the task reports its own message.
@router.post("/ask", response_model=AnswerResponse)
async def ask(payload: AskRequest | None = None, ai_service: AIService = Depends(get_ai_service)):
    payload = payload or AskRequest()
    return await ai_service.ask_question(payload.question)


@router.post("/summarize", response_model=SummaryResponse)
async def summarize(payload: SummarizeRequest | None = None, ai_service: AIService = Depends(get_ai_service)):
    payload = payload or SummarizeRequest()
    return await ai_service.summarize(payload.text)
