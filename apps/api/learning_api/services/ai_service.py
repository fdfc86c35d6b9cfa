from __future__ import annotations

import logging
from datetime import datetime, timezone

from pydantic import ValidationError

from learning_api.core.errors import InvalidInputError, MalformedModelOutputError, UpstreamError
from learning_api.schemas.learning import (
    AnswerResponse,
    GeneratedRoadmap,
    QuizQuestion,
    QuizResponse,
    RoadmapResponse,
    SummaryResponse,
)
from learning_api.services import prompts
from learning_api.services.providers.base import CompletionProvider, ProviderError
from learning_api.utils.model_output import parse_model_json

logger = logging.getLogger(__name__)

MIN_SUMMARY_LENGTH = 100
DEFAULT_LEVEL = "beginner"

QUIZ_PARSE_ERROR = "Failed to parse generated quiz JSON."
ROADMAP_PARSE_ERROR = "Failed to parse generated roadmap JSON."


def utc_timestamp() -> str:
    """Current UTC time as ISO-8601 with milliseconds and a ``Z`` suffix."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _require(value: str | None, message: str) -> str:
    if value is None or not value.strip():
        raise InvalidInputError(message)
    return value


class AIService:
    """Validates a task, prompts the completion provider once and shapes its answer."""

    def __init__(self, provider: CompletionProvider, model_name: str | None = None) -> None:
        self.provider = provider
        self.model_name = model_name or getattr(provider, "model", provider.name)

    async def _complete(self, task: str, prompt: str, failure_message: str) -> str:
        try:
            text = await self.provider.complete(prompt)
        except ProviderError as exc:
            logger.error("Completion for %s failed via %s (%s): %s", task, self.provider.name, self.model_name, exc)
            raise UpstreamError(failure_message) from exc
        if not isinstance(text, str) or not text.strip():
            logger.error("Completion for %s via %s (%s) was empty", task, self.provider.name, self.model_name)
            raise UpstreamError(failure_message)
        return text

    async def ask_question(self, question: str | None) -> AnswerResponse:
        question = _require(question, "Question is required")
        answer = await self._complete(
            "ask", prompts.ask_prompt(question), "Failed to process your question. Please try again."
        )
        return AnswerResponse(answer=answer, timestamp=utc_timestamp())

    async def summarize(self, text: str | None) -> SummaryResponse:
        text = _require(text, "Text content is required for summarization")
        if len(text.strip()) < MIN_SUMMARY_LENGTH:
            raise InvalidInputError(f"Text must be at least {MIN_SUMMARY_LENGTH} characters long")

        summary = await self._complete(
            "summarize", prompts.summarize_prompt(text), "Failed to generate summary. Please try again."
        )
        return SummaryResponse(summary=summary, original_length=len(text), timestamp=utc_timestamp())

    async def generate_quiz(self, text: str | None) -> QuizResponse:
        text = _require(text, "Text content is required to generate quiz questions")
        raw = await self._complete(
            "quiz", prompts.quiz_prompt(text), "Failed to generate quiz questions. Please try again."
        )
        questions = self._shape_quiz(raw)
        return QuizResponse(questions=questions, total_questions=len(questions), timestamp=utc_timestamp())

    async def generate_roadmap(self, topic: str | None, level: str | None = DEFAULT_LEVEL) -> RoadmapResponse:
        topic = _require(topic, "Learning topic is required").strip()
        level = (level or "").strip() or DEFAULT_LEVEL
        raw = await self._complete(
            "roadmap",
            prompts.roadmap_prompt(topic, level),
            "Failed to generate learning roadmap. Please try again.",
        )
        roadmap = self._shape_roadmap(raw)
        return RoadmapResponse(
            topic=roadmap.topic or topic,
            level=roadmap.level or level,
            total_duration=roadmap.total_duration,
            description=roadmap.description,
            steps=roadmap.steps,
            timestamp=utc_timestamp(),
        )

    def _shape_quiz(self, raw: str) -> list[QuizQuestion]:
        try:
            payload = parse_model_json(raw, QUIZ_PARSE_ERROR)
        except MalformedModelOutputError:
            logger.error("Quiz output is not valid JSON: %.200s", raw)
            raise
        if isinstance(payload, dict):
            payload = payload.get("questions")
        if not isinstance(payload, list) or not payload:
            logger.error("Quiz output is not a non-empty question list: %.200s", raw)
            raise MalformedModelOutputError(QUIZ_PARSE_ERROR)

        try:
            questions = [QuizQuestion.model_validate(item) for item in payload]
        except ValidationError as exc:
            logger.error("Quiz output failed validation: %s", exc)
            raise MalformedModelOutputError(QUIZ_PARSE_ERROR) from exc

        for index, question in enumerate(questions, start=1):
            question.id = question.id or f"q{index}"
        return questions

    def _shape_roadmap(self, raw: str) -> GeneratedRoadmap:
        try:
            payload = parse_model_json(raw, ROADMAP_PARSE_ERROR)
        except MalformedModelOutputError:
            logger.error("Roadmap output is not valid JSON: %.200s", raw)
            raise
        if isinstance(payload, dict) and "steps" not in payload and isinstance(payload.get("roadmap"), dict):
            payload = payload["roadmap"]
        if not isinstance(payload, dict):
            logger.error("Roadmap output is not a JSON object: %.200s", raw)
            raise MalformedModelOutputError(ROADMAP_PARSE_ERROR)

        try:
            roadmap = GeneratedRoadmap.model_validate(payload)
        except ValidationError as exc:
            logger.error("Roadmap output failed validation: %s", exc)
            raise MalformedModelOutputError(ROADMAP_PARSE_ERROR) from exc

        for index, step in enumerate(roadmap.steps, start=1):
            step.id = step.id or f"step-{index}"
        return roadmap
