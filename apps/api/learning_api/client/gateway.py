"""
Client gateway for the AI Learning System API.

Every call resolves to ``ApiResponse(data=...)`` or ``ApiResponse(error=...)``:
HTTP errors, transport failures and unexpected bodies are logged and turned
into an error message, never raised. There are no retries, caching or
request de-duplication; callers decide when to submit again.

Usage:
    gateway = ApiGateway()
    result = await gateway.ask_question("What is photosynthesis?")
    if result.error:
        ...
"""

from __future__ import annotations

import logging
from typing import Generic, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from learning_api.schemas.learning import AnswerResponse, QuizResponse, RoadmapResponse, SummaryResponse

logger = logging.getLogger(__name__)

API_BASE_URL = "http://localhost:3001/api"
GENERIC_ERROR = "An unexpected error occurred"

T = TypeVar("T", bound=BaseModel)


class ApiResponse(BaseModel, Generic[T]):
    data: T | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


class ApiGateway:
    def __init__(
        self,
        base_url: str = API_BASE_URL,
        timeout: float = 60.0,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._client = client

    async def _post(self, endpoint: str, payload: dict) -> httpx.Response:
        url = f"{self.base_url}{endpoint}"
        headers = {"Content-Type": "application/json"}
        if self._client is not None:
            return await self._client.post(url, json=payload, headers=headers)
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            return await client.post(url, json=payload, headers=headers)

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        try:
            body = response.json()
        except ValueError:
            body = None
        if isinstance(body, dict) and isinstance(body.get("error"), str) and body["error"]:
            return body["error"]
        return f"HTTP error! status: {response.status_code}"

    async def _make_request(self, endpoint: str, payload: dict, schema: type[T]) -> ApiResponse[T]:
        try:
            response = await self._post(endpoint, payload)
        except httpx.HTTPError as exc:
            message = str(exc) or GENERIC_ERROR
            logger.error("API Error (%s): %s", endpoint, message)
            return ApiResponse[schema](error=message)
        except Exception as exc:
            logger.exception("API Error (%s)", endpoint)
            return ApiResponse[schema](error=str(exc) or GENERIC_ERROR)

        if not response.is_success:
            message = self._error_message(response)
            logger.error("API Error (%s): %s", endpoint, message)
            return ApiResponse[schema](error=message)

        try:
            data = schema.model_validate(response.json())
        except (ValueError, ValidationError) as exc:
            logger.error("API Error (%s): unexpected response body: %s", endpoint, exc)
            return ApiResponse[schema](error=GENERIC_ERROR)
        return ApiResponse[schema](data=data)

    async def ask_question(self, question: str) -> ApiResponse[AnswerResponse]:
        return await self._make_request("/ask", {"question": question}, AnswerResponse)

    async def summarize_text(self, text: str) -> ApiResponse[SummaryResponse]:
        return await self._make_request("/summarize", {"text": text}, SummaryResponse)

    async def generate_quiz(self, text: str) -> ApiResponse[QuizResponse]:
        return await self._make_request("/quiz", {"text": text}, QuizResponse)

    async def generate_roadmap(self, topic: str, level: str = "beginner") -> ApiResponse[RoadmapResponse]:
        return await self._make_request("/roadmap", {"topic": topic, "level": level}, RoadmapResponse)
