"""ApiGateway: every outcome resolves to ApiResponse(data=...) or ApiResponse(error=...)."""

import json

import httpx
import pytest

from learning_api.client import ApiGateway
from learning_api.schemas.learning import AnswerResponse

from .sample_outputs import LONG_TEXT, QUIZ_FENCED, ROADMAP_FENCED

BASE_URL = "http://testserver/api"


def gateway_for(handler) -> ApiGateway:
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return ApiGateway(base_url=BASE_URL, client=client)


class TestRequestShape:
    @pytest.mark.asyncio
    async def test_posts_json_to_matching_endpoint(self):
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={"answer": "4", "timestamp": "2026-01-01T00:00:00.000Z"})

        result = await gateway_for(handler).ask_question("What is 2+2?")

        assert result.ok
        assert result.data == AnswerResponse(answer="4", timestamp="2026-01-01T00:00:00.000Z")
        request = seen[0]
        assert request.method == "POST"
        assert str(request.url) == f"{BASE_URL}/ask"
        assert request.headers["content-type"] == "application/json"
        assert json.loads(request.content) == {"question": "What is 2+2?"}

    @pytest.mark.asyncio
    async def test_roadmap_sends_default_level(self):
        bodies = []

        def handler(request: httpx.Request) -> httpx.Response:
            bodies.append(json.loads(request.content))
            return httpx.Response(500, json={"error": "Failed to generate learning roadmap. Please try again."})

        await gateway_for(handler).generate_roadmap("Rust")
        assert bodies == [{"topic": "Rust", "level": "beginner"}]


class TestErrorNormalization:
    @pytest.mark.asyncio
    async def test_error_body_message_is_returned(self):
        gateway = gateway_for(lambda request: httpx.Response(400, json={"error": "X"}))
        result = await gateway.summarize_text("short")
        assert result.data is None
        assert result.error == "X"
        assert not result.ok

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "response",
        [
            httpx.Response(502, text="<html>Bad Gateway</html>"),
            httpx.Response(503, json={"detail": "no error field"}),
            httpx.Response(500, content=b""),
        ],
    )
    async def test_unparseable_error_body_falls_back_to_status(self, response):
        gateway = gateway_for(lambda request: response)
        result = await gateway.generate_quiz("text")
        assert result.error == f"HTTP error! status: {response.status_code}"

    @pytest.mark.asyncio
    async def test_network_failure_is_returned_not_raised(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("Connection refused", request=request)

        result = await gateway_for(handler).ask_question("anyone there?")
        assert result.data is None
        assert result.error == "Connection refused"

    @pytest.mark.asyncio
    async def test_failure_without_description_uses_generic_message(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("", request=request)

        result = await gateway_for(handler).ask_question("slow?")
        assert result.error == "An unexpected error occurred"

    @pytest.mark.asyncio
    async def test_unreachable_server_without_injected_client(self):
        gateway = ApiGateway(base_url="http://127.0.0.1:9/api", timeout=2.0)
        result = await gateway.ask_question("hello?")
        assert result.data is None
        assert result.error

    @pytest.mark.asyncio
    async def test_unexpected_success_body_is_an_error(self):
        gateway = gateway_for(lambda request: httpx.Response(200, text="not json"))
        result = await gateway.ask_question("hello?")
        assert result.data is None
        assert result.error == "An unexpected error occurred"


class TestAgainstProxy:
    """Gateway → proxy app → fake provider, over an in-process ASGI transport."""

    def gateway(self, app) -> ApiGateway:
        client = httpx.AsyncClient(transport=httpx.ASGITransport(app=app), base_url="http://testserver")
        return ApiGateway(base_url=BASE_URL, client=client)

    @pytest.mark.asyncio
    async def test_ask(self, app, provider):
        provider.reply = "4"
        result = await self.gateway(app).ask_question("What is 2+2?")
        assert result.data.answer == "4"

    @pytest.mark.asyncio
    async def test_summarize(self, app, provider):
        provider.reply = "Summary."
        result = await self.gateway(app).summarize_text(LONG_TEXT)
        assert result.data.summary == "Summary."
        assert result.data.original_length == len(LONG_TEXT)

    @pytest.mark.asyncio
    async def test_quiz(self, app, provider):
        provider.reply = QUIZ_FENCED
        result = await self.gateway(app).generate_quiz(LONG_TEXT)
        assert result.data.total_questions == 5
        assert result.data.questions[4].id == "q5"

    @pytest.mark.asyncio
    async def test_roadmap(self, app, provider):
        provider.reply = ROADMAP_FENCED
        result = await self.gateway(app).generate_roadmap("Machine Learning", "beginner")
        assert result.data.total_duration == "8 weeks"

    @pytest.mark.asyncio
    async def test_validation_error_message_reaches_caller(self, app, provider):
        result = await self.gateway(app).summarize_text("too short")
        assert result.error == "Text must be at least 100 characters long"
        assert provider.prompts == []
