from __future__ import annotations

import string

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator, model_validator


def _as_text(value):
    if value is None:
        return ""
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return value


def _unique(values: list[str]) -> list[str]:
    return list(dict.fromkeys(item.strip() for item in values if item.strip()))


class WireModel(BaseModel):
    """Python field names internally, the UI's camelCase names on the wire."""

    model_config = ConfigDict(populate_by_name=True)


# Requests. Missing and null fields are accepted here and rejected by the service
# so every task reports its own message.


class AskRequest(BaseModel):
    question: str | None = None


class SummarizeRequest(BaseModel):
    text: str | None = None


class QuizRequest(BaseModel):
    text: str | None = None


class RoadmapRequest(BaseModel):
    topic: str | None = None
    level: str | None = "beginner"


# Model output


class QuizQuestion(WireModel):
    id: str | None = None
    question_text: str = Field(alias="question", min_length=1)
    options: list[str] = Field(min_length=4, max_length=4)
    correct_option_index: int = Field(alias="correctAnswer", ge=0)
    explanation: str = ""

    @field_validator("id", mode="before")
    @classmethod
    def _id_as_text(cls, value):
        return None if value is None else str(value)

    @field_validator("explanation", mode="before")
    @classmethod
    def _explanation_as_text(cls, value):
        return _as_text(value)

    @field_validator("correct_option_index", mode="before")
    @classmethod
    def _resolve_answer(cls, value, info: ValidationInfo):
        # Models sometimes answer with a letter ("B") or the option text itself.
        if not isinstance(value, str):
            return value
        cleaned = value.strip()
        if cleaned.isdigit():
            return int(cleaned)
        options = info.data.get("options") or []
        if cleaned in options:
            return options.index(cleaned)
        if len(cleaned) == 1 and cleaned.upper() in string.ascii_uppercase:
            return string.ascii_uppercase.index(cleaned.upper())
        return value

    @model_validator(mode="after")
    def _answer_in_range(self):
        if self.correct_option_index >= len(self.options):
            raise ValueError("correctAnswer must index one of the options")
        return self


class RoadmapStep(BaseModel):
    id: str | None = None
    title: str = Field(min_length=1)
    description: str = ""
    duration: str = ""
    difficulty: str = ""
    topics: list[str] = Field(default_factory=list)
    resources: list[str] = Field(default_factory=list)
    skills: list[str] = Field(default_factory=list)

    @field_validator("id", mode="before")
    @classmethod
    def _id_as_text(cls, value):
        return None if value is None else str(value)

    @field_validator("description", "duration", "difficulty", mode="before")
    @classmethod
    def _text_fields(cls, value):
        return _as_text(value)

    @field_validator("topics", "resources", "skills")
    @classmethod
    def _dedupe(cls, values: list[str]) -> list[str]:
        return _unique(values)


class GeneratedRoadmap(WireModel):
    topic: str | None = None
    level: str | None = None
    total_duration: str = Field(default="", alias="totalDuration")
    description: str = ""
    steps: list[RoadmapStep] = Field(min_length=1)

    @field_validator("total_duration", "description", mode="before")
    @classmethod
    def _text_fields(cls, value):
        return _as_text(value)


# Responses


class AnswerResponse(BaseModel):
    answer: str
    timestamp: str


class SummaryResponse(WireModel):
    summary: str
    original_length: int = Field(alias="originalLength")
    timestamp: str


class QuizResponse(WireModel):
    questions: list[QuizQuestion]
    total_questions: int = Field(alias="totalQuestions")
    timestamp: str


class RoadmapResponse(WireModel):
    topic: str
    level: str
    total_duration: str = Field(alias="totalDuration")
    description: str
    steps: list[RoadmapStep]
    timestamp: str


class HealthResponse(BaseModel):
    status: str
    message: str


class ErrorResponse(BaseModel):
    error: str
