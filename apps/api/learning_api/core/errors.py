from __future__ import annotations


class LearningAPIError(Exception):
    """Base error for every failure the API reports as ``{"error": message}``."""

    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidInputError(LearningAPIError):
    """The request is unusable; raised before the model is contacted."""

    status_code = 400


class UpstreamError(LearningAPIError):
    """The completion provider failed, timed out or returned nothing."""


class MalformedModelOutputError(LearningAPIError):
    """The model answered, but not with JSON of the expected shape."""
