"""
Domain exceptions - Semantic error types for response decoding.

This module defines domain-specific exceptions that communicate
schema violations without leaking parser details.
"""


class DecodingError(Exception):
    """Base class for response decoding errors."""

    pass


class MalformedDocument(DecodingError):
    """Not valid JSON, not an object, or missing message/status."""

    pass


class UnknownStatus(DecodingError):
    """Status present but not one of the enumerated values."""

    def __init__(self, status: str) -> None:
        super().__init__(f"Unknown response status: {status!r}")
        self.status = status


class PayloadTypeMismatch(DecodingError):
    """Message shape does not match what the status requires."""

    def __init__(self, status: str, detail: str) -> None:
        super().__init__(f"Message does not match {status!r} status: {detail}")
        self.status = status


class DogCeoApiError(Exception):
    """The API answered with an error-status response."""

    def __init__(self, text: str, code: int | None = None) -> None:
        super().__init__(text if code is None else f"[{code}] {text}")
        self.text = text
        self.code = code
