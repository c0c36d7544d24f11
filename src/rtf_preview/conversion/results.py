from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

T = TypeVar("T")


class ErrorKind(str, Enum):
    MISSING_PARAMETER = "missing_parameter"
    DISALLOWED_ORIGIN = "disallowed_origin"
    FETCH_FAILURE = "fetch_failure"
    NULL_DOCUMENT = "null_document"
    CONVERSION_FAILURE = "conversion_failure"


@dataclass(frozen=True)
class StageResult(Generic[T]):
    """Outcome of one pipeline stage: either a value or an error kind.

    Stages return this instead of raising so the renderer can pick the
    response from the error kind alone.
    """

    value: T | None = None
    error: ErrorKind | None = None
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T) -> "StageResult[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: ErrorKind, message: str = "") -> "StageResult[T]":
        return cls(error=error, message=message)


@dataclass(frozen=True)
class PreviewResponse:
    status_code: int
    body: bytes
    media_type: str = "text/html; charset=utf-8"
