"""
Domain entities for the qa bounded context.

Entities represent core business objects with identity.
They contain no framework imports and no IO operations.
"""

from dataclasses import dataclass
from typing import Optional
from uuid import uuid4

from qa_service.domain.qa.errors import InvalidIdentifierError


@dataclass(frozen=True)
class QuestionId:
    """Caller-supplied identifier of a question.

    Equality and hashing are based on the raw string.

    Raises:
        InvalidIdentifierError: If built from an empty string.
    """

    value: str

    def __post_init__(self) -> None:
        if not self.value:
            raise InvalidIdentifierError("question id")

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class AnswerId:
    """Server-generated identifier of an answer."""

    value: str

    @classmethod
    def generate(cls) -> "AnswerId":
        """Return a fresh random identifier (UUID4)."""
        return cls(str(uuid4()))

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Question:
    """A question as stored and served by the API."""

    id: QuestionId
    title: str
    content: str
    tags: Optional[tuple[str, ...]] = None


@dataclass(frozen=True)
class Answer:
    """An answer attached to a question.

    ``question_id`` is checked against the store when the answer is
    created only. Deleting the question afterwards leaves the answer
    in place.
    """

    id: AnswerId
    content: str
    question_id: QuestionId


@dataclass(frozen=True)
class Pagination:
    """Half-open range ``[start, end)`` over a result sequence."""

    start: int
    end: int
