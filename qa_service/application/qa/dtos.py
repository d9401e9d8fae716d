"""
Data Transfer Objects for the qa application layer.

DTOs carry data between the interface and application layers.
They are plain dataclasses with no behavior.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field


@dataclass(frozen=True)
class ListQuestionsQuery:
    """Input DTO for listing questions.

    Attributes:
        params: Raw query parameters. Empty means no pagination.
    """

    params: Mapping[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class GetQuestionQuery:
    """Input DTO for fetching a single question.

    Attributes:
        question_id: Id taken from the request path.
    """

    question_id: str


@dataclass(frozen=True)
class AddQuestionCommand:
    """Input DTO for creating (or replacing) a question.

    Attributes:
        id: Caller-supplied question id.
        title: Question title.
        content: Question body text.
        tags: Optional list of tags.
    """

    id: str
    title: str
    content: str
    tags: list[str] | None = None


@dataclass(frozen=True)
class UpdateQuestionCommand:
    """Input DTO for replacing an existing question.

    Attributes:
        question_id: Id taken from the request path; the stored record
            always carries this id.
        title: New title.
        content: New body text.
        tags: New tags, or None to clear them.
    """

    question_id: str
    title: str
    content: str
    tags: list[str] | None = None


@dataclass(frozen=True)
class DeleteQuestionCommand:
    """Input DTO for deleting a question."""

    question_id: str


@dataclass(frozen=True)
class AddAnswerCommand:
    """Input DTO for answering a question.

    Attributes:
        question_id: Id of the question being answered.
        content: Answer body text.
    """

    question_id: str
    content: str


@dataclass(frozen=True)
class ListAnswersQuery:
    """Input DTO for listing the answers of a question."""

    question_id: str


@dataclass(frozen=True)
class QuestionResult:
    """Output DTO for a question."""

    id: str
    title: str
    content: str
    tags: list[str] | None = None


@dataclass(frozen=True)
class AnswerResult:
    """Output DTO for an answer."""

    id: str
    content: str
    question_id: str
