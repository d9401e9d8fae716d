"""
Conversions between domain entities and application DTOs.
"""

from qa_service.application.qa.dtos import AnswerResult, QuestionResult
from qa_service.domain.qa.entities import Answer, Question, QuestionId


def build_question(
    question_id: str, title: str, content: str, tags: list[str] | None
) -> Question:
    """Build a Question entity from raw fields.

    Raises:
        InvalidIdentifierError: If ``question_id`` is empty.
    """
    return Question(
        id=QuestionId(question_id),
        title=title,
        content=content,
        tags=tuple(tags) if tags is not None else None,
    )


def question_to_result(question: Question) -> QuestionResult:
    return QuestionResult(
        id=question.id.value,
        title=question.title,
        content=question.content,
        tags=list(question.tags) if question.tags is not None else None,
    )


def answer_to_result(answer: Answer) -> AnswerResult:
    return AnswerResult(
        id=answer.id.value,
        content=answer.content,
        question_id=answer.question_id.value,
    )
