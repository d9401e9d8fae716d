"""
Adapter: In-memory question and answer store.

Implements the QAStore port with two dicts, each guarded by its own
ReadWriteLock. Operations that touch both collections take the
questions lock first, then the answers lock.

No await happens while a lock is held apart from acquiring the next
lock, so every operation is either fully applied or not started when
its task is cancelled.
"""

import logging
from collections.abc import Iterable
from typing import Optional

from qa_service.domain.qa.entities import Answer, AnswerId, Question, QuestionId
from qa_service.domain.qa.errors import QuestionNotFoundError
from qa_service.domain.qa.ports import QAStore
from qa_service.domain.qa.result import Err, Ok, Result
from qa_service.infrastructure.qa.rwlock import ReadWriteLock

logger = logging.getLogger(__name__)


class InMemoryQAStore(QAStore):
    """Concrete adapter keeping all entities in process memory.

    Lives for the lifetime of the application that owns it. Nothing
    is persisted across restarts.
    """

    def __init__(self, questions: Optional[Iterable[Question]] = None) -> None:
        self._questions: dict[QuestionId, Question] = {
            q.id: q for q in (questions or ())
        }
        self._answers: dict[AnswerId, Answer] = {}
        self._questions_lock = ReadWriteLock()
        self._answers_lock = ReadWriteLock()
        logger.debug(
            "Initialized InMemoryQAStore with %d questions", len(self._questions)
        )

    async def list_questions(self) -> list[Question]:
        async with self._questions_lock.read():
            return list(self._questions.values())

    async def get_question(self, question_id: QuestionId) -> Result[Question]:
        async with self._questions_lock.read():
            question = self._questions.get(question_id)
        if question is None:
            return Err(QuestionNotFoundError(question_id.value))
        return Ok(question)

    async def put_question(self, question: Question) -> None:
        async with self._questions_lock.write():
            replaced = question.id in self._questions
            self._questions[question.id] = question
        logger.debug("Stored question id=%s (replaced=%s)", question.id, replaced)

    async def update_question(
        self, question_id: QuestionId, question: Question
    ) -> Result[Question]:
        async with self._questions_lock.write():
            if question_id not in self._questions:
                return Err(QuestionNotFoundError(question_id.value))
            self._questions[question_id] = question
        return Ok(question)

    async def delete_question(self, question_id: QuestionId) -> Result[Question]:
        async with self._questions_lock.write():
            removed = self._questions.pop(question_id, None)
        if removed is None:
            return Err(QuestionNotFoundError(question_id.value))
        return Ok(removed)

    async def question_exists(self, question_id: QuestionId) -> bool:
        async with self._questions_lock.read():
            return question_id in self._questions

    async def put_answer(self, answer: Answer) -> None:
        async with self._answers_lock.write():
            self._answers[answer.id] = answer

    async def add_answer(self, answer: Answer) -> Result[Answer]:
        # Lock order: questions, then answers.
        async with self._questions_lock.read():
            if answer.question_id not in self._questions:
                return Err(QuestionNotFoundError(answer.question_id.value))
            async with self._answers_lock.write():
                self._answers[answer.id] = answer
        logger.debug(
            "Stored answer id=%s for question id=%s", answer.id, answer.question_id
        )
        return Ok(answer)

    async def list_answers(self, question_id: QuestionId) -> list[Answer]:
        async with self._answers_lock.read():
            return [a for a in self._answers.values() if a.question_id == question_id]

    async def count_answers(self) -> int:
        async with self._answers_lock.read():
            return len(self._answers)
