"""
Use case: List the answers of a question.

Input: ListAnswersQuery (question_id)
Output: Result[list[AnswerResult]]
Side effects: None.
Failure cases: QuestionNotFoundError.
"""

import logging

from qa_service.application.qa.dtos import AnswerResult, ListAnswersQuery
from qa_service.application.qa.mappers import answer_to_result
from qa_service.domain.qa.entities import QuestionId
from qa_service.domain.qa.errors import QuestionNotFoundError
from qa_service.domain.qa.ports import QAStore
from qa_service.domain.qa.result import Err, Ok, Result

logger = logging.getLogger(__name__)


class ListAnswersUseCase:
    """Returns the answers of a currently stored question, sorted by id."""

    def __init__(self, store: QAStore) -> None:
        self._store = store

    async def execute(self, query: ListAnswersQuery) -> Result[list[AnswerResult]]:
        question_id = QuestionId(query.question_id)
        if not await self._store.question_exists(question_id):
            return Err(QuestionNotFoundError(query.question_id))

        answers = sorted(
            await self._store.list_answers(question_id), key=lambda a: a.id.value
        )
        logger.info(
            "Listing %d answers for question id=%s", len(answers), query.question_id
        )
        return Ok([answer_to_result(a) for a in answers])
