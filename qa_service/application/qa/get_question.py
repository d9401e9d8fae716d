"""
Use case: Retrieve a single question.

Input: GetQuestionQuery (question_id)
Output: Result[QuestionResult]
Side effects: None.
Failure cases: QuestionNotFoundError.
"""

import logging

from qa_service.application.qa.dtos import GetQuestionQuery, QuestionResult
from qa_service.application.qa.mappers import question_to_result
from qa_service.domain.qa.entities import QuestionId
from qa_service.domain.qa.ports import QAStore
from qa_service.domain.qa.result import Err, Ok, Result

logger = logging.getLogger(__name__)


class GetQuestionUseCase:
    """Looks up one question by id."""

    def __init__(self, store: QAStore) -> None:
        self._store = store

    async def execute(self, query: GetQuestionQuery) -> Result[QuestionResult]:
        logger.info("Retrieving question id=%s", query.question_id)
        found = await self._store.get_question(QuestionId(query.question_id))
        if isinstance(found, Err):
            return found
        return Ok(question_to_result(found.value))
