"""
Use case: Delete a question.

Input: DeleteQuestionCommand (question_id)
Output: Result[QuestionResult]
Side effects: Removes the question. Its answers are kept.
Failure cases: QuestionNotFoundError.
"""

import logging

from qa_service.application.qa.dtos import DeleteQuestionCommand, QuestionResult
from qa_service.application.qa.mappers import question_to_result
from qa_service.domain.qa.entities import QuestionId
from qa_service.domain.qa.ports import QAStore
from qa_service.domain.qa.result import Err, Ok, Result

logger = logging.getLogger(__name__)


class DeleteQuestionUseCase:
    """Removes a question without cascading to its answers."""

    def __init__(self, store: QAStore) -> None:
        self._store = store

    async def execute(self, command: DeleteQuestionCommand) -> Result[QuestionResult]:
        removed = await self._store.delete_question(QuestionId(command.question_id))
        if isinstance(removed, Err):
            return removed

        logger.info("Deleted question id=%s", command.question_id)
        return Ok(question_to_result(removed.value))
