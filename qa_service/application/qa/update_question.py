"""
Use case: Replace an existing question.

Input: UpdateQuestionCommand (question_id, title, content, tags)
Output: Result[QuestionResult]
Side effects: Replaces the stored question when it exists.
Failure cases: QuestionNotFoundError.
"""

import logging

from qa_service.application.qa.dtos import QuestionResult, UpdateQuestionCommand
from qa_service.application.qa.mappers import build_question, question_to_result
from qa_service.domain.qa.ports import QAStore
from qa_service.domain.qa.result import Err, Ok, Result

logger = logging.getLogger(__name__)


class UpdateQuestionUseCase:
    """Replaces a question in place. Never creates one."""

    def __init__(self, store: QAStore) -> None:
        self._store = store

    async def execute(self, command: UpdateQuestionCommand) -> Result[QuestionResult]:
        """Run the update use case.

        Args:
            command: Path id plus the replacement fields.

        Returns:
            Ok(updated question) or Err(QuestionNotFoundError).
        """
        question = build_question(
            command.question_id, command.title, command.content, command.tags
        )
        updated = await self._store.update_question(question.id, question)
        if isinstance(updated, Err):
            return updated

        logger.info("Updated question id=%s", question.id)
        return Ok(question_to_result(updated.value))
