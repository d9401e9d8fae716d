"""
Use case: Create a question.

Input: AddQuestionCommand (id, title, content, tags)
Output: QuestionResult
Side effects: Inserts the question, replacing any record with the same id.
Failure cases: None.
"""

import logging

from qa_service.application.qa.dtos import AddQuestionCommand, QuestionResult
from qa_service.application.qa.mappers import build_question, question_to_result
from qa_service.domain.qa.ports import QAStore

logger = logging.getLogger(__name__)


class AddQuestionUseCase:
    """Upserts a caller-identified question.

    A question posted with an id that already exists replaces the
    stored one entirely; nothing is merged.
    """

    def __init__(self, store: QAStore) -> None:
        self._store = store

    async def execute(self, command: AddQuestionCommand) -> QuestionResult:
        """Run the create use case.

        Args:
            command: The validated question payload.

        Returns:
            The stored question.
        """
        question = build_question(
            command.id, command.title, command.content, command.tags
        )
        await self._store.put_question(question)
        logger.info("Added question id=%s", question.id)
        return question_to_result(question)
