"""
Use case: Answer a question.

Input: AddAnswerCommand (question_id, content)
Output: Result[AnswerResult]
Side effects: Inserts a new answer with a generated id.
Failure cases: QuestionNotFoundError (nothing is inserted).
"""

import logging

from qa_service.application.qa.dtos import AddAnswerCommand, AnswerResult
from qa_service.application.qa.mappers import answer_to_result
from qa_service.domain.qa.entities import Answer, AnswerId, QuestionId
from qa_service.domain.qa.ports import QAStore
from qa_service.domain.qa.result import Err, Ok, Result

logger = logging.getLogger(__name__)


class AddAnswerUseCase:
    """Creates an answer for an existing question.

    The existence check and the insert happen in one store call,
    so a concurrent delete cannot slip in between them.
    """

    def __init__(self, store: QAStore) -> None:
        self._store = store

    async def execute(self, command: AddAnswerCommand) -> Result[AnswerResult]:
        """Run the answer use case.

        Args:
            command: The target question id and answer content.

        Returns:
            Ok(new answer) or Err(QuestionNotFoundError).
        """
        answer = Answer(
            id=AnswerId.generate(),
            content=command.content,
            question_id=QuestionId(command.question_id),
        )
        added = await self._store.add_answer(answer)
        if isinstance(added, Err):
            logger.info(
                "Rejected answer for unknown question id=%s", command.question_id
            )
            return added

        logger.info(
            "Added answer id=%s to question id=%s", answer.id, command.question_id
        )
        return Ok(answer_to_result(added.value))
