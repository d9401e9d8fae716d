"""
Port interfaces (ABCs) for the qa bounded context.

Ports define the contracts that the domain requires from the outside world.
Infrastructure adapters implement these interfaces.
The domain layer never depends on concrete implementations.
"""

from abc import ABC, abstractmethod

from qa_service.domain.qa.entities import Answer, Question, QuestionId
from qa_service.domain.qa.result import Result


class QAStore(ABC):
    """Port for the repository owning all questions and answers.

    Implementations must be safe under concurrent use from many
    request handlers. A mutation is visible to every later read
    once the coroutine returns.
    """

    @abstractmethod
    async def list_questions(self) -> list[Question]:
        """Return a snapshot of all questions, in no particular order."""
        raise NotImplementedError

    @abstractmethod
    async def get_question(self, question_id: QuestionId) -> Result[Question]:
        """Return the question, or Err(QuestionNotFoundError)."""
        raise NotImplementedError

    @abstractmethod
    async def put_question(self, question: Question) -> None:
        """Insert a question, replacing any record with the same id."""
        raise NotImplementedError

    @abstractmethod
    async def update_question(
        self, question_id: QuestionId, question: Question
    ) -> Result[Question]:
        """Replace an existing question. Never creates one.

        Returns:
            Ok(stored question), or Err(QuestionNotFoundError) with the
            store left unchanged.
        """
        raise NotImplementedError

    @abstractmethod
    async def delete_question(self, question_id: QuestionId) -> Result[Question]:
        """Remove a question and return it, or Err(QuestionNotFoundError)."""
        raise NotImplementedError

    @abstractmethod
    async def question_exists(self, question_id: QuestionId) -> bool:
        """Return True if a question with this id is stored."""
        raise NotImplementedError

    @abstractmethod
    async def put_answer(self, answer: Answer) -> None:
        """Insert an answer without checking its question reference."""
        raise NotImplementedError

    @abstractmethod
    async def add_answer(self, answer: Answer) -> Result[Answer]:
        """Insert an answer if its question exists, as one atomic step.

        Returns:
            Ok(answer), or Err(QuestionNotFoundError) with nothing inserted.
        """
        raise NotImplementedError

    @abstractmethod
    async def list_answers(self, question_id: QuestionId) -> list[Answer]:
        """Return the answers that reference a question id."""
        raise NotImplementedError

    @abstractmethod
    async def count_answers(self) -> int:
        """Return the number of stored answers."""
        raise NotImplementedError
