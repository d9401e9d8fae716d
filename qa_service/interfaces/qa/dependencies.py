"""
Dependency injection for the qa bounded context.

Provides FastAPI dependency functions that wire the application's
store into use cases via constructor injection. The store itself is
built once by ``create_app`` and kept on ``app.state``; nothing here
holds module-level state.
"""

from fastapi import Depends, Request

from qa_service.application.qa.add_answer import AddAnswerUseCase
from qa_service.application.qa.add_question import AddQuestionUseCase
from qa_service.application.qa.delete_question import DeleteQuestionUseCase
from qa_service.application.qa.get_question import GetQuestionUseCase
from qa_service.application.qa.list_answers import ListAnswersUseCase
from qa_service.application.qa.list_questions import ListQuestionsUseCase
from qa_service.application.qa.update_question import UpdateQuestionUseCase
from qa_service.domain.qa.ports import QAStore


def get_store(request: Request) -> QAStore:
    """Return the store owned by the running application."""
    return request.app.state.store


def get_list_questions_use_case(
    store: QAStore = Depends(get_store),
) -> ListQuestionsUseCase:
    """Build ListQuestionsUseCase with the shared store."""
    return ListQuestionsUseCase(store=store)


def get_question_use_case(store: QAStore = Depends(get_store)) -> GetQuestionUseCase:
    """Build GetQuestionUseCase with the shared store."""
    return GetQuestionUseCase(store=store)


def get_add_question_use_case(
    store: QAStore = Depends(get_store),
) -> AddQuestionUseCase:
    """Build AddQuestionUseCase with the shared store."""
    return AddQuestionUseCase(store=store)


def get_update_question_use_case(
    store: QAStore = Depends(get_store),
) -> UpdateQuestionUseCase:
    """Build UpdateQuestionUseCase with the shared store."""
    return UpdateQuestionUseCase(store=store)


def get_delete_question_use_case(
    store: QAStore = Depends(get_store),
) -> DeleteQuestionUseCase:
    """Build DeleteQuestionUseCase with the shared store."""
    return DeleteQuestionUseCase(store=store)


def get_add_answer_use_case(store: QAStore = Depends(get_store)) -> AddAnswerUseCase:
    """Build AddAnswerUseCase with the shared store."""
    return AddAnswerUseCase(store=store)


def get_list_answers_use_case(
    store: QAStore = Depends(get_store),
) -> ListAnswersUseCase:
    """Build ListAnswersUseCase with the shared store."""
    return ListAnswersUseCase(store=store)
