"""
FastAPI router for the qa bounded context.

All routes delegate to use cases. No business logic here.
Input validation is handled by Pydantic schemas.
Use cases return ``Ok``/``Err`` values; an ``Err`` is turned into a
response only through the shared error mapper.
"""

from collections.abc import Callable
from typing import Any

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from qa_service.application.qa.add_answer import AddAnswerUseCase
from qa_service.application.qa.add_question import AddQuestionUseCase
from qa_service.application.qa.delete_question import DeleteQuestionUseCase
from qa_service.application.qa.dtos import (
    AddAnswerCommand,
    AddQuestionCommand,
    AnswerResult,
    DeleteQuestionCommand,
    GetQuestionQuery,
    ListAnswersQuery,
    ListQuestionsQuery,
    QuestionResult,
    UpdateQuestionCommand,
)
from qa_service.application.qa.get_question import GetQuestionUseCase
from qa_service.application.qa.list_answers import ListAnswersUseCase
from qa_service.application.qa.list_questions import ListQuestionsUseCase
from qa_service.application.qa.update_question import UpdateQuestionUseCase
from qa_service.domain.qa.result import Err, Result
from qa_service.interfaces.qa.dependencies import (
    get_add_answer_use_case,
    get_add_question_use_case,
    get_delete_question_use_case,
    get_list_answers_use_case,
    get_list_questions_use_case,
    get_question_use_case,
    get_update_question_use_case,
)
from qa_service.interfaces.qa.schemas import (
    AcknowledgmentResponse,
    AnswerRequest,
    AnswerResponse,
    ErrorResponse,
    QuestionRequest,
    QuestionResponse,
)
from qa_service.shared.errors.handlers import error_response

router = APIRouter(prefix="/questions", tags=["questions"])

NOT_FOUND = {404: {"model": ErrorResponse}}
BAD_BODY = {422: {"model": ErrorResponse}}


def _respond(result: Result[Any], on_ok: Callable[[Any], Any]) -> Any:
    if isinstance(result, Err):
        return error_response(result.error)
    return on_ok(result.value)


def _question_response(result: QuestionResult) -> QuestionResponse:
    return QuestionResponse(
        id=result.id, title=result.title, content=result.content, tags=result.tags
    )


def _answer_response(result: AnswerResult) -> AnswerResponse:
    return AnswerResponse(
        id=result.id, content=result.content, question_id=result.question_id
    )


@router.get(
    "",
    response_model=list[QuestionResponse],
    response_model_exclude_none=True,
    responses={400: {"model": ErrorResponse}},
    summary="List questions",
    description=(
        "Return all questions sorted by id. Pass both `start` and `end` "
        "to get the half-open slice [start, end)."
    ),
)
async def list_questions(
    request: Request,
    use_case: ListQuestionsUseCase = Depends(get_list_questions_use_case),
) -> list[QuestionResponse] | JSONResponse:
    """List questions, optionally paginated."""
    query = ListQuestionsQuery(params=dict(request.query_params))
    result = await use_case.execute(query)
    return _respond(result, lambda qs: [_question_response(q) for q in qs])


@router.get(
    "/{question_id}",
    response_model=QuestionResponse,
    response_model_exclude_none=True,
    responses=NOT_FOUND,
    summary="Get a question",
)
async def get_question(
    question_id: str,
    use_case: GetQuestionUseCase = Depends(get_question_use_case),
) -> QuestionResponse | JSONResponse:
    """Return a single question by id."""
    result = await use_case.execute(GetQuestionQuery(question_id=question_id))
    return _respond(result, _question_response)


@router.post(
    "",
    status_code=201,
    response_model=AcknowledgmentResponse,
    response_model_exclude_none=True,
    responses=BAD_BODY,
    summary="Create a question",
    description="Insert a question. An existing question with the same id is replaced.",
)
async def add_question(
    body: QuestionRequest,
    use_case: AddQuestionUseCase = Depends(get_add_question_use_case),
) -> AcknowledgmentResponse:
    """Create or replace a question."""
    command = AddQuestionCommand(
        id=body.id, title=body.title, content=body.content, tags=body.tags
    )
    await use_case.execute(command)
    return AcknowledgmentResponse(message="Question added")


@router.put(
    "/{question_id}",
    response_model=AcknowledgmentResponse,
    response_model_exclude_none=True,
    responses={**NOT_FOUND, **BAD_BODY},
    summary="Update a question",
    description="Replace an existing question. Never creates one.",
)
async def update_question(
    question_id: str,
    body: QuestionRequest,
    use_case: UpdateQuestionUseCase = Depends(get_update_question_use_case),
) -> AcknowledgmentResponse | JSONResponse:
    """Replace the question stored under the path id."""
    command = UpdateQuestionCommand(
        question_id=question_id,
        title=body.title,
        content=body.content,
        tags=body.tags,
    )
    result = await use_case.execute(command)
    return _respond(result, lambda _: AcknowledgmentResponse(message="Question updated"))


@router.delete(
    "/{question_id}",
    response_model=AcknowledgmentResponse,
    response_model_exclude_none=True,
    responses=NOT_FOUND,
    summary="Delete a question",
    description="Remove a question. Its answers are kept.",
)
async def delete_question(
    question_id: str,
    use_case: DeleteQuestionUseCase = Depends(get_delete_question_use_case),
) -> AcknowledgmentResponse | JSONResponse:
    """Delete a question by id."""
    result = await use_case.execute(DeleteQuestionCommand(question_id=question_id))
    return _respond(result, lambda _: AcknowledgmentResponse(message="Question deleted"))


@router.post(
    "/{question_id}/answers",
    status_code=201,
    response_model=AcknowledgmentResponse,
    response_model_exclude_none=True,
    responses={**NOT_FOUND, **BAD_BODY},
    summary="Answer a question",
)
async def add_answer(
    question_id: str,
    body: AnswerRequest,
    use_case: AddAnswerUseCase = Depends(get_add_answer_use_case),
) -> AcknowledgmentResponse | JSONResponse:
    """Attach a new answer to an existing question."""
    command = AddAnswerCommand(question_id=question_id, content=body.content)
    result = await use_case.execute(command)
    return _respond(
        result, lambda answer: AcknowledgmentResponse(message="Answer added", id=answer.id)
    )


@router.get(
    "/{question_id}/answers",
    response_model=list[AnswerResponse],
    responses=NOT_FOUND,
    summary="List answers of a question",
)
async def list_answers(
    question_id: str,
    use_case: ListAnswersUseCase = Depends(get_list_answers_use_case),
) -> list[AnswerResponse] | JSONResponse:
    """Return the answers attached to a question."""
    result = await use_case.execute(ListAnswersQuery(question_id=question_id))
    return _respond(result, lambda answers: [_answer_response(a) for a in answers])
