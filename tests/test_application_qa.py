"""
Tests for the qa application layer (use cases).

Most tests run use cases against a real InMemoryQAStore; a few use a
mocked port to check that failures stop orchestration early.
"""

from unittest.mock import AsyncMock

import pytest

from qa_service.application.qa.add_answer import AddAnswerUseCase
from qa_service.application.qa.add_question import AddQuestionUseCase
from qa_service.application.qa.delete_question import DeleteQuestionUseCase
from qa_service.application.qa.dtos import (
    AddAnswerCommand,
    AddQuestionCommand,
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
from qa_service.domain.qa.entities import Question, QuestionId
from qa_service.domain.qa.errors import (
    InvalidIdentifierError,
    MissingParametersError,
    ParseError,
    QuestionNotFoundError,
    RangeError,
)
from qa_service.domain.qa.ports import QAStore
from qa_service.domain.qa.result import Err, Ok
from qa_service.infrastructure.qa.memory_store import InMemoryQAStore


def _question(qid: str) -> Question:
    return Question(id=QuestionId(qid), title=f"Q{qid}", content=f"Content {qid}")


@pytest.fixture
def store() -> InMemoryQAStore:
    """Store seeded out of id order to check sorting."""
    return InMemoryQAStore(questions=[_question("3"), _question("1"), _question("2")])


class TestListQuestionsUseCase:
    """Tests for the ListQuestionsUseCase."""

    @pytest.mark.asyncio
    async def test_no_parameters_returns_everything(self, store):
        result = await ListQuestionsUseCase(store).execute(ListQuestionsQuery())
        assert isinstance(result, Ok)
        assert [q.id for q in result.value] == ["1", "2", "3"]

    @pytest.mark.asyncio
    async def test_first_two_in_id_order(self, store):
        query = ListQuestionsQuery(params={"start": "0", "end": "2"})
        result = await ListQuestionsUseCase(store).execute(query)
        assert [q.id for q in result.value] == ["1", "2"]

    @pytest.mark.asyncio
    async def test_repeated_calls_return_same_page(self, store):
        use_case = ListQuestionsUseCase(store)
        query = ListQuestionsQuery(params={"start": "1", "end": "3"})
        first = await use_case.execute(query)
        second = await use_case.execute(query)
        assert first == second

    @pytest.mark.asyncio
    async def test_only_start_fails(self, store):
        query = ListQuestionsQuery(params={"start": "0"})
        result = await ListQuestionsUseCase(store).execute(query)
        assert isinstance(result, Err)
        assert isinstance(result.error, MissingParametersError)

    @pytest.mark.asyncio
    async def test_bad_start_fails_with_value(self, store):
        query = ListQuestionsQuery(params={"start": "abc", "end": "2"})
        result = await ListQuestionsUseCase(store).execute(query)
        assert isinstance(result.error, ParseError)
        assert result.error.value == "abc"

    @pytest.mark.asyncio
    async def test_out_of_range_fails(self, store):
        query = ListQuestionsQuery(params={"start": "0", "end": "10"})
        result = await ListQuestionsUseCase(store).execute(query)
        assert isinstance(result.error, RangeError)

    @pytest.mark.asyncio
    async def test_bad_parameters_do_not_touch_store(self):
        port = AsyncMock(spec=QAStore)
        query = ListQuestionsQuery(params={"end": "2"})
        result = await ListQuestionsUseCase(port).execute(query)
        assert isinstance(result, Err)
        port.list_questions.assert_not_awaited()


class TestGetQuestionUseCase:
    """Tests for the GetQuestionUseCase."""

    @pytest.mark.asyncio
    async def test_existing(self, store):
        result = await GetQuestionUseCase(store).execute(GetQuestionQuery("2"))
        assert result == Ok(QuestionResult(id="2", title="Q2", content="Content 2"))

    @pytest.mark.asyncio
    async def test_missing(self, store):
        result = await GetQuestionUseCase(store).execute(GetQuestionQuery("42"))
        assert isinstance(result.error, QuestionNotFoundError)


class TestAddQuestionUseCase:
    """Tests for the AddQuestionUseCase."""

    @pytest.mark.asyncio
    async def test_new_question_is_stored(self, store):
        command = AddQuestionCommand(id="4", title="New", content="Body", tags=["x"])
        result = await AddQuestionUseCase(store).execute(command)

        assert result.tags == ["x"]
        stored = await store.get_question(QuestionId("4"))
        assert stored.value.tags == ("x",)

    @pytest.mark.asyncio
    async def test_existing_id_is_replaced(self, store):
        command = AddQuestionCommand(id="1", title="Replaced", content="New body")
        await AddQuestionUseCase(store).execute(command)

        stored = await store.get_question(QuestionId("1"))
        assert stored.value == Question(
            id=QuestionId("1"), title="Replaced", content="New body"
        )
        assert len(await store.list_questions()) == 3

    @pytest.mark.asyncio
    async def test_empty_id_rejected(self, store):
        command = AddQuestionCommand(id="", title="t", content="c")
        with pytest.raises(InvalidIdentifierError):
            await AddQuestionUseCase(store).execute(command)


class TestUpdateQuestionUseCase:
    """Tests for the UpdateQuestionUseCase."""

    @pytest.mark.asyncio
    async def test_existing_is_replaced(self, store):
        command = UpdateQuestionCommand(question_id="2", title="T", content="C")
        result = await UpdateQuestionUseCase(store).execute(command)

        assert result == Ok(QuestionResult(id="2", title="T", content="C"))

    @pytest.mark.asyncio
    async def test_missing_is_not_created(self, store):
        command = UpdateQuestionCommand(question_id="77", title="T", content="C")
        result = await UpdateQuestionUseCase(store).execute(command)

        assert isinstance(result.error, QuestionNotFoundError)
        assert not await store.question_exists(QuestionId("77"))


class TestDeleteQuestionUseCase:
    """Tests for the DeleteQuestionUseCase."""

    @pytest.mark.asyncio
    async def test_existing_is_removed(self, store):
        result = await DeleteQuestionUseCase(store).execute(DeleteQuestionCommand("3"))
        assert isinstance(result, Ok)
        assert len(await store.list_questions()) == 2

    @pytest.mark.asyncio
    async def test_missing_reports_not_found(self, store):
        result = await DeleteQuestionUseCase(store).execute(DeleteQuestionCommand("x"))
        assert isinstance(result.error, QuestionNotFoundError)
        assert len(await store.list_questions()) == 3


class TestAddAnswerUseCase:
    """Tests for the AddAnswerUseCase."""

    @pytest.mark.asyncio
    async def test_answer_added_with_fresh_id(self, store):
        use_case = AddAnswerUseCase(store)
        first = await use_case.execute(AddAnswerCommand("1", "first"))
        second = await use_case.execute(AddAnswerCommand("1", "second"))

        assert isinstance(first, Ok) and isinstance(second, Ok)
        assert first.value.id != second.value.id
        assert first.value.question_id == "1"
        assert await store.count_answers() == 2

    @pytest.mark.asyncio
    async def test_missing_question_adds_nothing(self, store):
        result = await AddAnswerUseCase(store).execute(AddAnswerCommand("9", "text"))
        assert isinstance(result.error, QuestionNotFoundError)
        assert await store.count_answers() == 0


class TestListAnswersUseCase:
    """Tests for the ListAnswersUseCase."""

    @pytest.mark.asyncio
    async def test_lists_answers_of_question(self, store):
        await AddAnswerUseCase(store).execute(AddAnswerCommand("1", "a"))
        await AddAnswerUseCase(store).execute(AddAnswerCommand("2", "b"))

        result = await ListAnswersUseCase(store).execute(ListAnswersQuery("1"))
        assert [a.content for a in result.value] == ["a"]

    @pytest.mark.asyncio
    async def test_missing_question(self, store):
        result = await ListAnswersUseCase(store).execute(ListAnswersQuery("9"))
        assert isinstance(result.error, QuestionNotFoundError)
