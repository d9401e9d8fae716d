"""
Tests for the qa domain layer.

Tests entities, error classes and the pagination resolver in isolation.
No external dependencies or IO required.
"""

import pytest

from qa_service.domain.qa.entities import (
    Answer,
    AnswerId,
    Pagination,
    Question,
    QuestionId,
)
from qa_service.domain.qa.errors import (
    InvalidIdentifierError,
    MissingParametersError,
    ParseError,
    QADomainError,
    QuestionNotFoundError,
    RangeError,
)
from qa_service.domain.qa.pagination import extract_pagination, paginate
from qa_service.domain.qa.result import Err, Ok


class TestQuestionId:
    """Tests for the QuestionId value object."""

    @pytest.mark.parametrize("raw", ["1", "abc", "q-42", " ", "ünï"])
    def test_non_empty_string_accepted(self, raw: str) -> None:
        assert QuestionId(raw).value == raw

    def test_empty_string_rejected(self) -> None:
        with pytest.raises(InvalidIdentifierError) as exc_info:
            QuestionId("")
        assert "question id" in exc_info.value.message

    def test_equality_and_hash_follow_raw_string(self) -> None:
        assert QuestionId("7") == QuestionId("7")
        assert QuestionId("7") != QuestionId("8")
        assert len({QuestionId("7"), QuestionId("7"), QuestionId("8")}) == 2

    def test_str_is_raw_value(self) -> None:
        assert str(QuestionId("q1")) == "q1"


class TestAnswerId:
    """Tests for the AnswerId value object."""

    def test_generate_returns_distinct_ids(self) -> None:
        ids = {AnswerId.generate() for _ in range(100)}
        assert len(ids) == 100

    def test_generated_id_is_uuid4_text(self) -> None:
        value = AnswerId.generate().value
        assert len(value) == 36
        assert value[14] == "4"


class TestEntities:
    """Tests for Question and Answer records."""

    def test_question_tags_default_to_none(self) -> None:
        question = Question(id=QuestionId("1"), title="t", content="c")
        assert question.tags is None

    def test_answer_keeps_question_reference(self) -> None:
        answer = Answer(
            id=AnswerId("a1"), content="yes", question_id=QuestionId("1")
        )
        assert answer.question_id == QuestionId("1")


class TestDomainErrors:
    """Tests for domain error classes."""

    def test_parse_error_message_names_value(self) -> None:
        err = ParseError("start", "abc")
        assert err.parameter == "start"
        assert err.value == "abc"
        assert "'abc'" in err.message
        assert "start" in err.message

    def test_question_not_found_message_names_id(self) -> None:
        err = QuestionNotFoundError("99")
        assert err.question_id == "99"
        assert err.message == "Question not found: 99"

    def test_range_error_carries_bounds(self) -> None:
        err = RangeError(start=2, end=9, length=3)
        assert (err.start, err.end, err.length) == (2, 9, 3)
        assert "length=3" in err.message

    def test_all_errors_share_base(self) -> None:
        for err in (
            ParseError("end", "x"),
            MissingParametersError(),
            RangeError(0, 1, 0),
            InvalidIdentifierError("question id"),
            QuestionNotFoundError("1"),
        ):
            assert isinstance(err, QADomainError)
            assert str(err) == err.message


class TestExtractPagination:
    """Tests for the pagination resolver."""

    def test_both_parameters_parsed(self) -> None:
        result = extract_pagination({"start": "0", "end": "2"})
        assert result == Ok(Pagination(start=0, end=2))

    def test_only_start_is_missing_parameters(self) -> None:
        result = extract_pagination({"start": "1"})
        assert isinstance(result, Err)
        assert isinstance(result.error, MissingParametersError)

    def test_only_end_is_missing_parameters(self) -> None:
        result = extract_pagination({"end": "1"})
        assert isinstance(result, Err)
        assert isinstance(result.error, MissingParametersError)

    def test_unrelated_parameters_are_missing_parameters(self) -> None:
        result = extract_pagination({"limit": "10"})
        assert isinstance(result, Err)
        assert isinstance(result.error, MissingParametersError)

    def test_non_numeric_start_is_parse_error(self) -> None:
        result = extract_pagination({"start": "abc", "end": "2"})
        assert isinstance(result, Err)
        assert isinstance(result.error, ParseError)
        assert result.error.value == "abc"
        assert result.error.parameter == "start"

    def test_non_numeric_end_is_parse_error(self) -> None:
        result = extract_pagination({"start": "0", "end": "two"})
        assert isinstance(result, Err)
        assert result.error.parameter == "end"

    @pytest.mark.parametrize("raw", ["-1", "+1", " 1", "1.5", "", "1_0", "²"])
    def test_rejects_non_plain_integers(self, raw: str) -> None:
        result = extract_pagination({"start": raw, "end": "3"})
        assert isinstance(result, Err)
        assert isinstance(result.error, ParseError)

    def test_inverted_range_still_parses(self) -> None:
        assert extract_pagination({"start": "5", "end": "1"}) == Ok(
            Pagination(start=5, end=1)
        )


class TestPaginate:
    """Tests for slicing with a resolved pagination."""

    def test_half_open_slice(self) -> None:
        assert paginate(["a", "b", "c"], Pagination(0, 2)) == Ok(["a", "b"])

    def test_empty_slice_at_end(self) -> None:
        assert paginate(["a", "b", "c"], Pagination(3, 3)) == Ok([])

    def test_end_past_length_is_range_error(self) -> None:
        result = paginate(["a", "b", "c"], Pagination(1, 4))
        assert isinstance(result, Err)
        assert isinstance(result.error, RangeError)
        assert result.error.length == 3

    def test_start_after_end_is_range_error(self) -> None:
        result = paginate(["a", "b", "c"], Pagination(2, 1))
        assert isinstance(result, Err)
        assert isinstance(result.error, RangeError)
