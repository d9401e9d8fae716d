"""
Use case: List questions, optionally paginated.

Input: ListQuestionsQuery (raw query parameters)
Output: Result[list[QuestionResult]]
Side effects: None.
Failure cases: MissingParametersError, ParseError, RangeError.
"""

import logging

from qa_service.application.qa.dtos import ListQuestionsQuery, QuestionResult
from qa_service.application.qa.mappers import question_to_result
from qa_service.domain.qa.pagination import extract_pagination, paginate
from qa_service.domain.qa.ports import QAStore
from qa_service.domain.qa.result import Err, Ok, Result

logger = logging.getLogger(__name__)


class ListQuestionsUseCase:
    """Orchestrates question listing.

    The snapshot is sorted by id before slicing so the same
    parameters give the same page for the same store contents.
    An empty parameter set returns every question.
    """

    def __init__(self, store: QAStore) -> None:
        self._store = store

    async def execute(self, query: ListQuestionsQuery) -> Result[list[QuestionResult]]:
        """Run the list use case.

        Args:
            query: The raw query parameters of the request.

        Returns:
            Ok(questions) or Err with a pagination error.
        """
        pagination = None
        if query.params:
            resolved = extract_pagination(query.params)
            if isinstance(resolved, Err):
                return resolved
            pagination = resolved.value

        questions = sorted(
            await self._store.list_questions(), key=lambda q: q.id.value
        )

        if pagination is not None:
            page = paginate(questions, pagination)
            if isinstance(page, Err):
                return page
            questions = page.value

        logger.info(
            "Listing %d questions (pagination=%s)", len(questions), pagination
        )
        return Ok([question_to_result(q) for q in questions])
