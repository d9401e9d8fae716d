"""
Adapter: Seed fixture for the questions collection.

Reads a static JSON file, loaded once when the application is built.
The file is an object mapping question id to a question record:

    {"1": {"id": "1", "title": "...", "content": "...", "tags": ["faq"]}}
"""

import json
import logging
from pathlib import Path
from typing import Optional, Union

from qa_service.domain.qa.entities import Question, QuestionId
from qa_service.domain.qa.errors import InvalidIdentifierError

logger = logging.getLogger(__name__)

DEFAULT_SEED_PATH = Path(__file__).with_name("questions.json")


def _question_from_record(record: dict) -> Question:
    tags = record.get("tags")
    if isinstance(tags, str):
        raise TypeError("tags must be a list of strings")
    return Question(
        id=QuestionId(str(record["id"])),
        title=record["title"],
        content=record["content"],
        tags=tuple(tags) if tags is not None else None,
    )


def load_seed_questions(path: Optional[Union[str, Path]] = None) -> list[Question]:
    """Load the seed questions from a JSON fixture.

    Args:
        path: Fixture location. Defaults to the bundled questions.json.

    Returns:
        The questions in file order.

    Raises:
        ValueError: If the file is not a JSON object of question records.
    """
    seed_path = Path(path) if path is not None else DEFAULT_SEED_PATH
    with seed_path.open("r", encoding="utf-8") as f:
        raw = json.load(f)

    if not isinstance(raw, dict):
        raise ValueError(f"Seed file {seed_path} must contain a JSON object")

    questions = []
    for key, record in raw.items():
        try:
            question = _question_from_record(record)
        except (AttributeError, KeyError, TypeError, InvalidIdentifierError) as exc:
            raise ValueError(f"Invalid seed record {key!r} in {seed_path}") from exc
        if question.id.value != key:
            logger.warning(
                "Seed key %r does not match record id %r; using record id",
                key,
                question.id.value,
            )
        questions.append(question)

    logger.info("Loaded %d seed questions from %s", len(questions), seed_path)
    return questions
