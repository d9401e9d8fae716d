"""
Pydantic schemas for qa API request/response validation.

These schemas enforce input validation and define the API contract.
Field names match the stored records; optional fields are omitted
from responses when null.
No business logic belongs here.
"""

from pydantic import BaseModel, Field

QUESTION_ID_DESCRIPTION = "Caller-supplied question identifier"


class QuestionRequest(BaseModel):
    """Request schema for creating or replacing a question.

    Attributes:
        id: Question id (non-empty). On update the path id wins.
        title: Question title.
        content: Question body text.
        tags: Optional list of tags.
    """

    id: str = Field(..., min_length=1, description=QUESTION_ID_DESCRIPTION)
    title: str
    content: str
    tags: list[str] | None = Field(default=None, description="Optional tags")


class QuestionResponse(BaseModel):
    """A single question in the response."""

    id: str
    title: str
    content: str
    tags: list[str] | None = None


class AnswerRequest(BaseModel):
    """Request schema for answering a question.

    Attributes:
        content: Answer body text.
    """

    content: str


class AnswerResponse(BaseModel):
    """A single answer in the response."""

    id: str
    content: str
    question_id: str


class AcknowledgmentResponse(BaseModel):
    """Response schema for successful mutations."""

    message: str
    id: str | None = Field(default=None, description="Id of the created entity")


class ErrorResponse(BaseModel):
    """Standard error response schema."""

    error: str
    detail: str | None = None


class HealthResponse(BaseModel):
    """Response schema for health check endpoint."""

    status: str
    version: str
    questions: int
    answers: int
