"""
Typed result values for fallible domain operations.

Store and pagination operations return ``Ok(value)`` or ``Err(error)``
instead of raising, so failures travel through use cases as plain
values and are turned into responses at a single mapping point.
"""

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

from qa_service.domain.qa.errors import QADomainError

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful outcome carrying a value."""

    value: T


@dataclass(frozen=True)
class Err:
    """Failed outcome carrying a domain error."""

    error: QADomainError


Result = Union[Ok[T], Err]
