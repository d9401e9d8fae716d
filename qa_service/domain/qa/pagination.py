"""
Pagination resolver for question listings.

Turns raw query parameters into a ``Pagination`` and applies it to a
sequence. Both steps return ``Result`` values; nothing here raises.
"""

from collections.abc import Mapping, Sequence
from typing import TypeVar

from qa_service.domain.qa.entities import Pagination
from qa_service.domain.qa.errors import MissingParametersError, ParseError, RangeError
from qa_service.domain.qa.result import Err, Ok, Result

T = TypeVar("T")

START_PARAM = "start"
END_PARAM = "end"


def _parse_index(name: str, raw: str) -> Result[int]:
    # ASCII digits only: rejects signs, whitespace, underscores and "²"
    if not raw.isascii() or not raw.isdigit():
        return Err(ParseError(name, raw))
    return Ok(int(raw))


def extract_pagination(params: Mapping[str, str]) -> Result[Pagination]:
    """Build a Pagination from query parameters.

    Args:
        params: Query parameter name to raw string value.

    Returns:
        Ok(Pagination) when both ``start`` and ``end`` parse as
        non-negative integers. Err(ParseError) naming the first bad
        value, or Err(MissingParametersError) when either key is absent.
    """
    if START_PARAM not in params or END_PARAM not in params:
        return Err(MissingParametersError())

    start = _parse_index(START_PARAM, params[START_PARAM])
    if isinstance(start, Err):
        return start
    end = _parse_index(END_PARAM, params[END_PARAM])
    if isinstance(end, Err):
        return end

    return Ok(Pagination(start=start.value, end=end.value))


def paginate(items: Sequence[T], pagination: Pagination) -> Result[list[T]]:
    """Slice ``items`` to ``[start, end)``.

    Returns:
        Ok(slice), or Err(RangeError) if ``start > end`` or
        ``end > len(items)``.
    """
    if pagination.start > pagination.end or pagination.end > len(items):
        return Err(RangeError(pagination.start, pagination.end, len(items)))
    return Ok(list(items[pagination.start : pagination.end]))
