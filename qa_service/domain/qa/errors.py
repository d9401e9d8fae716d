"""
Domain-specific errors for the qa bounded context.

All failure kinds produced by the domain layer are defined here.
Store and pagination failures are returned inside ``Err`` values,
not raised; identifier validation raises at construction time.
These are mapped to HTTP responses at the interface layer.
No framework imports allowed.
"""


class QADomainError(Exception):
    """Base error for all qa domain errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class ParseError(QADomainError):
    """Raised when a query parameter is not a non-negative integer."""

    def __init__(self, parameter: str, value: str) -> None:
        super().__init__(f"Cannot parse parameter {parameter}: {value!r}")
        self.parameter = parameter
        self.value = value


class MissingParametersError(QADomainError):
    """Raised when pagination is requested without both start and end."""

    def __init__(self) -> None:
        super().__init__("Missing parameters: both 'start' and 'end' are required")


class RangeError(QADomainError):
    """Raised when a pagination range does not fit the result sequence."""

    def __init__(self, start: int, end: int, length: int) -> None:
        super().__init__(
            f"Range out of bounds: start={start}, end={end}, length={length}"
        )
        self.start = start
        self.end = end
        self.length = length


class InvalidIdentifierError(QADomainError):
    """Raised when an identifier is built from an empty string."""

    def __init__(self, kind: str) -> None:
        super().__init__(f"Invalid {kind}: must be a non-empty string")
        self.kind = kind


class QuestionNotFoundError(QADomainError):
    """Raised when a question id is not present in the store."""

    def __init__(self, question_id: str) -> None:
        super().__init__(f"Question not found: {question_id}")
        self.question_id = question_id
