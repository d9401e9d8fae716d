"""
Errors that originate in the transport layer rather than the domain.

Mapped to HTTP responses by the same handlers as domain errors.
"""


class CorsForbiddenError(Exception):
    """Raised when a cross-origin request is not allowed by the CORS policy."""

    def __init__(self, reason: str) -> None:
        self.message = f"CORS request forbidden: {reason}"
        super().__init__(self.message)
        self.reason = reason
