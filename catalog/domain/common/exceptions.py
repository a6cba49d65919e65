"""
Domain layer exceptions.

These exceptions represent domain-level errors raised when an entity
invariant is broken. They are translated to responses by the
infrastructure layer.
"""


class DomainError(Exception):
    """
    Base exception for all domain errors.

    All domain exceptions should inherit from this class
    so they can be caught and handled uniformly.
    """

    def __init__(self, message: str, details: dict[str, object] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} - {self.details}"
        return self.message


class EntityValidationError(DomainError):
    """
    Raised when an entity fails validation on construction or mutation.

    The message is the exact, client-facing validation message, e.g.
    "Name should be at least 3 characters long".
    """

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field
