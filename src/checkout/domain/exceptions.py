"""Domain-level exceptions.

Every rule violation raised by the domain or the bundled collaborators is a
subclass of DomainException so the CLI layer can catch them uniformly.
Business failures during checkout are *not* raised; they surface as a
``False`` return from ``OrderCoordinator.checkout()``.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class InvalidEmailError(ValidationError):
    """The customer email is empty or malformed."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""
