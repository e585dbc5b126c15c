"""
Domain exception hierarchy.

Services raise ``WorkforceError`` subclasses only. Storage adapters raise
``StoreError`` and event publishers raise ``PublishError``; services translate
the former and swallow the latter.
"""


class WorkforceError(Exception):
    """Base class for errors surfaced by the domain services."""

    code: str = "internal_error"
    status_code: int = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidArgumentError(WorkforceError):
    """Malformed identifier or field value."""

    code = "invalid_argument"
    status_code = 400


class NotFoundError(WorkforceError):
    """Referenced entity does not exist."""

    code = "not_found"
    status_code = 404


class ConflictError(WorkforceError):
    """Natural-key uniqueness violation."""

    code = "conflict"
    status_code = 409


class PersistenceError(WorkforceError):
    """Underlying store failed; the cause is chained, never exposed."""

    code = "persistence"
    status_code = 500


class StoreError(Exception):
    """Raised by repository implementations on storage failure."""


class ConstraintViolationError(StoreError):
    """Store rejected a write because of a unique or integrity constraint."""


class PublishError(Exception):
    """Raised by event publishers when an event could not be delivered."""
