class DomainError(Exception):
    """Base class for errors raised by the CMS domain and services."""

    status_code = 400

    def __init__(self, message: str, *, status_code: int | None = None):
        super().__init__(message)
        if status_code is not None:
            self.status_code = status_code


class InvariantViolation(DomainError):
    status_code = 400


class NotFound(DomainError):
    status_code = 404


class SystemPageProtected(DomainError):
    status_code = 403


class MutationFailed(DomainError):
    """A store write was rejected; the surrounding transaction was rolled back."""

    status_code = 500
