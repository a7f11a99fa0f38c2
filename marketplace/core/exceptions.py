"""Custom exceptions for the marketplace."""

from fastapi import HTTPException, status


class MarketplaceError(Exception):
    """Base exception for marketplace errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class NotFoundError(MarketplaceError):
    """Raised when a referenced record does not exist."""

    def __init__(self, resource: str, resource_id: str):
        self.resource = resource
        self.resource_id = resource_id
        super().__init__(f"{resource} {resource_id} not found")


class PermissionDeniedError(MarketplaceError):
    """Raised when the caller may not act on a record."""


class InvalidTransitionError(MarketplaceError):
    """Raised when an application status change is not allowed."""

    def __init__(self, current: str, requested: str, reason: str | None = None):
        self.current = current
        self.requested = requested
        message = f"Cannot change application status from {current} to {requested}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class DuplicateApplicationError(MarketplaceError):
    """Raised when a freelancer applies to the same job twice."""

    def __init__(self, job_id: str, freelancer_id: str):
        self.job_id = job_id
        self.freelancer_id = freelancer_id
        super().__init__(
            f"Freelancer {freelancer_id} already applied to job {job_id}"
        )


class InvalidInputError(MarketplaceError):
    """Raised when input passes schema validation but breaks a business rule."""


class StorageError(MarketplaceError):
    """Raised when the resume store cannot read or write an object."""


class EmailDispatchError(MarketplaceError):
    """Raised when the email API request fails."""

    def __init__(self, service: str, status_code: int, detail: str):
        self.service = service
        self.status_code = status_code
        self.detail = detail
        super().__init__(f"{service} API error ({status_code}): {detail}")


class AuthenticationError(MarketplaceError):
    """Raised when authentication fails."""

    def __init__(self, detail: str = "Authentication failed"):
        self.detail = detail
        super().__init__(detail)


def unauthorized_exception(detail: str = "Not authenticated") -> HTTPException:
    """Return a 401 Unauthorized exception."""
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def forbidden_exception(detail: str = "Not enough permissions") -> HTTPException:
    """Return a 403 Forbidden exception."""
    return HTTPException(
        status_code=status.HTTP_403_FORBIDDEN,
        detail=detail,
    )


def not_found_exception(detail: str = "Resource not found") -> HTTPException:
    """Return a 404 Not Found exception."""
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=detail,
    )


def to_http_exception(error: MarketplaceError) -> HTTPException:
    """Translate a domain error into the matching HTTP error."""
    if isinstance(error, AuthenticationError):
        return unauthorized_exception(error.detail)
    if isinstance(error, PermissionDeniedError):
        return forbidden_exception(error.message)
    if isinstance(error, NotFoundError):
        return not_found_exception(error.message)
    if isinstance(error, (InvalidTransitionError, DuplicateApplicationError)):
        return HTTPException(status_code=status.HTTP_409_CONFLICT, detail=error.message)
    if isinstance(error, InvalidInputError):
        return HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=error.message
        )
    if isinstance(error, EmailDispatchError):
        return HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=error.message)
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=error.message
    )
