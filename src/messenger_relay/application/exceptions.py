from __future__ import annotations

from typing import ClassVar

from messenger_relay.domain.value_objects.enums import ResultStatus


class AppError(Exception):
    """Base application error."""

    status: ClassVar[ResultStatus] = ResultStatus.INTERNAL_ERROR
    default_detail: ClassVar[str] = "Internal server error"

    def __init__(self, detail: str = "") -> None:
        self.detail = detail or self.default_detail
        super().__init__(self.detail)


class BadRequestError(AppError):
    status = ResultStatus.BAD_REQUEST
    default_detail = "Bad request"


class UnauthorizedError(AppError):
    status = ResultStatus.UNAUTHORIZED
    default_detail = "Unauthorized"


class ConflictError(AppError):
    status = ResultStatus.CONFLICT
    default_detail = "User already exist"


class NotFoundError(AppError):
    status = ResultStatus.NOT_FOUND
    default_detail = "Not found"


class NotImplementedActionError(AppError):
    status = ResultStatus.NOT_IMPLEMENTED
    default_detail = "Not implemented"


class StorageError(AppError):
    """Persistence failure. The detail is for logs only, never for clients."""
