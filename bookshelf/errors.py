"""Application errors and their HTTP status codes."""

from __future__ import annotations

import logging
from http import HTTPStatus
from typing import ClassVar

from starlette.responses import Response

logger = logging.getLogger(__name__)


class AppError(Exception):
    """Base class of every error the application reports."""

    status_code: ClassVar[HTTPStatus] = HTTPStatus.INTERNAL_SERVER_ERROR

    def to_response(self) -> Response:
        """Turn the error into an empty response with its status code."""
        if self.status_code == HTTPStatus.INTERNAL_SERVER_ERROR:
            logger.error("Unexpected error happened: %s", self, exc_info=self)
        return Response(status_code=int(self.status_code))


class _DetailError(AppError):
    """An error whose message is the text of its detail."""

    def __init__(self, detail: object) -> None:
        super().__init__(str(detail))
        self.detail = detail
        if isinstance(detail, BaseException):
            self.__cause__ = detail


class _FixedMessageError(AppError):
    """An error with a fixed message and an optional underlying cause."""

    message: ClassVar[str] = ""

    def __init__(self, source: BaseException | None = None) -> None:
        super().__init__(self.message)
        self.source = source
        if source is not None:
            self.__cause__ = source


class UnprocessableEntityError(_DetailError):
    status_code = HTTPStatus.UNPROCESSABLE_ENTITY


class EntityNotFoundError(_DetailError):
    status_code = HTTPStatus.NOT_FOUND


class ValidationError(_DetailError):
    status_code = HTTPStatus.BAD_REQUEST


class TransactionError(_FixedMessageError):
    message = "トランザクションを実行できませんでした"


class SpecificOperationError(_FixedMessageError):
    message = "データベース処理中にエラーが発生しました"


class NoRowsAffectedError(AppError):
    def __init__(self, detail: object) -> None:
        super().__init__(f"No rows affected: {detail}")
        self.detail = detail


class KeyValueStoreError(_DetailError):
    pass


class BcryptError(_DetailError):
    pass


class ConvertToUuidError(_DetailError):
    status_code = HTTPStatus.BAD_REQUEST


class UnauthenticatedError(_FixedMessageError):
    status_code = HTTPStatus.FORBIDDEN
    message = "ログインに失敗しました"


class UnauthorizedError(_FixedMessageError):
    status_code = HTTPStatus.UNAUTHORIZED
    message = "認可情報が誤っています"


class ForbiddenOperationError(_FixedMessageError):
    status_code = HTTPStatus.FORBIDDEN
    message = "許可されていない操作です"


class ConversionEntityError(_DetailError):
    pass