import functools
from typing import Callable

from pydantic import ValidationError

from services.currency.domain import UnknownCurrencyError
from services.guide.domain import DatesUnavailableError
from services.hire.domain.exception import DatesAlreadyHiredError, InvalidTransitionError
from services.shared.domain.exception import (
    BusinessRuleViolationException,
    ConflictError,
    DomainException,
    DuplicateResourceException,
    OptimisticLockException,
    ResourceNotFoundException,
)
from services.shared.utils import api_response, error_body, get_logger

logger = get_logger()


def to_error_response(error: Exception) -> dict:
    """ドメイン例外を API Gateway のエラーレスポンスに変換する"""
    if isinstance(error, ValidationError):
        errors = [
            {"loc": [str(part) for part in err["loc"]], "msg": err["msg"]}
            for err in error.errors()
        ]
        return api_response(400, error_body("Invalid request", errors=errors))
    if isinstance(error, DatesUnavailableError):
        return api_response(
            409, error_body(str(error), unavailable_dates=error.dates)
        )
    if isinstance(error, DatesAlreadyHiredError):
        return api_response(409, error_body(str(error), hired_dates=error.dates))
    if isinstance(error, (ConflictError, DuplicateResourceException, OptimisticLockException)):
        return api_response(409, error_body(str(error)))
    if isinstance(error, ResourceNotFoundException):
        return api_response(404, error_body(str(error)))
    if isinstance(error, InvalidTransitionError):
        return api_response(
            422,
            error_body(str(error), current=error.current, target=error.target),
        )
    if isinstance(error, UnknownCurrencyError):
        return api_response(422, error_body(str(error), currencies=error.codes))
    if isinstance(error, (BusinessRuleViolationException, DomainException, ValueError)):
        return api_response(400, error_body(str(error)))

    logger.exception("Unhandled error")
    return api_response(500, error_body("Internal server error"))


def handle_errors(handler: Callable) -> Callable:
    """ハンドラが送出した例外をエラーレスポンスに変換するデコレータ"""

    @functools.wraps(handler)
    def wrapper(event, context):
        try:
            return handler(event, context)
        except Exception as e:
            if isinstance(e, (DomainException, ValueError)):
                logger.info(
                    "Request rejected",
                    extra={"error": type(e).__name__, "reason": str(e)},
                )
            return to_error_response(e)

    return wrapper
