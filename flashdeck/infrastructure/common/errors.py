"""Translation of exceptions into failed action envelopes."""

from typing import Any

import structlog

from flashdeck.domain.common.exceptions import DomainError
from flashdeck.exceptions import AIDisabledError
from flashdeck.infrastructure.common.schemas import ActionResponse

logger = structlog.get_logger(__name__)


def failure_response(error: Exception, fallback_message: str) -> ActionResponse[Any]:
    """
    Build the failed envelope for an exception raised inside an action.

    Domain errors (validation, not found, duplicate email) carry a message meant
    for the caller. Anything else is logged with its traceback and reported as
    ``fallback_message``.
    """
    if isinstance(error, DomainError | AIDisabledError):
        logger.info("action_rejected", reason=error.message)
        return ActionResponse(success=False, error=error.message)

    logger.error("action_failed", error=str(error), fallback=fallback_message, exc_info=error)
    return ActionResponse(success=False, error=fallback_message)
