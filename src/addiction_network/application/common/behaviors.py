"""
Pipeline behaviors (middleware) for the mediator.

Registered order is Logging -> Validation -> Handler.
"""
import logging
from typing import Any

from ...domain.exceptions import DomainException
from ...mediator import PipelineBehavior

logger = logging.getLogger(__name__)


class LoggingBehavior(PipelineBehavior):
    """
    Logs request failures and re-raises them.

    Rule violations (not enough cash, game over, ...) are part of normal
    play and are logged at debug level; anything else is logged as an error
    with the traceback.
    """

    async def handle(self, request: Any, next_handler):
        request_name = type(request).__name__
        try:
            return await next_handler()
        except DomainException as e:
            logger.debug(f"{request_name} rejected: {e}")
            raise
        except Exception as e:
            logger.error(f"Failed executing {request_name}: {e}", exc_info=True)
            raise


class ValidationBehavior(PipelineBehavior):
    """Calls request.validate() when the request defines one"""

    async def handle(self, request: Any, next_handler):
        if hasattr(request, 'validate') and callable(getattr(request, 'validate')):
            request.validate()
        return await next_handler()
