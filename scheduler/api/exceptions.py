from rest_framework.response import Response
from rest_framework.views import exception_handler
import structlog

from ..errors import SchedulerError

logger = structlog.get_logger()


def scheduler_exception_handler(exc, context):
    if isinstance(exc, SchedulerError):
        logger.info("scheduler_error_response",
            error=type(exc).__name__,
            status=exc.status_code,
            retryable=exc.retryable,
        )
        return Response(
            {"error": str(exc), "retryable": exc.retryable},
            status=exc.status_code,
        )
    return exception_handler(exc, context)
