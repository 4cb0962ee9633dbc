import logging

from rest_framework import exceptions, status
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)


class ValidationError(Exception):
    def __init__(self, message: str, errors: dict | None = None):
        super().__init__(message)
        self.message = message
        self.errors = errors or {}


class NotFoundError(Exception):
    def __init__(self, message: str = "Not found"):
        super().__init__(message)
        self.message = message


class ProviderError(Exception):
    """Raised by a storage provider when the backend itself fails."""


def api_exception_handler(exc, context):
    """
    Convert domain and DRF errors into the JSON bodies clients expect.

    Views may set ``invalid_message`` and ``failure_message`` to control the
    top level ``message`` of 400 and 500 responses.
    """
    view = context.get("view")
    invalid_message = getattr(view, "invalid_message", "Invalid request data")
    failure_message = getattr(view, "failure_message", "Internal server error")

    if isinstance(exc, ValidationError):
        body = {"message": exc.message}
        if exc.errors:
            body["errors"] = exc.errors
        return Response(body, status=status.HTTP_400_BAD_REQUEST)

    if isinstance(exc, NotFoundError):
        return Response({"message": exc.message}, status=status.HTTP_404_NOT_FOUND)

    if isinstance(exc, ProviderError):
        logger.error(f"{failure_message}: {exc}", exc_info=True)
        return Response({"message": failure_message}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

    if isinstance(exc, exceptions.ValidationError):
        return Response(
            {"message": invalid_message, "errors": exc.detail},
            status=status.HTTP_400_BAD_REQUEST,
        )

    response = exception_handler(exc, context)
    if response is None:
        logger.error(f"Unhandled error in {view.__class__.__name__}: {exc}", exc_info=True)
        return Response({"message": failure_message}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

    # DRF's own errors (e.g. a JSON parse error) get the same envelope
    if isinstance(response.data, dict) and "detail" in response.data:
        response.data = {"message": str(response.data["detail"])}
    else:
        response.data = {"message": invalid_message, "errors": response.data}
    return response
