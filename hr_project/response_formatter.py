"""
Custom Response Formatter for Standardized API Responses

Ensures all API responses follow the format:
{
    "status": "success" | "error",
    "message": "string message or empty",
    "data": {...} | [] | null
}

Service-layer errors are mapped to HTTP status codes here, so views
let them propagate:
    ValidationError (django)   -> 400
    NotFoundError              -> 404
    ConflictError              -> 409
    StoreUnavailableError      -> 503 (with Retry-After)
"""
import logging

from django.core.exceptions import ValidationError as DjangoValidationError
from rest_framework.response import Response
from rest_framework import status as http_status
from rest_framework.renderers import JSONRenderer

from core.base.exceptions import (
    DomainError,
    NotFoundError,
    ConflictError,
    StoreUnavailableError,
)

logger = logging.getLogger(__name__)

DOMAIN_ERROR_STATUS = (
    (NotFoundError, http_status.HTTP_404_NOT_FOUND),
    (ConflictError, http_status.HTTP_409_CONFLICT),
    (StoreUnavailableError, http_status.HTTP_503_SERVICE_UNAVAILABLE),
)

RETRY_AFTER_SECONDS = '5'


def custom_exception_handler(exc, context):
    """
    Custom exception handler that formats all error responses consistently.

    Converts DRF's default error format and the service-layer errors into
    our standard format:
    {
        "status": "error",
        "message": "Error message",
        "data": null
    }
    """
    if isinstance(exc, DjangoValidationError):
        errors = exc.message_dict if hasattr(exc, 'error_dict') else exc.messages
        return Response(
            format_error_response(errors, http_status.HTTP_400_BAD_REQUEST),
            status=http_status.HTTP_400_BAD_REQUEST
        )

    if isinstance(exc, DomainError):
        status_code = http_status.HTTP_400_BAD_REQUEST
        for error_class, mapped_status in DOMAIN_ERROR_STATUS:
            if isinstance(exc, error_class):
                status_code = mapped_status
                break

        response = Response(format_error_response(exc.message, status_code), status=status_code)
        if status_code == http_status.HTTP_503_SERVICE_UNAVAILABLE:
            response['Retry-After'] = RETRY_AFTER_SECONDS
        if status_code == http_status.HTTP_409_CONFLICT:
            logger.info("Conflict: %s", exc)
        return response

    # rest_framework.views loads the renderer named in settings from this module
    from rest_framework.views import exception_handler

    # Call DRF's default exception handler
    response = exception_handler(exc, context)

    if response is not None:
        response.data = format_error_response(response.data, response.status_code)

    return response


def format_error_response(errors, status_code):
    """
    Format error responses into standard format.

    Handles various error formats:
    - {"field": ["error1", "error2"]} -> "field: error1, error2"
    - {"detail": "message"} -> "message"
    - ["error1", "error2"] -> "error1, error2"
    """
    message = ""

    if isinstance(errors, dict):
        error_messages = []
        for field, field_errors in errors.items():
            if field == 'detail':
                message = str(field_errors)
            elif isinstance(field_errors, list):
                error_messages.append(f"{field}: {', '.join(str(e) for e in field_errors)}")
            elif isinstance(field_errors, dict):
                error_messages.append(f"{field}: {format_nested_errors(field_errors)}")
            else:
                error_messages.append(f"{field}: {str(field_errors)}")

        if error_messages:
            message = "; ".join(error_messages)

    elif isinstance(errors, list):
        message = ", ".join(str(e) for e in errors)

    else:
        message = str(errors)

    return {
        "status": "error",
        "message": message,
        "data": None
    }


def format_nested_errors(errors_dict):
    """Format nested error dictionaries."""
    messages = []
    for key, value in errors_dict.items():
        if isinstance(value, list):
            messages.append(f"{key}: {', '.join(str(v) for v in value)}")
        elif isinstance(value, dict):
            messages.append(f"{key}: {format_nested_errors(value)}")
        else:
            messages.append(f"{key}: {str(value)}")
    return "; ".join(messages)


class StandardizedJSONRenderer(JSONRenderer):
    """
    JSON renderer that wraps all responses in the standard format.

    Responses that are already formatted pass through unchanged.
    """

    def render(self, data, accepted_media_type=None, renderer_context=None):
        response = renderer_context.get('response') if renderer_context else None
        # 204 No Content has no body
        if response is not None and response.status_code == 204:
            return b''
        if response is not None and not self.is_already_formatted(data):
            if response.status_code >= 400:
                data = format_error_response(data, response.status_code)
            else:
                data = self.format_success_response(data)

        return super().render(data, accepted_media_type, renderer_context)

    def is_already_formatted(self, data):
        """Check if response is already in our standard format."""
        if isinstance(data, dict):
            return 'status' in data and 'message' in data and 'data' in data
        return False

    def format_success_response(self, data):
        if isinstance(data, dict) and 'detail' in data:
            message = str(data['detail'])
            response_data = None
        elif data is None or (isinstance(data, dict) and not data):
            message = ""
            response_data = None
        else:
            message = ""
            response_data = data

        return {
            "status": "success",
            "message": message,
            "data": response_data
        }
