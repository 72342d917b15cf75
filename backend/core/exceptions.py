"""
DRF exception handler: every error leaves the API as a ``{message}`` body
"""
import logging

from rest_framework import exceptions, status
from rest_framework.views import exception_handler

from .utils import error_response, validation_error_response

logger = logging.getLogger('backend.core')

PASSTHROUGH_HEADERS = ('WWW-Authenticate', 'Allow', 'Retry-After')


def api_exception_handler(exc, context):
    response = exception_handler(exc, context)
    view = context.get('view')
    view_name = view.__class__.__name__ if view else 'unknown'

    if response is None:
        # Anything DRF does not know about is an unexpected fault
        logger.error(f"Unhandled error in {view_name}: {str(exc)}", exc_info=exc)
        return error_response('Internal server error', status.HTTP_500_INTERNAL_SERVER_ERROR)

    if isinstance(exc, exceptions.ValidationError):
        formatted = validation_error_response(exc.detail)
    elif isinstance(exc, (exceptions.NotAuthenticated, exceptions.AuthenticationFailed)):
        formatted = error_response('Unauthorized', response.status_code)
    else:
        detail = getattr(exc, 'detail', None)
        formatted = error_response(str(detail) if detail else str(exc), response.status_code)

    for header in PASSTHROUGH_HEADERS:
        if header in response:
            formatted[header] = response[header]
    return formatted
