"""
Shop error taxonomy and the DRF exception handler that renders it.

Every domain failure is a ShopError, so views can let them propagate and
the handler turns them into the standard {"code", "msg", "errors"} envelope.
"""
import logging

from rest_framework import status
from rest_framework.exceptions import APIException
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)


class ShopError(APIException):
    """Base class for failures surfaced to the shop's users"""
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = 'Request failed'
    default_code = 'shop_error'


class Unauthenticated(ShopError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_detail = 'You must be logged in.'
    default_code = 'unauthenticated'


class InvalidCredentials(ShopError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_detail = 'Invalid username/password'
    default_code = 'invalid_credentials'


class ValidationFailed(ShopError):
    """A required field is missing or blank"""
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = 'Missing required field'
    default_code = 'validation_failed'


class UnknownTier(ShopError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = 'Unknown product tier'
    default_code = 'unknown_tier'


class StoreError(ShopError):
    """
    Persistence failure. The underlying exception is kept on ``cause`` for
    logging; it never reaches the response body.
    """
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = 'Request failed'
    default_code = 'store_error'

    def __init__(self, detail=None, code=None, cause=None):
        super().__init__(detail, code)
        self.cause = cause


class RegistrationFailed(StoreError):
    default_detail = 'Registration failed'
    default_code = 'registration_failed'


def custom_exception_handler(exc, context):
    """
    Custom exception handler that returns consistent error responses
    """
    # Call REST framework's default exception handler first
    response = exception_handler(exc, context)

    if response is None:
        return None

    if response.status_code >= 500:
        logger.error(f"API Exception: {exc}", exc_info=True)
    else:
        logger.info(f"API rejection ({response.status_code}): {exc}")

    custom_response_data = {
        'code': response.status_code,
        'msg': 'An error occurred',
    }

    if isinstance(exc, ShopError):
        custom_response_data['msg'] = str(exc.detail)
    elif response.status_code == status.HTTP_400_BAD_REQUEST:
        custom_response_data['msg'] = 'Validation error'
        custom_response_data['errors'] = response.data
    elif response.status_code == status.HTTP_404_NOT_FOUND:
        custom_response_data['msg'] = 'Resource not found'
    elif response.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
        custom_response_data['msg'] = 'Method not allowed'
    elif response.status_code >= 500:
        # Don't expose internal errors
        custom_response_data['msg'] = 'Internal server error'

    response.data = custom_response_data
    return response
