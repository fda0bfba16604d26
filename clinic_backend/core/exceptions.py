"""DRF exception handler for the clinic API.

Malformed request bodies are reported like any other invalid input:
422 Unprocessable Entity instead of DRF's 400.
"""

import logging

from rest_framework import status
from rest_framework.exceptions import ParseError
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)


def api_exception_handler(exc, context):
    response = exception_handler(exc, context)
    if response is not None and isinstance(exc, ParseError):
        logger.info('Unparseable request body: %s', exc)
        response.status_code = status.HTTP_422_UNPROCESSABLE_ENTITY
    return response
