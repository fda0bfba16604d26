from rest_framework import status
from rest_framework.response import Response


def validation_error_response(errors):
    """Field-error map with 422 Unprocessable Entity."""
    return Response(errors, status=status.HTTP_422_UNPROCESSABLE_ENTITY)


def server_error_response(message, error):
    """500 payload carrying the raw failure detail.

    The detail is returned to the caller as-is, matching the existing
    frontend which displays ``error`` next to ``message``.
    """
    return Response(
        {'message': message, 'error': str(error)},
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
