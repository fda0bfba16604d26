"""Core app views.

Contains:
- health: Health check endpoint
- CurrentUserView: example route guarded by a bearer token
"""

from django.db import connection
from django.http import JsonResponse

from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from clinic_backend.core.serializers import CurrentUserSerializer


def health(request):
    """Health check endpoint - no authentication required."""
    try:
        with connection.cursor() as cursor:
            cursor.execute('SELECT 1;')
    except Exception as exc:
        return JsonResponse({'status': 'error', 'detail': str(exc)}, status=503)

    return JsonResponse({'status': 'ok'})


class CurrentUserView(APIView):
    """Get the user behind the bearer token.

    GET /api/user/
    Returns: {"id": ..., "username": "...", "email": "...", ...}
    """

    permission_classes = [IsAuthenticated]

    def get(self, request, *args, **kwargs):
        serializer = CurrentUserSerializer(request.user)
        return Response(serializer.data, status=status.HTTP_200_OK)
