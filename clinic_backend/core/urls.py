"""Core App URLs - health & example token-guarded route.

Prefix: /api/
Routes:
    GET  /api/health/              - Health check (no auth)
    GET  /api/user/                - Current user (bearer token required)
    POST /api/auth/token/          - Obtain access/refresh token pair
    POST /api/auth/token/refresh/  - Refresh access token
"""

from django.urls import re_path

from rest_framework_simplejwt.views import TokenObtainPairView, TokenRefreshView

from clinic_backend.core.views import CurrentUserView, health

app_name = 'core'

urlpatterns = [
    re_path(r'^health/?$', health, name='health'),
    re_path(r'^user/?$', CurrentUserView.as_view(), name='user'),
    re_path(r'^auth/token/?$', TokenObtainPairView.as_view(), name='token'),
    re_path(r'^auth/token/refresh/?$', TokenRefreshView.as_view(), name='token_refresh'),
]
