"""
Clients for the external services the API depends on.
"""

from .user_api_client import UpstreamError, UserApiClient  # noqa: F401
