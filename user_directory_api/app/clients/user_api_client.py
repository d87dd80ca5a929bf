"""Upstream user directory client.

This module wraps the read-only REST service that owns the user
records (JSONPlaceholder by default).  Only two operations exist
upstream:

* :meth:`UserApiClient.list_users` – ``GET /users``, the full listing.
* :meth:`UserApiClient.get_user` – ``GET /users/{id}``, a single record.

The client uses ``httpx.AsyncClient`` so that requests do not block the
event loop.  Every failure, whether a non-2xx status, a network error,
a timeout or a payload that does not match the :class:`User` schema,
is raised as :class:`UpstreamError`.  The error carries the HTTP status
when the upstream answered, which is what the service layer inspects to
tell "not found" apart from other failures.
"""

from __future__ import annotations

import logging
from typing import Any, List, Optional

import httpx
from pydantic import TypeAdapter, ValidationError

from ..schemas.user import User


logger = logging.getLogger(__name__)

_user_list_adapter = TypeAdapter(List[User])


class UpstreamError(Exception):
    """Raised when the upstream service cannot deliver a valid answer.

    Attributes:
        status_code: HTTP status returned by the upstream, or ``None``
            when no response was received or it could not be decoded.
    """

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class UserApiClient:
    """Async client for the upstream ``/users`` resource."""

    def __init__(
        self,
        *,
        base_url: str,
        timeout: float = 10.0,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        """Initialise the client.

        Args:
            base_url: Base URL of the upstream service, e.g.
                ``https://jsonplaceholder.typicode.com``.
            timeout: Timeout in seconds for each request.
            client: Optional pre-built ``httpx.AsyncClient`` (for example
                one using ``httpx.MockTransport`` in tests).  When omitted
                the client creates and owns its own instance.
        """
        self.base_url = base_url.rstrip("/")
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=timeout)

    async def aclose(self) -> None:
        """Close the underlying HTTP client if this instance created it."""
        if self._owns_client:
            await self._client.aclose()

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    async def _get(self, path: str) -> Any:
        """Perform a GET request and return the decoded JSON body.

        Raises:
            UpstreamError: on any transport failure or non-2xx status.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending GET request to %s", url)
            response = await self._client.get(url)
            response.raise_for_status()
            return response.json()
        except httpx.HTTPStatusError as exc:
            status = exc.response.status_code
            logger.error("Upstream request to %s failed with status %s", url, status)
            raise UpstreamError(f"Upstream returned {status}", status_code=status) from exc
        except httpx.HTTPError as exc:
            logger.error("Upstream request to %s failed: %s", url, exc)
            raise UpstreamError(str(exc) or exc.__class__.__name__) from exc
        except ValueError as exc:
            # response.json() on a body that is not JSON
            logger.error("Upstream response from %s is not valid JSON: %s", url, exc)
            raise UpstreamError("Upstream returned invalid JSON") from exc

    # ------------------------------------------------------------------
    # User operations
    # ------------------------------------------------------------------
    async def list_users(self) -> List[User]:
        """Return every user of the upstream listing, in upstream order."""
        data = await self._get("/users")
        try:
            return _user_list_adapter.validate_python(data)
        except ValidationError as exc:
            logger.error("Upstream user listing has an unexpected shape: %s", exc)
            raise UpstreamError("Upstream returned malformed users") from exc

    async def get_user(self, user_id: int) -> User:
        """Return a single user by ID."""
        data = await self._get(f"/users/{user_id}")
        try:
            return User.model_validate(data)
        except ValidationError as exc:
            logger.error("Upstream user %s has an unexpected shape: %s", user_id, exc)
            raise UpstreamError("Upstream returned a malformed user") from exc
