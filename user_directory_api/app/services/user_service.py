"""
Business logic for users.

``UserService`` presents the read-only upstream directory as a regular
CRUD collection.  Reads go straight to the upstream client.  Create,
update and delete are computed from the current upstream state and
returned to the caller, but nothing is stored: the upstream never
changes and a record "deleted" here is still listed afterwards.

Every failure is translated into :class:`ServiceError`; exceptions of
the upstream client never leave this module.
"""

import logging
from typing import List, Optional

from ..clients.user_api_client import UpstreamError, UserApiClient
from ..core.errors import ServiceError
from ..schemas.user import Address, Company, User, UserCreate, UserUpdate


logger = logging.getLogger(__name__)


class UserService:
    """Сервис для работы с пользователями.

    Клиент внешнего каталога передаётся в конструктор, поэтому
    эндпоинты и тесты могут подставить свой экземпляр.  Между вызовами
    сервис не хранит никакого состояния.
    """

    def __init__(self, client: UserApiClient) -> None:
        self.client = client

    async def list_users(self) -> List[User]:
        """Return the full upstream listing."""
        try:
            return await self.client.list_users()
        except Exception as exc:
            logger.error("Failed to fetch users: %s", exc)
            raise ServiceError.internal("Failed to fetch users") from exc

    async def get_user(self, user_id: int) -> User:
        """Return a user by ID.

        Raises ``ServiceError`` 404 when the upstream reports the user
        as missing and 500 for every other failure.
        """
        try:
            return await self.client.get_user(user_id)
        except Exception as exc:
            if isinstance(exc, UpstreamError) and exc.status_code == 404:
                logger.warning("User %s not found upstream", user_id)
                raise ServiceError.not_found("User not found") from exc
            logger.error("Failed to fetch user %s: %s", user_id, exc)
            raise ServiceError.internal("Failed to fetch user") from exc

    async def find_users(self, username: Optional[str] = None, email: Optional[str] = None) -> List[User]:
        """Return users matching all given filters.

        Both filters compare case-insensitively against the whole value;
        partial matches do not count.  Without filters the listing is
        returned unchanged.  Upstream order is preserved.
        """
        users = await self.list_users()
        if username:
            wanted = username.lower()
            users = [user for user in users if user.username.lower() == wanted]
        if email:
            wanted = email.lower()
            users = [user for user in users if user.email.lower() == wanted]
        return users

    async def create_user(self, data: UserCreate) -> User:
        """Build a new user with the next free ID.

        The ID is one above the highest ID of the current listing (``1``
        for an empty listing).  The record is returned but not stored
        anywhere, so a following listing will not contain it.
        """
        users = await self.list_users()
        new_id = max((user.id for user in users), default=0) + 1
        logger.info("Creating user %s with id %s", data.username, new_id)
        return User(
            id=new_id,
            name=data.name,
            username=data.username,
            email=data.email,
            phone=data.phone or "",
            website=data.website or "",
            address=data.address or Address.empty(),
            company=data.company or Company.empty(),
        )

    async def update_user(self, user_id: int, data: UserUpdate) -> User:
        """Return the user with the fields set in ``data`` replaced.

        Nested ``address`` and ``company`` objects are replaced as a
        whole.  The result is not stored upstream.
        """
        user = await self.get_user(user_id)
        changes = {field: getattr(data, field) for field in data.model_fields_set}
        logger.info("Updating user %s fields %s", user_id, sorted(changes))
        return user.model_copy(update=changes)

    async def delete_user(self, user_id: int) -> None:
        """Check that the user exists; nothing is removed upstream."""
        await self.get_user(user_id)
        logger.info("Deleted user %s", user_id)
