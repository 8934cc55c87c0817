from uuid import UUID

from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import as_utc
from src.domain.entities import User
from src.domain.exceptions import InvalidPayloadError, UserNotFoundError
from .dtos import AccountInfo


class FindAccountUseCase:
    """Look up accounts by username or id"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def by_username(self, username: str) -> AccountInfo:
        if not username:
            raise InvalidPayloadError("`username` parameter was empty")

        async with self.uow:
            user = await self.uow.users.get_by_username(username)
            if user is None:
                raise UserNotFoundError(username)
            return self._to_info(user)

    async def by_id(self, user_id: UUID) -> AccountInfo:
        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                raise UserNotFoundError(str(user_id))
            return self._to_info(user)

    @staticmethod
    def _to_info(user: User) -> AccountInfo:
        return AccountInfo(
            id=user.id,
            username=user.username,
            name=user.name,
            surname=user.surname,
            patronymic=user.patronymic,
            email=user.email,
            created_at=as_utc(user.created_at),
        )
