import logging

from src.app.services.clock import IClock
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import User
from src.domain.exceptions import InvalidPayloadError, MissingCredentialsError
from .dtos import CreateAccountCommand, CreatedAccount

logger = logging.getLogger(__name__)


class CreateAccountUseCase:
    """
    Create Account Use Case

    Business Rules:
    - username must be non-empty and unique (DuplicateUsernameError otherwise)
    - All required fields are written in a single insert
    - id is generated here, created_at comes from the clock
    """

    def __init__(self, uow: UnitOfWork, clock: IClock):
        self.uow = uow
        self.clock = clock

    async def execute(self, command: CreateAccountCommand) -> CreatedAccount:
        if not command.username:
            raise InvalidPayloadError("`username` parameter was empty")
        if not command.password_hash:
            raise MissingCredentialsError("Provided password hash was empty")

        async with self.uow:
            user = User(
                username=command.username,
                name=command.name,
                surname=command.surname,
                patronymic=command.patronymic,
                email=command.email,
                password_hash=command.password_hash,
                created_at=self.clock.now(),
            )
            user = await self.uow.users.create(user)
            user_id = user.id
            await self.uow.commit()

            logger.info(f"Created account {user_id} for username {command.username}")
            return CreatedAccount(user_id=user_id)
