"""
Login Use Case

Verifies a password and issues a new session.
"""

import logging

from src.app.services.password_hasher import IPasswordHasher
from src.app.services.unit_of_work import UnitOfWork
from src.domain.exceptions import (
    AuthenticationFailedError,
    InvalidPayloadError,
    MissingCredentialsError,
    UserNotFoundError,
)
from .dtos import IssuedSession, LoginCommand
from .issue_session_use_case import IssueSessionUseCase

logger = logging.getLogger(__name__)


class LoginUseCase:
    """
    Use case for user login.

    Business Rules:
    - Password must be non-empty
    - The account is identified by username or by id
    - Every successful login issues a new session; existing ones are not reused
    """

    def __init__(
        self,
        uow: UnitOfWork,
        password_hasher: IPasswordHasher,
        issue_session: IssueSessionUseCase,
    ):
        self.uow = uow
        self.password_hasher = password_hasher
        self.issue_session = issue_session

    async def execute(self, command: LoginCommand) -> IssuedSession:
        if not command.password:
            raise MissingCredentialsError("`password` parameter was empty")
        if command.user_id is None and not command.username:
            raise InvalidPayloadError("`username` parameter was empty")

        async with self.uow:
            if command.user_id is not None:
                user = await self.uow.users.get_by_id(command.user_id)
            else:
                user = await self.uow.users.get_by_username(command.username)

            if user is None:
                raise UserNotFoundError(str(command.user_id or command.username))
            user_id, password_hash = user.id, user.password_hash

        if not self.password_hasher.verify(command.password, password_hash):
            logger.warning(f"Failed login for {user_id}")
            raise AuthenticationFailedError()

        return await self.issue_session.execute(user_id, command.ttl)
