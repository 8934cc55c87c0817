from src.app.services.clock import IClock
from src.app.services.password_hasher import IPasswordHasher
from src.app.services.unit_of_work import UnitOfWork
from src.domain.exceptions import MissingCredentialsError
from .create_account_use_case import CreateAccountUseCase
from .dtos import CreateAccountCommand, CreatedAccount, RegisterAccountCommand


class RegisterAccountUseCase:
    """
    Register Account Use Case

    Hashes the plaintext password with the configured hasher, then creates
    the account. The plaintext never reaches the store.
    """

    def __init__(self, uow: UnitOfWork, password_hasher: IPasswordHasher, clock: IClock):
        self.password_hasher = password_hasher
        self.create_account = CreateAccountUseCase(uow, clock)

    async def execute(self, command: RegisterAccountCommand) -> CreatedAccount:
        if not command.password:
            raise MissingCredentialsError()

        return await self.create_account.execute(
            CreateAccountCommand(
                username=command.username,
                name=command.name,
                surname=command.surname,
                patronymic=command.patronymic,
                email=command.email,
                password_hash=self.password_hasher.hash(command.password),
            )
        )
