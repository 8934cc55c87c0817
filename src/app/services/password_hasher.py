from abc import ABC, abstractmethod


class IPasswordHasher(ABC):
    """Produces and checks opaque password hashes"""

    @abstractmethod
    def hash(self, password: str) -> str:
        pass

    @abstractmethod
    def verify(self, password: str, password_hash: str) -> bool:
        pass
