from abc import ABC, abstractmethod


class ITokenGenerator(ABC):
    """Produces unpredictable session ids"""

    @abstractmethod
    def new_session_id(self) -> str:
        pass
