from abc import ABC, abstractmethod
from datetime import datetime


class IClock(ABC):
    """Supplies the current time for expiry checks and reaping"""

    @abstractmethod
    def now(self) -> datetime:
        """Current time as a timezone-aware UTC datetime"""
        pass
