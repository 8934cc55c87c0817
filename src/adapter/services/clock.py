from datetime import datetime

from src.app.services.clock import IClock
from src.domain.base import utc_now


class SystemClock(IClock):
    def now(self) -> datetime:
        return utc_now()
