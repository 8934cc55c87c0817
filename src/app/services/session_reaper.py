"""
Session Reaper

Background loop that physically removes expired sessions.
"""

import asyncio
import logging
from typing import AsyncContextManager, Callable, Optional

from src.app.services.clock import IClock
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.sessions import ReapExpiredSessionsUseCase
from src.domain.exceptions import StoreUnavailableError

logger = logging.getLogger(__name__)


class SessionReaper:
    """
    Runs ReapExpiredSessionsUseCase on a fixed interval.

    Each pass uses its own unit of work. A pass that fails because the
    store is unavailable is logged and the loop keeps going.
    """

    def __init__(
        self,
        uow_factory: Callable[[], AsyncContextManager[UnitOfWork]],
        clock: IClock,
        interval_seconds: float,
    ):
        self.uow_factory = uow_factory
        self.clock = clock
        self.interval_seconds = interval_seconds

    async def run_once(self) -> int:
        async with self.uow_factory() as uow:
            return await ReapExpiredSessionsUseCase(uow, self.clock).execute()

    async def run_forever(self, stop_event: Optional[asyncio.Event] = None) -> None:
        stop_event = stop_event or asyncio.Event()
        logger.info(f"Session reaper started, interval {self.interval_seconds}s")

        while not stop_event.is_set():
            try:
                await self.run_once()
            except StoreUnavailableError as exc:
                logger.error(f"Reaper pass failed: {exc.message}")

            try:
                await asyncio.wait_for(stop_event.wait(), timeout=self.interval_seconds)
            except asyncio.TimeoutError:
                pass

        logger.info("Session reaper stopped")
