import argparse
import asyncio
import logging

from config import ApplicationConfig
from src.app.services.session_reaper import SessionReaper
from src.depends import clock, engine, get_unit_of_work, init_models


async def main(once: bool, init_db: bool) -> None:
    if init_db:
        await init_models(engine)

    reaper = SessionReaper(
        get_unit_of_work,
        clock=clock,
        interval_seconds=ApplicationConfig.REAPER_INTERVAL_SECONDS,
    )
    try:
        if once:
            await reaper.run_once()
        else:
            await reaper.run_forever()
    finally:
        await engine.dispose()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Delete expired user sessions")
    parser.add_argument("--once", action="store_true", help="run a single pass and exit")
    parser.add_argument("--init-db", action="store_true", help="create tables before reaping")
    args = parser.parse_args()

    logging.basicConfig(
        level=ApplicationConfig.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    asyncio.run(main(args.once, args.init_db))
