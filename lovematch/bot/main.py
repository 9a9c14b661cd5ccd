from __future__ import annotations

import logging
from pathlib import Path

from telegram.ext import Application

from lovematch.bot.context import STORE_KEY, build_store
from lovematch.bot.handlers import register_handlers
from lovematch.logging_utils import configure_logging
from lovematch.services.profile_store import ProfileStore
from lovematch.settings import settings

PROJECT_ROOT = Path(__file__).resolve().parents[2]
ENV_PATH = PROJECT_ROOT / ".env"

logger = logging.getLogger("lovematch_bot")


def build_application(store: ProfileStore | None = None) -> Application:
    token = settings.TELEGRAM_BOT_TOKEN
    if not token:
        hint = (
            "TELEGRAM_BOT_TOKEN is missing.\n"
            f"Looked for .env at: {ENV_PATH}\n"
            f"Current working directory: {Path.cwd()}\n"
            "Fix:\n"
            "1) Ensure file name is exactly '.env' (not .env.txt)\n"
            "2) Ensure it contains: TELEGRAM_BOT_TOKEN=...\n"
            "3) Restart the bot\n"
        )
        raise RuntimeError(hint)

    app = Application.builder().token(token).concurrent_updates(settings.BOT_CONCURRENT_UPDATES).build()
    app.bot_data[STORE_KEY] = store if store is not None else build_store()
    register_handlers(app)
    return app


def main() -> None:
    configure_logging(settings.LOG_LEVEL)
    app = build_application()
    logger.info("Bot started with %s profiles", len(app.bot_data[STORE_KEY]))
    app.run_polling(close_loop=False)


__all__ = ["build_application", "main"]
