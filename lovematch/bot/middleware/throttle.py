from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable

from telegram import Update
from telegram.ext import ContextTypes

from lovematch.bot.throttle import throttle
from lovematch.bot.utils import msg

HandlerFunc = Callable[[Update, ContextTypes.DEFAULT_TYPE], Awaitable[None]]

logger = logging.getLogger("lovematch_bot")


def wrap_serialized(handler: HandlerFunc) -> HandlerFunc:
    """Drop flooding users and run each user's updates one at a time."""

    async def _wrapped(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        user = update.effective_user
        if user is None:
            await handler(update, context)
            return

        user_key = str(user.id)
        decision = throttle().check(user_key)
        if not decision.allowed:
            logger.info("Throttled update from %s", user_key)
            text = msg(decision.reason or "bot.throttle.burst", retry_after=decision.retry_after)
            if update.callback_query is not None:
                await update.callback_query.answer(text)
            elif update.effective_message is not None:
                await update.effective_message.reply_text(text)
            return

        async with throttle().serialized(user_key):
            await handler(update, context)

    return _wrapped
