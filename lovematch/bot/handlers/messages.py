"""Inbound routing: one entry per input class, then per state.

``dispatch_*`` take a normalized ``Event`` and a ``Transport`` so the whole
conversation can be driven without Telegram; the ``handle_*`` adapters bind
them to python-telegram-bot updates.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable

from telegram import Update
from telegram.ext import ContextTypes

from lovematch.bot.context import get_store
from lovematch.bot.handlers import core, editing, matches, onboarding, photo, steps
from lovematch.bot.parsing import callbacks as cb
from lovematch.bot.rendering.keyboard import main_menu
from lovematch.bot.transport import Event, TelegramTransport, Transport, event_from_update
from lovematch.bot.utils import msg
from lovematch.services.profile_store import PersistenceError, ProfileStore
from lovematch.services.states import MatchStep

logger = logging.getLogger("lovematch_bot")

Dispatch = Callable[[ProfileStore, Event, Transport], Awaitable[None]]


async def dispatch_start(store: ProfileStore, event: Event, transport: Transport) -> None:
    await core.start(store, event, transport)


async def dispatch_text(store: ProfileStore, event: Event, transport: Transport) -> None:
    action = core.menu_action(event.text)
    if action is not None:
        await core.on_menu(store, event, action, transport)
        return

    profile = store.get(event.user_id)
    if profile is None:
        await core.prompt_signup(transport)
        return
    if profile.is_completed:
        if profile.match_step is MatchStep.LOCATION_TYPED:
            await matches.on_location_text(store, profile, event.text, transport)
        else:
            await transport.reply(msg("menu.unknown"), main_menu())
        return
    await steps.handle_text(store, profile, event, transport)


async def dispatch_button(store: ProfileStore, event: Event, transport: Transport) -> None:
    namespace, arg = cb.parse_action(event.action)
    if namespace == cb.SIGNUP:
        await onboarding.begin_signup(store, event, transport)
        return

    profile = store.get(event.user_id)
    if profile is None:
        await core.prompt_signup(transport)
        return

    if namespace == cb.REVEAL:
        await matches.reveal_contact(store, arg, transport)
    elif namespace == cb.MATCH_LOCATION:
        await matches.on_location_button(store, profile, arg, transport)
    elif namespace == cb.EDIT:
        await editing.on_edit_action(store, profile, arg, transport)
    elif profile.state.stage is None:
        await steps.reprompt(profile, transport)
    else:
        await steps.handle_button(store, profile, namespace, arg, event, transport)


async def dispatch_photo(store: ProfileStore, event: Event, transport: Transport) -> None:
    profile = store.get(event.user_id)
    if profile is None:
        await core.prompt_signup(transport)
        return
    await photo.ingest_photo(store, profile, event, transport)


async def run_dispatch(dispatch: Dispatch, store: ProfileStore, event: Event, transport: Transport) -> None:
    try:
        await dispatch(store, event, transport)
    except PersistenceError:
        logger.exception("Could not persist profile changes for %s", event.user_id)
        await transport.reply(msg("error.storage"))


async def _handle(dispatch: Dispatch, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    event = event_from_update(update)
    transport = TelegramTransport(update, context)
    await run_dispatch(dispatch, get_store(context), event, transport)


async def cmd_start(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    await _handle(dispatch_start, update, context)


async def handle_text_message(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    await _handle(dispatch_text, update, context)


async def handle_photo_message(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    await _handle(dispatch_photo, update, context)


async def handle_callback(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    await update.callback_query.answer()
    await _handle(dispatch_button, update, context)


async def on_error(update: object, context: ContextTypes.DEFAULT_TYPE) -> None:
    logger.error("Unhandled error while processing %s", update, exc_info=context.error)
