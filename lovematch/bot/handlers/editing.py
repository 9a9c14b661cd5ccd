"""Post-completion editing: the hub, field selection, done and cancel."""

from __future__ import annotations

import logging

from lovematch.bot.handlers.onboarding import send_prompt
from lovematch.bot.parsing import callbacks as cb
from lovematch.bot.rendering.keyboard import edit_menu, main_menu
from lovematch.bot.transport import Transport
from lovematch.bot.utils import msg
from lovematch.services.profile import Profile
from lovematch.services.profile_store import ProfileStore
from lovematch.services.states import COMPLETED, EDITING_HUB, FIELD_ENTRY, Field, FlowState, Mode

logger = logging.getLogger("lovematch_bot")


async def start_editing(store: ProfileStore, profile: Profile, transport: Transport) -> None:
    profile.state = EDITING_HUB
    profile.match_step = None
    store.upsert(profile)
    await transport.reply(msg("edit.hub"), edit_menu(profile))


async def redirect_to_hub(store: ProfileStore, profile: Profile, transport: Transport, key: str) -> None:
    if profile.state != EDITING_HUB:
        profile.state = EDITING_HUB
        store.upsert(profile)
    await transport.reply(msg(key), edit_menu(profile))


async def return_to_hub(
    store: ProfileStore,
    profile: Profile,
    field: Field,
    transport: Transport,
    ack: str | None = None,
) -> None:
    profile.state = EDITING_HUB
    store.upsert(profile)
    if ack:
        await transport.edit_last_message(ack)
    await transport.reply(msg(f"edit.updated.{field.value}"), edit_menu(profile))


async def leave_editing(store: ProfileStore, profile: Profile, transport: Transport, key: str) -> None:
    profile.state = COMPLETED
    profile.pending_handle = None
    store.upsert(profile)
    logger.info("Profile %s left editing (%s)", profile.user_id, key)
    await transport.reply(msg(key), main_menu())


async def on_edit_action(store: ProfileStore, profile: Profile, arg: str, transport: Transport) -> None:
    if not profile.state.is_editing:
        await transport.reply(msg("edit.not_editing"), main_menu())
        return
    if arg == cb.DONE:
        await leave_editing(store, profile, transport, "edit.done")
        return
    if arg == cb.CANCEL:
        await leave_editing(store, profile, transport, "edit.cancelled")
        return
    try:
        field = Field(arg)
    except ValueError:
        await transport.reply(msg("edit.hub"), edit_menu(profile))
        return
    profile.pending_handle = None
    profile.state = FlowState(Mode.EDITING, FIELD_ENTRY[field])
    store.upsert(profile)
    await send_prompt(profile, transport)
