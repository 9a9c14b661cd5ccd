"""Forward-only onboarding: sign-up, field order and completion.

Stage input handling lives in ``steps``; this module decides what comes after
a finished field while the profile is still being created.
"""

from __future__ import annotations

import logging

from lovematch.bot.rendering.keyboard import main_menu
from lovematch.bot.rendering.prompts import stage_prompt
from lovematch.bot.transport import Event, Transport
from lovematch.bot.utils import msg
from lovematch.services.notifier import notify_new_profile
from lovematch.services.profile import Profile
from lovematch.services.profile_store import ProfileStore
from lovematch.services.states import (
    COMPLETED,
    FIELD_ENTRY,
    NEXT_FIELD,
    Field,
    FlowState,
    Mode,
    Platform,
)
from lovematch.settings import settings

logger = logging.getLogger("lovematch_bot")

_FIELD_BY_MISSING = {
    "name": Field.NAME,
    "gender": Field.GENDER,
    "age": Field.AGE,
    "location": Field.LOCATION,
    "hobbies": Field.HOBBIES,
    "bio": Field.BIO,
    "handle": Field.CONTACT,
}


async def send_prompt(profile: Profile, transport: Transport) -> None:
    prompt = stage_prompt(profile)
    await transport.reply(prompt.text, prompt.options)


async def begin_signup(store: ProfileStore, event: Event, transport: Transport) -> None:
    profile = store.get(event.user_id)
    if profile is None:
        profile = Profile(user_id=event.user_id)
        store.upsert(profile)
        logger.info("Profile %s created", profile.user_id)
        await send_prompt(profile, transport)
        return
    if profile.state.is_onboarding:
        await send_prompt(profile, transport)
        return
    await transport.reply(msg("signup.exists"), main_menu())


async def advance(
    store: ProfileStore,
    profile: Profile,
    field: Field,
    event: Event,
    transport: Transport,
    ack: str | None = None,
) -> None:
    next_field = NEXT_FIELD[field]
    if next_field is Field.CONTACT and event.native_handle:
        profile.handle = event.native_handle
        profile.set_platform(Platform.TELEGRAM)
        next_field = NEXT_FIELD[Field.CONTACT]

    if next_field is None:
        await complete(store, profile, transport, ack=ack)
        return

    profile.state = FlowState(Mode.ONBOARDING, FIELD_ENTRY[next_field])
    store.upsert(profile)
    if ack:
        await transport.edit_last_message(ack)
    await send_prompt(profile, transport)


async def complete(store: ProfileStore, profile: Profile, transport: Transport, ack: str | None = None) -> None:
    missing = profile.missing_fields()
    if missing:
        # Never publish a partial profile; go back to the first gap.
        logger.warning("Profile %s reached completion with missing %s", profile.user_id, missing)
        profile.state = FlowState(Mode.ONBOARDING, FIELD_ENTRY[_FIELD_BY_MISSING[missing[0]]])
        store.upsert(profile)
        await send_prompt(profile, transport)
        return

    profile.state = COMPLETED
    profile.match_step = None
    store.upsert(profile)
    logger.info("Profile %s completed onboarding", profile.user_id)
    if ack:
        await transport.edit_last_message(ack)
    await transport.reply(msg("onboarding.complete"), main_menu())
    notify_new_profile(store, profile, transport.send_to, locale=settings.BOT_LOCALE)
