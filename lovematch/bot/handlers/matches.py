"""Match search: location selection, results and contact reveal."""

from __future__ import annotations

import logging

from lovematch.bot.parsing import callbacks as cb
from lovematch.bot.rendering.keyboard import location_options, main_menu, reveal_options
from lovematch.bot.rendering.profile import contact_message, match_caption
from lovematch.bot.transport import Transport
from lovematch.bot.utils import msg
from lovematch.services.matching import find_matches
from lovematch.services.profile import Profile
from lovematch.services.profile_store import ProfileStore
from lovematch.services.states import LOCATIONS, MatchStep
from lovematch.services.validation import validate_string

logger = logging.getLogger("lovematch_bot")


async def request_matches(store: ProfileStore, profile: Profile, transport: Transport) -> None:
    profile.match_step = MatchStep.LOCATION
    store.upsert(profile)
    await transport.reply(msg("matches.where"), location_options(cb.MATCH_LOCATION))


async def on_location_button(store: ProfileStore, profile: Profile, arg: str, transport: Transport) -> None:
    if not profile.is_completed or profile.match_step is not MatchStep.LOCATION:
        await transport.reply(msg("matches.expired"), main_menu())
        return
    if arg == cb.OTHER:
        profile.match_step = MatchStep.LOCATION_TYPED
        store.upsert(profile)
        await transport.reply(msg("matches.where_typed"))
        return
    index = cb.parse_index(arg, len(LOCATIONS))
    if index is None:
        await transport.reply(msg("matches.where"), location_options(cb.MATCH_LOCATION))
        return
    await search(store, profile, LOCATIONS[index], transport)


async def on_location_text(store: ProfileStore, profile: Profile, text: str | None, transport: Transport) -> None:
    if not validate_string(text):
        await transport.reply(msg("matches.location_invalid"))
        return
    await search(store, profile, text.strip(), transport)


async def search(store: ProfileStore, profile: Profile, location: str, transport: Transport) -> None:
    profile.match_step = None
    profile.match_location = location
    store.upsert(profile)
    await show_matches(store, profile, location, transport)


async def show_matches(store: ProfileStore, requester: Profile, location: str, transport: Transport) -> None:
    found = find_matches(store, requester, location)
    logger.info("Match search by %s in %s: %s results", requester.user_id, location, len(found))
    if not found:
        await transport.reply(msg("matches.none", location=location), main_menu())
        return
    for match in found:
        caption = match_caption(match)
        options = reveal_options(match.user_id)
        if match.photo:
            await transport.reply_with_image(match.photo, caption, options)
        else:
            await transport.reply(caption, options)
    await transport.reply(msg("matches.header", count=len(found), location=location), main_menu())


async def reveal_contact(store: ProfileStore, target_id: str, transport: Transport) -> None:
    target = store.get(target_id)
    if target is None or not target.is_completed or not target.handle:
        await transport.reply(msg("contact.not_found"))
        return
    await transport.reply(contact_message(target))
