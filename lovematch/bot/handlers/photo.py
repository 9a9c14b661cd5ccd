from __future__ import annotations

from lovematch.bot.handlers.steps import finish_field, reprompt
from lovematch.bot.transport import Event, PhotoVariant, Transport
from lovematch.bot.utils import msg
from lovematch.services.profile import Profile
from lovematch.services.profile_store import ProfileStore
from lovematch.services.states import Field, Stage


def pick_largest(variants: tuple[PhotoVariant, ...]) -> PhotoVariant:
    """Highest-resolution variant; on equal area the later one wins."""
    best = variants[0]
    for variant in variants[1:]:
        if variant.area >= best.area:
            best = variant
    return best


async def ingest_photo(store: ProfileStore, profile: Profile, event: Event, transport: Transport) -> None:
    if profile.state.stage is not Stage.PHOTO:
        await reprompt(profile, transport)
        return
    if not event.photos:
        await transport.reply(msg("photo.none"))
        return
    profile.photo = pick_largest(event.photos).reference
    await finish_field(store, profile, Field.PHOTO, event, transport)
