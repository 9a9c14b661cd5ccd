"""Stage input handlers shared by onboarding and editing.

Every stage has one text handler or one set of button handlers. They only
mutate the field the stage owns; where the flow goes next is decided by
``finish_field`` from the profile's mode.
"""

from __future__ import annotations

from typing import Awaitable, Callable

from lovematch.bot.handlers import editing, onboarding
from lovematch.bot.parsing import callbacks as cb
from lovematch.bot.rendering.keyboard import hobby_choices, hobby_options
from lovematch.bot.rendering.prompts import stage_prompt, stage_reminder
from lovematch.bot.transport import Event, Transport
from lovematch.bot.utils import msg
from lovematch.services.profile import Profile
from lovematch.services.profile_store import ProfileStore
from lovematch.services.states import (
    LOCATIONS,
    MAX_HOBBIES,
    PLATFORM_LABELS,
    Field,
    FlowState,
    Gender,
    Platform,
    Stage,
)
from lovematch.services.validation import parse_age, validate_string

TextHandler = Callable[[ProfileStore, Profile, Event, Transport], Awaitable[None]]
ButtonHandler = Callable[[ProfileStore, Profile, str, Event, Transport], Awaitable[None]]


async def reprompt(profile: Profile, transport: Transport) -> None:
    prompt = stage_prompt(profile)
    await transport.reply(prompt.text, prompt.options)


async def remind(profile: Profile, transport: Transport) -> None:
    prompt = stage_reminder(profile)
    await transport.reply(prompt.text, prompt.options)


async def finish_field(
    store: ProfileStore,
    profile: Profile,
    field: Field,
    event: Event,
    transport: Transport,
    ack: str | None = None,
) -> None:
    if profile.state.is_editing:
        await editing.return_to_hub(store, profile, field, transport, ack=ack)
    else:
        await onboarding.advance(store, profile, field, event, transport, ack=ack)


async def _move_to(store: ProfileStore, profile: Profile, stage: Stage, transport: Transport) -> None:
    profile.state = FlowState(profile.state.mode, stage)
    store.upsert(profile)
    await reprompt(profile, transport)


# --- text stages ---


async def _on_name(store: ProfileStore, profile: Profile, event: Event, transport: Transport) -> None:
    if not validate_string(event.text):
        await reprompt(profile, transport)
        return
    profile.name = event.text.strip()
    await finish_field(store, profile, Field.NAME, event, transport)


async def _on_age(store: ProfileStore, profile: Profile, event: Event, transport: Transport) -> None:
    age = parse_age(event.text or "")
    if age is None:
        await reprompt(profile, transport)
        return
    profile.age = age
    await finish_field(store, profile, Field.AGE, event, transport)


async def _on_location_typed(store: ProfileStore, profile: Profile, event: Event, transport: Transport) -> None:
    if not validate_string(event.text):
        await reprompt(profile, transport)
        return
    profile.location = event.text.strip()
    await finish_field(store, profile, Field.LOCATION, event, transport)


async def _on_hobby_typed(store: ProfileStore, profile: Profile, event: Event, transport: Transport) -> None:
    if not validate_string(event.text):
        await reprompt(profile, transport)
        return
    hobby = event.text.strip()
    profile.state = FlowState(profile.state.mode, Stage.HOBBIES)
    if len(profile.hobbies) >= MAX_HOBBIES:
        key = "hobbies.ceiling"
    elif hobby in profile.hobbies:
        key = "hobbies.duplicate"
    else:
        profile.hobbies.append(hobby)
        key = "hobbies.added"
    store.upsert(profile)
    await transport.reply(msg(key, value=hobby, max=MAX_HOBBIES), hobby_options(profile.hobbies))


async def _on_bio(store: ProfileStore, profile: Profile, event: Event, transport: Transport) -> None:
    if not validate_string(event.text):
        await reprompt(profile, transport)
        return
    profile.bio = event.text.strip()
    await finish_field(store, profile, Field.BIO, event, transport)


async def _on_custom_username(store: ProfileStore, profile: Profile, event: Event, transport: Transport) -> None:
    if not validate_string(event.text):
        await reprompt(profile, transport)
        return
    profile.pending_handle = event.text.strip()
    await _move_to(store, profile, Stage.USERNAME_PLATFORM, transport)


async def _on_custom_platform(store: ProfileStore, profile: Profile, event: Event, transport: Transport) -> None:
    if not validate_string(event.text):
        await reprompt(profile, transport)
        return
    profile.set_platform(Platform.OTHER, event.text.strip())
    await finish_field(store, profile, Field.CONTACT, event, transport)


TEXT_HANDLERS: dict[Stage, TextHandler] = {
    Stage.NAME: _on_name,
    Stage.AGE: _on_age,
    Stage.LOCATION_TYPED: _on_location_typed,
    Stage.HOBBY_TYPED: _on_hobby_typed,
    Stage.BIO: _on_bio,
    Stage.CUSTOM_USERNAME: _on_custom_username,
    Stage.CUSTOM_PLATFORM: _on_custom_platform,
}


# --- button stages ---


async def _on_gender(store: ProfileStore, profile: Profile, arg: str, event: Event, transport: Transport) -> None:
    try:
        gender = Gender(arg)
    except ValueError:
        await reprompt(profile, transport)
        return
    profile.gender = gender
    ack = msg("gender.selected", value=msg(f"gender.{gender.value}"))
    await finish_field(store, profile, Field.GENDER, event, transport, ack=ack)


async def _on_age_visibility(
    store: ProfileStore, profile: Profile, arg: str, event: Event, transport: Transport
) -> None:
    if arg not in ("yes", "no"):
        await reprompt(profile, transport)
        return
    profile.age_visible = arg == "yes"
    await finish_field(store, profile, Field.AGE_VISIBILITY, event, transport, ack=msg(f"agevis.{arg}"))


async def _on_location(store: ProfileStore, profile: Profile, arg: str, event: Event, transport: Transport) -> None:
    if arg == cb.OTHER:
        await _move_to(store, profile, Stage.LOCATION_TYPED, transport)
        return
    index = cb.parse_index(arg, len(LOCATIONS))
    if index is None:
        await reprompt(profile, transport)
        return
    profile.location = LOCATIONS[index]
    ack = msg("location.selected", value=profile.location)
    await finish_field(store, profile, Field.LOCATION, event, transport, ack=ack)


async def _on_hobby(store: ProfileStore, profile: Profile, arg: str, event: Event, transport: Transport) -> None:
    action, _, value = arg.partition(":")

    if action == cb.TOGGLE:
        choices = hobby_choices(profile.hobbies)
        index = cb.parse_index(value, len(choices))
        if index is None:
            await reprompt(profile, transport)
            return
        hobby = choices[index]
        if hobby in profile.hobbies:
            if profile.state.is_editing and len(profile.hobbies) == 1:
                # A completed profile keeps at least one hobby, even mid-edit.
                await transport.reply(msg("hobbies.keep_one"))
                return
            profile.hobbies.remove(hobby)
        elif len(profile.hobbies) >= MAX_HOBBIES:
            await transport.reply(msg("hobbies.ceiling", max=MAX_HOBBIES))
            return
        else:
            profile.hobbies.append(hobby)
        store.upsert(profile)
        await transport.edit_last_message(options=hobby_options(profile.hobbies))
        return

    if action == cb.OTHER:
        if len(profile.hobbies) >= MAX_HOBBIES:
            await transport.reply(msg("hobbies.ceiling", max=MAX_HOBBIES))
            return
        await _move_to(store, profile, Stage.HOBBY_TYPED, transport)
        return

    if action == cb.DONE:
        if not profile.hobbies:
            await transport.reply(msg("hobbies.need_one"), hobby_options(profile.hobbies))
            return
        ack = msg("hobbies.selected", value=", ".join(profile.hobbies))
        await finish_field(store, profile, Field.HOBBIES, event, transport, ack=ack)
        return

    await reprompt(profile, transport)


async def _on_platform(store: ProfileStore, profile: Profile, arg: str, event: Event, transport: Transport) -> None:
    try:
        platform = Platform(arg)
    except ValueError:
        await reprompt(profile, transport)
        return
    if platform is Platform.OTHER:
        await _move_to(store, profile, Stage.CUSTOM_PLATFORM, transport)
        return
    profile.set_platform(platform)
    ack = msg("contact.shows_as", value=profile.handle, platform=PLATFORM_LABELS[platform])
    await finish_field(store, profile, Field.CONTACT, event, transport, ack=ack)


BUTTON_HANDLERS: dict[tuple[Stage, str], ButtonHandler] = {
    (Stage.GENDER, cb.GENDER): _on_gender,
    (Stage.AGE_VISIBILITY, cb.AGE_VISIBILITY): _on_age_visibility,
    (Stage.LOCATION, cb.LOCATION): _on_location,
    (Stage.HOBBIES, cb.HOBBY): _on_hobby,
    (Stage.USERNAME_PLATFORM, cb.PLATFORM): _on_platform,
}


async def handle_text(store: ProfileStore, profile: Profile, event: Event, transport: Transport) -> None:
    handler = TEXT_HANDLERS.get(profile.state.stage)
    if handler is None:
        await remind(profile, transport)
        return
    await handler(store, profile, event, transport)


async def handle_button(
    store: ProfileStore,
    profile: Profile,
    namespace: str,
    arg: str,
    event: Event,
    transport: Transport,
) -> None:
    handler = BUTTON_HANDLERS.get((profile.state.stage, namespace))
    if handler is None:
        # Stale button from an earlier stage.
        await reprompt(profile, transport)
        return
    await handler(store, profile, arg, event, transport)
