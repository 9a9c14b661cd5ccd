from __future__ import annotations

import logging

from lovematch.bot.handlers import editing, matches
from lovematch.bot.handlers.onboarding import send_prompt
from lovematch.bot.rendering.keyboard import main_menu, main_menu_labels, signup_options
from lovematch.bot.rendering.profile import own_profile_caption
from lovematch.bot.transport import Event, Transport
from lovematch.bot.utils import msg
from lovematch.services.profile import Profile
from lovematch.services.profile_store import ProfileStore
from lovematch.settings import settings

logger = logging.getLogger("lovematch_bot")


def menu_action(text: str | None) -> str | None:
    """Main-menu action for a keyboard label, or None for free text."""
    if not text:
        return None
    stripped = text.strip()
    for action, label in main_menu_labels().items():
        if stripped == label:
            return action
    return None


async def prompt_signup(transport: Transport) -> None:
    await transport.reply(msg("signup.required"), signup_options())


async def start(store: ProfileStore, event: Event, transport: Transport) -> None:
    await transport.reply(msg("start.welcome"))
    await transport.reply(msg("start.consent"))
    profile = store.get(event.user_id)
    if profile is None:
        await transport.reply(msg("start.signup"), signup_options())
        return
    if profile.is_completed:
        await transport.reply(msg("start.back", name=profile.name), main_menu())
        return
    await transport.reply(msg("start.resume"))
    await send_prompt(profile, transport)


async def show_profile(profile: Profile, transport: Transport) -> None:
    caption = own_profile_caption(profile)
    if profile.photo:
        await transport.reply_with_image(profile.photo, caption)
    else:
        await transport.reply(caption)


async def on_menu(store: ProfileStore, event: Event, action: str, transport: Transport) -> None:
    if action == "help":
        await transport.reply(msg("help.text"))
        return
    if action == "support":
        await transport.reply(msg("support.text", handle=settings.SUPPORT_HANDLE))
        return

    profile = store.get(event.user_id)
    if profile is None:
        await prompt_signup(transport)
        return
    if profile.state.is_editing:
        if action == "edit":
            await send_prompt(profile, transport)
        else:
            await editing.redirect_to_hub(store, profile, transport, f"edit.guard.{action}")
        return
    if not profile.is_completed:
        await transport.reply(msg("profile.incomplete"))
        await send_prompt(profile, transport)
        return

    if action == "matches":
        await matches.request_matches(store, profile, transport)
    elif action == "profile":
        await show_profile(profile, transport)
    elif action == "edit":
        await editing.start_editing(store, profile, transport)
