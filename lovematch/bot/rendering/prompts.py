from __future__ import annotations

from dataclasses import dataclass

from lovematch.bot.rendering.keyboard import (
    Options,
    age_visibility_options,
    edit_menu,
    gender_options,
    hobby_options,
    location_options,
    main_menu,
    platform_options,
)
from lovematch.bot.utils import msg
from lovematch.services.profile import Profile
from lovematch.services.states import Mode, Stage


@dataclass(frozen=True)
class Prompt:
    text: str
    options: Options | None = None


def stage_options(profile: Profile) -> Options | None:
    stage = profile.state.stage
    if stage is Stage.GENDER:
        return gender_options()
    if stage is Stage.AGE_VISIBILITY:
        return age_visibility_options()
    if stage is Stage.LOCATION:
        return location_options()
    if stage is Stage.HOBBIES:
        return hobby_options(profile.hobbies)
    if stage is Stage.USERNAME_PLATFORM:
        return platform_options()
    return None


def stage_prompt(profile: Profile) -> Prompt:
    """The instruction for whatever input the profile's state is waiting for."""
    state = profile.state
    if state.mode is Mode.COMPLETED:
        return Prompt(msg("menu.hint"), main_menu())
    if state.stage is None:
        return Prompt(msg("edit.hub"), edit_menu(profile))
    prefix = "edit.prompt" if state.is_editing else "prompt"
    text = msg(f"{prefix}.{state.stage.value}", age=profile.age or "")
    return Prompt(text, stage_options(profile))


def stage_reminder(profile: Profile) -> Prompt:
    """Nudge sent when the input class does not fit the stage (text for a selector, etc)."""
    state = profile.state
    if state.stage is None:
        return stage_prompt(profile)
    return Prompt(msg(f"reminder.{state.stage.value}"), stage_options(profile))
