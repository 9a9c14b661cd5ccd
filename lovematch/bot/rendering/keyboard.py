from __future__ import annotations

from dataclasses import dataclass

from telegram import InlineKeyboardButton, InlineKeyboardMarkup, ReplyKeyboardMarkup

from lovematch.bot.parsing import callbacks as cb
from lovematch.bot.utils import msg
from lovematch.services.profile import Profile
from lovematch.services.states import HOBBIES, LOCATIONS, PLATFORM_LABELS, Field, Gender


@dataclass(frozen=True)
class Button:
    label: str
    action: str


@dataclass(frozen=True)
class Options:
    """Transport-neutral choice set: inline choices or the persistent menu."""

    rows: tuple[tuple[Button, ...], ...]
    menu: bool = False

    def actions(self) -> list[str]:
        return [b.action for row in self.rows for b in row]

    def labels(self) -> list[str]:
        return [b.label for row in self.rows for b in row]


def _column(buttons: list[Button]) -> tuple[tuple[Button, ...], ...]:
    return tuple((b,) for b in buttons)


def main_menu_labels() -> dict[str, str]:
    return {
        "matches": msg("menu.matches"),
        "profile": msg("menu.profile"),
        "edit": msg("menu.edit"),
        "help": msg("menu.help"),
        "support": msg("menu.support"),
    }


def main_menu() -> Options:
    labels = main_menu_labels()
    rows = (
        (Button(labels["matches"], "matches"),),
        (Button(labels["profile"], "profile"), Button(labels["edit"], "edit")),
        (Button(labels["help"], "help"), Button(labels["support"], "support")),
    )
    return Options(rows, menu=True)


def signup_options() -> Options:
    return Options(((Button(msg("button.signup"), cb.SIGNUP),),))


def gender_options() -> Options:
    return Options(
        (
            (
                Button(msg("gender.male"), cb.make_action(cb.GENDER, Gender.MALE.value)),
                Button(msg("gender.female"), cb.make_action(cb.GENDER, Gender.FEMALE.value)),
            ),
        )
    )


def age_visibility_options() -> Options:
    return Options(
        _column(
            [
                Button(msg("button.yes"), cb.make_action(cb.AGE_VISIBILITY, "yes")),
                Button(msg("button.no"), cb.make_action(cb.AGE_VISIBILITY, "no")),
            ]
        )
    )


def location_options(namespace: str = cb.LOCATION) -> Options:
    buttons = [Button(loc, cb.make_action(namespace, i)) for i, loc in enumerate(LOCATIONS)]
    buttons.append(Button(msg("button.other"), cb.make_action(namespace, cb.OTHER)))
    return Options(_column(buttons))


def hobby_choices(selected: list[str]) -> list[str]:
    """Fixed hobbies followed by any typed-in ones, in toggle-index order."""
    return HOBBIES + [h for h in selected if h not in HOBBIES]


def hobby_options(selected: list[str]) -> Options:
    buttons = []
    for i, hobby in enumerate(hobby_choices(selected)):
        mark = "✅" if hobby in selected else "🏷️"
        buttons.append(Button(f"{mark} {hobby}", cb.make_action(cb.HOBBY, cb.TOGGLE, i)))
    buttons.append(Button(msg("button.other"), cb.make_action(cb.HOBBY, cb.OTHER)))
    buttons.append(Button(msg("button.done"), cb.make_action(cb.HOBBY, cb.DONE)))
    return Options(_column(buttons))


def platform_options() -> Options:
    return Options(
        _column([Button(label, cb.make_action(cb.PLATFORM, p.value)) for p, label in PLATFORM_LABELS.items()])
    )


def edit_menu(profile: Profile) -> Options:
    gender = msg(f"gender.{profile.gender.value}") if profile.gender else ""
    visibility = msg("button.yes") if profile.age_visible else msg("button.no")
    entries = [
        (Field.NAME, msg("edit.menu.name", value=profile.name or "")),
        (Field.GENDER, msg("edit.menu.gender", value=gender)),
        (Field.AGE, msg("edit.menu.age", value=profile.age or "")),
        (Field.AGE_VISIBILITY, msg("edit.menu.age-visibility", value=visibility)),
        (Field.LOCATION, msg("edit.menu.location", value=profile.location or "")),
        (Field.HOBBIES, msg("edit.menu.hobbies", value=", ".join(profile.hobbies))),
        (Field.BIO, msg("edit.menu.bio")),
        (Field.PHOTO, msg("edit.menu.photo")),
        (Field.CONTACT, msg("edit.menu.contact", value=profile.handle or "", platform=profile.contact_label)),
    ]
    buttons = [Button(label, cb.make_action(cb.EDIT, field.value)) for field, label in entries]
    buttons.append(Button(msg("button.cancel"), cb.make_action(cb.EDIT, cb.CANCEL)))
    buttons.append(Button(msg("button.done"), cb.make_action(cb.EDIT, cb.DONE)))
    return Options(_column(buttons))


def reveal_options(user_id: str) -> Options:
    return Options(((Button(msg("button.reveal"), cb.make_action(cb.REVEAL, user_id)),),))


def to_markup(options: Options | None) -> InlineKeyboardMarkup | ReplyKeyboardMarkup | None:
    if options is None:
        return None
    if options.menu:
        return ReplyKeyboardMarkup(
            [[b.label for b in row] for row in options.rows],
            resize_keyboard=True,
        )
    return InlineKeyboardMarkup(
        [[InlineKeyboardButton(b.label, callback_data=b.action) for b in row] for row in options.rows]
    )
