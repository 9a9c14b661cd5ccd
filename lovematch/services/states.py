"""Flow state tags and the fixed choice lists used by the conversation.

A profile's position in the conversation is a ``FlowState``: a mode
(onboarding, completed, editing) plus, where the mode needs one, the stage
whose input is awaited. Onboarding and editing share the same stages; only
the mode decides where a finished field leads.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Mode(str, Enum):
    ONBOARDING = "awaiting"
    COMPLETED = "completed"
    EDITING = "editing"


class Stage(str, Enum):
    NAME = "name"
    GENDER = "gender"
    AGE = "age"
    AGE_VISIBILITY = "age-visibility"
    LOCATION = "location"
    LOCATION_TYPED = "location-typed"
    HOBBIES = "hobbies"
    HOBBY_TYPED = "hobby-typed"
    BIO = "bio"
    CUSTOM_USERNAME = "custom-username"
    USERNAME_PLATFORM = "username-platform"
    CUSTOM_PLATFORM = "custom-platform"
    PHOTO = "photo"


class Field(str, Enum):
    NAME = "name"
    GENDER = "gender"
    AGE = "age"
    AGE_VISIBILITY = "age-visibility"
    LOCATION = "location"
    HOBBIES = "hobbies"
    BIO = "bio"
    CONTACT = "contact"
    PHOTO = "photo"


class Gender(str, Enum):
    MALE = "male"
    FEMALE = "female"


class Platform(str, Enum):
    TELEGRAM = "telegram"
    FACEBOOK = "facebook"
    INSTAGRAM = "instagram"
    X = "x"
    OTHER = "other"


class MatchStep(str, Enum):
    LOCATION = "location"
    LOCATION_TYPED = "location-typed"


@dataclass(frozen=True)
class FlowState:
    mode: Mode
    stage: Stage | None = None

    def __post_init__(self) -> None:
        if self.mode is Mode.ONBOARDING and self.stage is None:
            raise ValueError("onboarding state needs a stage")
        if self.mode is Mode.COMPLETED and self.stage is not None:
            raise ValueError("completed state has no stage")

    @property
    def tag(self) -> str:
        if self.stage is None:
            return self.mode.value
        return f"{self.mode.value}-{self.stage.value}"

    @classmethod
    def from_tag(cls, tag: str) -> "FlowState":
        for mode in Mode:
            if tag == mode.value:
                return cls(mode)
            prefix = f"{mode.value}-"
            if tag.startswith(prefix):
                return cls(mode, Stage(tag[len(prefix):]))
        raise ValueError(f"unknown state tag: {tag!r}")

    @property
    def is_editing(self) -> bool:
        return self.mode is Mode.EDITING

    @property
    def is_onboarding(self) -> bool:
        return self.mode is Mode.ONBOARDING


COMPLETED = FlowState(Mode.COMPLETED)
EDITING_HUB = FlowState(Mode.EDITING)

# Entry stage of each field's sub-flow.
FIELD_ENTRY: dict[Field, Stage] = {
    Field.NAME: Stage.NAME,
    Field.GENDER: Stage.GENDER,
    Field.AGE: Stage.AGE,
    Field.AGE_VISIBILITY: Stage.AGE_VISIBILITY,
    Field.LOCATION: Stage.LOCATION,
    Field.HOBBIES: Stage.HOBBIES,
    Field.BIO: Stage.BIO,
    Field.CONTACT: Stage.CUSTOM_USERNAME,
    Field.PHOTO: Stage.PHOTO,
}

# Onboarding order; None means the profile is complete.
NEXT_FIELD: dict[Field, Field | None] = {
    Field.NAME: Field.GENDER,
    Field.GENDER: Field.AGE,
    Field.AGE: Field.AGE_VISIBILITY,
    Field.AGE_VISIBILITY: Field.LOCATION,
    Field.LOCATION: Field.HOBBIES,
    Field.HOBBIES: Field.BIO,
    Field.BIO: Field.CONTACT,
    Field.CONTACT: Field.PHOTO,
    Field.PHOTO: None,
}

HOBBIES = ["🎵 Music", "⚽ Sports", "🎬 Movies", "📚 Reading", "🌍 Travel", "🍳 Cooking"]
LOCATIONS = ["Addis Ababa", "Mekelle", "Hawassa", "Gonder", "Adama"]
PLATFORM_LABELS: dict[Platform, str] = {
    Platform.TELEGRAM: "Telegram",
    Platform.FACEBOOK: "Facebook",
    Platform.INSTAGRAM: "Instagram",
    Platform.X: "X (Twitter)",
    Platform.OTHER: "Other",
}
MAX_HOBBIES = 5
