from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field

from lovematch.services.states import (
    COMPLETED,
    MAX_HOBBIES,
    PLATFORM_LABELS,
    FlowState,
    Gender,
    MatchStep,
    Mode,
    Platform,
    Stage,
)
from lovematch.services.validation import validate_age, validate_string


@dataclass
class Profile:
    user_id: str
    state: FlowState = field(default_factory=lambda: FlowState(Mode.ONBOARDING, Stage.NAME))
    name: str | None = None
    gender: Gender | None = None
    age: int | None = None
    age_visible: bool = True
    location: str | None = None
    hobbies: list[str] = field(default_factory=list)
    bio: str | None = None
    photo: str | None = None
    handle: str | None = None
    pending_handle: str | None = None
    platform: Platform | None = None
    platform_label: str | None = None
    match_step: MatchStep | None = None
    match_location: str | None = None

    def copy(self) -> "Profile":
        return dataclasses.replace(self, hobbies=list(self.hobbies))

    @property
    def is_completed(self) -> bool:
        return self.state == COMPLETED

    @property
    def contact_label(self) -> str:
        if self.platform_label:
            return self.platform_label
        if self.platform is not None:
            return PLATFORM_LABELS[self.platform]
        return PLATFORM_LABELS[Platform.TELEGRAM]

    def set_platform(self, platform: Platform, label: str | None = None) -> None:
        """Set the platform, committing a handle typed at the custom-username stage."""
        if self.pending_handle:
            self.handle, self.pending_handle = self.pending_handle, None
        self.platform = platform
        self.platform_label = label or PLATFORM_LABELS[platform]

    def missing_fields(self) -> list[str]:
        """Names of required fields that are absent or invalid."""
        missing = []
        if not validate_string(self.name):
            missing.append("name")
        if self.gender is None:
            missing.append("gender")
        if not validate_age(self.age):
            missing.append("age")
        if not validate_string(self.location):
            missing.append("location")
        if not self.hobbies or len(self.hobbies) > MAX_HOBBIES:
            missing.append("hobbies")
        if not validate_string(self.bio):
            missing.append("bio")
        if not self.handle:
            missing.append("handle")
        return missing
