from lovematch.bot.utils import msg
from lovematch.services.profile import Profile


def _gender_label(profile: Profile) -> str:
    return msg(f"gender.{profile.gender.value}") if profile.gender else ""


def match_caption(match: Profile) -> str:
    lines = [
        msg("profile.name", value=match.name),
        msg("profile.gender", value=_gender_label(match)),
    ]
    if match.age_visible:
        lines.append(msg("profile.age", value=match.age))
    lines.append(msg("profile.location", value=match.location))
    lines.append(msg("profile.hobbies", value=", ".join(match.hobbies)))
    lines.append(msg("profile.bio", value=match.bio))
    return "\n".join(lines)


def own_profile_caption(profile: Profile) -> str:
    # Owners always see their own age.
    lines = [
        msg("profile.name", value=profile.name),
        msg("profile.gender", value=_gender_label(profile)),
        msg("profile.age", value=profile.age),
        msg("profile.location", value=profile.location),
        msg("profile.hobbies", value=", ".join(profile.hobbies)),
        msg("profile.bio", value=profile.bio),
    ]
    if profile.handle:
        lines.append(msg("profile.contact", value=profile.handle, platform=profile.contact_label))
    return "\n".join(lines)


def contact_message(profile: Profile) -> str:
    return msg("contact.info", value=profile.handle, platform=profile.contact_label)
