from lovematch.bot.rendering.keyboard import main_menu_labels
from lovematch.bot.utils import msg
from lovematch.services.matching import find_matches, is_match
from lovematch.services.profile import Profile
from lovematch.services.states import COMPLETED, EDITING_HUB, LOCATIONS, Gender


def _completed(user_id, gender, location="Adama", age=25, **extra):
    return Profile(
        user_id=user_id,
        state=COMPLETED,
        name=f"User {user_id}",
        gender=gender,
        age=age,
        location=location,
        hobbies=["🎵 Music"],
        bio="Hello there",
        handle=f"h{user_id}",
        **extra,
    )


def test_is_match_rules():
    me = _completed("1", Gender.MALE)
    assert is_match(me, _completed("2", Gender.FEMALE), "Adama")
    assert not is_match(me, _completed("3", Gender.MALE), "Adama")
    assert not is_match(me, _completed("4", Gender.FEMALE, location="Mekelle"), "Adama")
    assert not is_match(me, _completed("5", Gender.FEMALE, age=50), "Adama")
    pending = _completed("6", Gender.FEMALE)
    pending.state = EDITING_HUB
    assert not is_match(me, pending, "Adama")


def test_find_matches_excludes_requester(store):
    me = _completed("1", Gender.MALE)
    store.upsert(me)
    store.upsert(_completed("2", Gender.FEMALE))
    store.upsert(_completed("3", Gender.FEMALE, location="Hawassa"))

    assert [p.user_id for p in find_matches(store, me, "Adama")] == ["2"]


def test_match_search_by_button(bot, store):
    bot.onboard("1", gender="male", location_index=0)
    bot.onboard("2", gender="female", location_index=4)

    out = bot.text("1", main_menu_labels()["matches"])
    assert store.get("1").match_step.value == "location"
    assert out.last_text == msg("matches.where")
    assert out.last_options.actions()[-1] == "match_loc:other"

    out = bot.press("1", "match_loc:4")

    assert store.get("1").match_step is None
    assert store.get("1").match_location == LOCATIONS[4]
    assert len(out.images) == 1
    reference, caption, options = out.images[0]
    assert reference == "photo-2"
    assert msg("profile.name", value="User 2") in caption
    assert options.actions() == ["reveal:2"]
    assert out.last_text == msg("matches.header")


def test_match_search_by_typed_location(bot, store):
    bot.onboard("1", gender="female")
    bot.text("1", main_menu_labels()["matches"])
    bot.press("1", "match_loc:other")

    short = bot.text("1", "X")
    assert short.last_text == msg("matches.location_invalid")

    out = bot.text("1", "Bahir Dar")
    assert out.last_text == msg("matches.none")
    assert store.get("1").match_location == "Bahir Dar"


def test_hidden_age_not_shown_to_others(bot):
    bot.onboard("1", gender="male", age="40", age_visible=False)
    bot.onboard("2", gender="female")

    out = bot.text("2", main_menu_labels()["matches"])
    out = bot.press("2", "match_loc:0")

    _, caption, _ = out.images[0]
    assert msg("profile.age", value=40) not in caption

    own = bot.text("1", main_menu_labels()["profile"])
    _, own_caption, _ = own.images[0]
    assert msg("profile.age", value=40) in own_caption


def test_stale_location_button_ignored(bot, store):
    bot.onboard("1")

    out = bot.press("1", "match_loc:0")

    assert out.last_text == msg("matches.expired")
    assert out.images == []


def test_reveal_contact(bot):
    bot.onboard("1", gender="male", handle="abe_tg")
    bot.onboard("2", gender="female", handle=None)

    out = bot.press("2", "reveal:1")
    assert out.last_text == msg("contact.info", value="abe_tg", platform="Telegram")

    out = bot.press("1", "reveal:2")
    assert out.last_text == msg("contact.info", value="insta_2", platform="Instagram")


def test_reveal_unknown_or_incomplete_profile(bot):
    bot.onboard("1")
    bot.press("2", "signup")

    assert bot.press("1", "reveal:999").last_text == msg("contact.not_found")
    assert bot.press("1", "reveal:2").last_text == msg("contact.not_found")


def test_matches_require_completed_profile(bot):
    bot.press("1", "signup")

    out = bot.text("1", main_menu_labels()["matches"])

    assert out.texts == [msg("profile.incomplete"), msg("prompt.name")]


def test_reveal_fails_while_target_is_editing(bot):
    bot.onboard("1", gender="male")
    bot.onboard("2", gender="female")
    bot.text("1", main_menu_labels()["edit"])

    out = bot.press("2", "reveal:1")

    assert out.last_text == msg("contact.not_found")


def test_a_b_scenario(bot, store):
    out_a = bot.onboard("A", gender="male", location_index=4)
    assert out_a.sent == []

    out_b = bot.onboard("B", gender="female", location_index=4)
    assert out_b.sent == [("A", msg("notify.new_match"))]

    bot.text("A", main_menu_labels()["matches"])
    found = bot.press("A", "match_loc:4")
    assert [ref for ref, _, _ in found.images] == ["photo-B"]
