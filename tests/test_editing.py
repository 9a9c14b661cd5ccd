from lovematch.bot.rendering.keyboard import main_menu_labels
from lovematch.bot.transport import PhotoVariant
from lovematch.bot.utils import msg
from lovematch.services.states import COMPLETED, EDITING_HUB, HOBBIES, Gender, Platform


def _edit(bot, user_id="1"):
    return bot.text(user_id, main_menu_labels()["edit"])


def test_edit_opens_hub_with_field_menu(bot, store):
    bot.onboard("1")

    out = _edit(bot)

    assert store.get("1").state == EDITING_HUB
    assert out.last_text == msg("edit.hub")
    actions = out.last_options.actions()
    assert "edit:name" in actions
    assert "edit:age-visibility" in actions
    assert actions[-2:] == ["edit:cancel", "edit:done"]


def test_edit_field_returns_to_hub(bot, store):
    bot.onboard("1")
    _edit(bot)

    out = bot.press("1", "edit:name")
    assert store.get("1").state.tag == "editing-name"
    assert out.last_text == msg("edit.prompt.name")

    out = bot.text("1", "Annabel")
    profile = store.get("1")
    assert profile.name == "Annabel"
    assert profile.state == EDITING_HUB
    assert out.last_text == msg("edit.updated.name")


def test_edit_age_prompt_shows_current_age(bot):
    bot.onboard("1", age="33")
    _edit(bot)

    out = bot.press("1", "edit:age")

    assert out.last_text == msg("edit.prompt.age", age=33)


def test_invalid_edit_input_keeps_old_value(bot, store, persistence):
    bot.onboard("1", age="33")
    _edit(bot)
    bot.press("1", "edit:age")
    saves = persistence.saves

    out = bot.text("1", "99")

    assert store.get("1").age == 33
    assert store.get("1").state.tag == "editing-age"
    assert persistence.saves == saves
    assert out.last_text == msg("edit.prompt.age", age=33)


def test_edit_selectors_and_contact(bot, store):
    bot.onboard("1", gender="male")
    _edit(bot)

    bot.press("1", "edit:gender")
    bot.press("1", "gender:female")
    bot.press("1", "edit:age-visibility")
    bot.press("1", "agevis:no")
    bot.press("1", "edit:location")
    bot.press("1", "loc:4")
    bot.press("1", "edit:contact")
    bot.text("1", "new_handle")
    out = bot.press("1", "platform:x")

    profile = store.get("1")
    assert profile.gender is Gender.FEMALE
    assert profile.age_visible is False
    assert profile.location == "Adama"
    assert profile.handle == "new_handle"
    assert profile.platform is Platform.X
    assert profile.contact_label == "X (Twitter)"
    assert profile.state == EDITING_HUB
    assert out.last_text == msg("edit.updated.contact")


def test_contact_edit_abandoned_before_platform_keeps_old_contact(bot, store, persistence):
    bot.onboard("1")
    _edit(bot)
    bot.press("1", "edit:contact")
    bot.text("1", "new_handle")
    assert store.get("1").handle == "handle"

    out = bot.press("1", "edit:cancel")

    profile = store.get("1")
    assert profile.handle == "handle"
    assert profile.platform is Platform.TELEGRAM
    assert profile.pending_handle is None
    assert persistence.profiles["1"].handle == "handle"
    assert out.last_text == msg("edit.cancelled")

    _edit(bot)
    bot.press("1", "edit:contact")
    bot.text("1", "other_handle")
    bot.press("1", "platform:other")
    bot.press("1", "edit:done")

    profile = store.get("1")
    assert profile.handle == "handle"
    assert profile.contact_label == "Telegram"


def test_edit_photo(bot, store):
    bot.onboard("1")
    _edit(bot)
    bot.press("1", "edit:photo")

    out = bot.photo("1", PhotoVariant("new-photo", 1000, 1000))

    assert store.get("1").photo == "new-photo"
    assert out.last_text == msg("edit.updated.photo")


def test_edit_hobbies_keeps_one(bot, store):
    bot.onboard("1")
    _edit(bot)
    bot.press("1", "edit:hobbies")

    out = bot.press("1", "hobby:toggle:0")
    assert store.get("1").hobbies == [HOBBIES[0]]
    assert out.last_text == msg("hobbies.keep_one")

    bot.press("1", "hobby:toggle:3")
    bot.press("1", "hobby:toggle:0")
    out = bot.press("1", "hobby:done")
    assert store.get("1").hobbies == [HOBBIES[3]]
    assert out.last_text == msg("edit.updated.hobbies")


def test_done_and_cancel_return_to_completed(bot, store):
    bot.onboard("1")
    _edit(bot)
    out = bot.press("1", "edit:done")
    assert store.get("1").state == COMPLETED
    assert out.last_text == msg("edit.done")

    _edit(bot)
    bot.press("1", "edit:bio")
    out = bot.press("1", "edit:cancel")
    assert store.get("1").state == COMPLETED
    assert out.last_text == msg("edit.cancelled")


def test_menu_guard_redirects_to_hub(bot, store):
    bot.onboard("1")
    _edit(bot)
    bot.press("1", "edit:bio")

    out = bot.text("1", main_menu_labels()["matches"])
    assert store.get("1").state == EDITING_HUB
    assert out.last_text == msg("edit.guard.matches")

    out = bot.text("1", main_menu_labels()["profile"])
    assert out.last_text == msg("edit.guard.profile")
    assert out.images == []


def test_editing_clears_pending_match_search(bot, store):
    bot.onboard("1")
    bot.text("1", main_menu_labels()["matches"])
    bot.press("1", "match_loc:other")

    _edit(bot)
    bot.press("1", "edit:done")
    out = bot.text("1", "Adama")

    assert store.get("1").match_step is None
    assert out.last_text == msg("menu.unknown")


def test_edit_completion_does_not_broadcast(bot, store):
    bot.onboard("1", gender="male")
    bot.onboard("2", gender="female")
    _edit(bot, "2")
    bot.press("2", "edit:bio")
    out = bot.text("2", "Updated bio")
    out_done = bot.press("2", "edit:done")

    assert out.sent == []
    assert out_done.sent == []
    assert store.notified("1") == frozenset({"2"})


def test_edit_action_outside_editing(bot):
    bot.onboard("1")
    out = bot.press("1", "edit:name")
    assert out.last_text == msg("edit.not_editing")
