from lovematch.bot.rendering.keyboard import main_menu_labels
from lovematch.bot.utils import msg
from lovematch.settings import settings


def test_start_for_completed_profile(bot):
    bot.onboard("1")

    out = bot.start("1")

    assert out.last_text == msg("start.back", name="User 1")
    assert out.last_options.menu


def test_start_resumes_onboarding(bot):
    bot.press("1", "signup")
    bot.text("1", "Ann")

    out = bot.start("1")

    assert out.texts[-2:] == [msg("start.resume"), msg("prompt.gender")]


def test_help_and_support_need_no_profile(bot, monkeypatch):
    monkeypatch.setattr(settings, "SUPPORT_HANDLE", "@help_desk")

    assert bot.text("1", main_menu_labels()["help"]).last_text == msg("help.text")
    assert bot.text("1", main_menu_labels()["support"]).last_text == msg("support.text", handle="@help_desk")


def test_show_own_profile_without_photo(bot, store):
    bot.onboard("1")
    profile = store.get("1")
    profile.photo = None
    store.upsert(profile)

    out = bot.text("1", main_menu_labels()["profile"])

    assert out.images == []
    assert msg("profile.contact", value="handle", platform="Telegram") in out.last_text


def test_unknown_text_after_completion(bot):
    bot.onboard("1")
    out = bot.text("1", "what now?")
    assert out.last_text == msg("menu.unknown")


def test_menu_label_matching_ignores_padding(bot, store):
    bot.onboard("1")
    bot.text("1", f"  {main_menu_labels()['edit']} ")
    assert store.get("1").state.is_editing
