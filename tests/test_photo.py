from lovematch.bot.handlers.photo import pick_largest
from lovematch.bot.transport import PhotoVariant


def test_pick_largest_by_area():
    variants = (PhotoVariant("s", 90, 90), PhotoVariant("l", 1280, 720), PhotoVariant("m", 320, 240))
    assert pick_largest(variants).reference == "l"


def test_pick_largest_later_wins_tie():
    variants = (PhotoVariant("a", 100, 100), PhotoVariant("b", 50, 200))
    assert pick_largest(variants).reference == "b"


def test_pick_largest_single():
    assert pick_largest((PhotoVariant("only"),)).reference == "only"
