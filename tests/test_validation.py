from lovematch.services.validation import parse_age, validate_age, validate_string


def test_validate_string_requires_two_visible_characters():
    assert validate_string("Al")
    assert validate_string("  Bo  ")
    assert not validate_string("A")
    assert not validate_string("   x  ")
    assert not validate_string("")
    assert not validate_string(None)
    assert not validate_string(42)


def test_validate_age_bounds():
    assert validate_age(16)
    assert validate_age(45)
    assert not validate_age(15)
    assert not validate_age(46)
    assert not validate_age(True)
    assert not validate_age("20")


def test_parse_age_reads_first_number():
    assert parse_age("25") == 25
    assert parse_age("I am 30 years old") == 30
    assert parse_age("15") is None
    assert parse_age("16") == 16
    assert parse_age("17") == 17
    assert parse_age("46") is None
    assert parse_age("twenty") is None
