# tests/test_tokenizer.py

import pytest

from logic.exceptions import ParseError
from logic.tokenizer import tokenize


def test_preamble_only():
    multimap = tokenize("  some preamble  ", "n/")

    assert multimap.preamble == "some preamble"
    assert multimap.get_value("n/") is None
    assert not multimap.is_present("n/")


def test_values_are_split_by_marker():
    multimap = tokenize(" 1 n/Amy Tan t/friend t/tutee", "n/", "t/")

    assert multimap.preamble == "1"
    assert multimap.get_value("n/") == "Amy Tan"
    assert multimap.get_all_values("t/") == ["friend", "tutee"]
    assert multimap.get_value("t/") == "tutee"


def test_marker_must_follow_whitespace():
    multimap = tokenize(" 1 a/Lab/n/a Block", "a/", "n/")

    assert multimap.get_value("a/") == "Lab/n/a Block"
    assert not multimap.is_present("n/")


def test_unrequested_marker_stays_in_value():
    multimap = tokenize(" 1 n/Amy x/unknown", "n/")

    assert multimap.get_value("n/") == "Amy x/unknown"


def test_longer_marker_is_not_split_by_shorter_one():
    multimap = tokenize(" id/A1234567X", "id/", "d/")

    assert multimap.get_value("id/") == "A1234567X"
    assert not multimap.is_present("d/")


def test_empty_value_is_recorded():
    multimap = tokenize(" 1 t/", "t/")

    assert multimap.get_all_values("t/") == [""]


def test_verify_no_duplicate_prefixes():
    multimap = tokenize(" 1 n/Amy n/Ben t/a t/b", "n/", "t/")

    with pytest.raises(ParseError) as e:
        multimap.verify_no_duplicate_prefixes_for("n/")

    assert "n/" in e.value.message

    tokenize(" 1 n/Amy t/a t/b", "n/", "t/").verify_no_duplicate_prefixes_for("n/")
