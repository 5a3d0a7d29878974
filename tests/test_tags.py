from dataclasses import dataclass, field

import pytest

from cukesuite.tags import apply_tag_filter, matches


@dataclass
class Tag:
    name: str


@dataclass
class Pickle:
    id: str
    tags: list = field(default_factory=list)


P1 = Pickle("one", [Tag("@one"), Tag("@wip")])
P2 = Pickle("two", [Tag("@two"), Tag("@wip")])
P3 = Pickle("three", [Tag("@hree"), Tag("@wip")])
TESTDATA = [P1, P2, P3]


@pytest.mark.parametrize(
    "filter, expected",
    [
        ("", TESTDATA),
        ("@one", [P1]),
        ("~@one", [P2, P3]),
        ("one", [P1]),
        (" one ", [P1]),
        ("@one,@two", [P1, P2]),
        ("@one,~@two", [P1, P3]),
        (" @one , @two ", [P1, P2]),
        ("@one&&@two", []),
        ("@one&&~@two", [P1]),
        ("@one&&@wip", [P1]),
        ("@one&&@two,@wip", [P1]),
    ],
)
def test_apply_tag_filter(filter, expected):
    assert apply_tag_filter(filter, TESTDATA) == expected


def test_empty_filter_returns_same_list():
    assert apply_tag_filter("", TESTDATA) is TESTDATA


def test_filter_does_not_modify_input():
    original = list(TESTDATA)
    apply_tag_filter("@one", TESTDATA)
    assert TESTDATA == original


def test_matches_accepts_plain_string_tags():
    assert matches("@wip", ["@wip", "@one"]) is True
    assert matches("~@wip", ["@wip"]) is False


def test_matches_with_no_tags():
    assert matches("~@one", []) is True
    assert matches("@one", []) is False


def test_empty_tag_in_filter_is_rejected():
    with pytest.raises(ValueError):
        matches("@one,", [Tag("@one")])