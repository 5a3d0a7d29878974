from datetime import datetime

import pytest

from cukesuite.utils import DEV_VERSION, _pick_version, spaces, time_now


@pytest.mark.parametrize("count", [0, 1, 3, 12])
def test_spaces_repeats_count(count):
    result = spaces(count)
    assert len(result) == count
    assert set(result) <= {" "}


def test_spaces_negative_gives_single_space():
    assert spaces(-5) == " "
    assert spaces(-1) == spaces(1)


def test_time_now_lies_between_surrounding_clock_reads():
    before = datetime.now()
    stamp = time_now()
    after = datetime.now()
    assert before <= stamp <= after


def test_time_now_is_monotonic_across_calls():
    first = time_now()
    second = time_now()
    assert first <= second


def test_pick_version_replaces_dev_placeholder():
    assert _pick_version(DEV_VERSION, "v1.2.3") == "v1.2.3"


def test_pick_version_keeps_dev_for_devel_build():
    assert _pick_version(DEV_VERSION, "(devel)") == DEV_VERSION
    assert _pick_version(DEV_VERSION, None) == DEV_VERSION


def test_pick_version_keeps_explicit_version():
    assert _pick_version("v9.9.9", "v1.2.3") == "v9.9.9"