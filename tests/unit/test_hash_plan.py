from __future__ import annotations

import pytest

from hashing import count_marker, plan_for


def test_count_marker_is_case_sensitive() -> None:
    assert count_marker("EeEeE") == 3
    assert count_marker("eee") == 0
    assert count_marker("") == 0


def test_count_marker_custom_marker() -> None:
    assert count_marker("a-b-c", "-") == 2


@pytest.mark.parametrize(
    "serial,count,single_pass,iterations",
    [
        ("", 0, True, 0),
        ("ABC", 0, True, 0),
        ("E", 1, True, 0),
        ("EE", 2, False, 2),
        ("EEE", 3, True, 0),
        ("E-E-E-E", 4, False, 4),
    ],
)
def test_plan_branches(serial: str, count: int, single_pass: bool, iterations: int) -> None:
    plan = plan_for(serial)
    assert plan.marker_count == count
    assert plan.single_pass is single_pass
    assert plan.iterations == iterations


def test_plan_describe() -> None:
    assert plan_for("EE").describe() == "count=2 single_pass=False iterations=2"
