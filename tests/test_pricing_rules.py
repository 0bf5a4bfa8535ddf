"""
Pricing rule tests for the pure evaluator.

Base prices used throughout: day pass 35, night pass 19.

Key dates:
  2019-02-11  Monday, not a holiday (reduction = 35)
  2019-02-13  Wednesday
  2019-02-18  Monday + holiday
"""
from datetime import date, timedelta

import pytest

from lift_pass.engine import (
    AgeBracket,
    PassType,
    UnknownPassTypeError,
    evaluate,
    reduction_percent,
    select_bracket,
)

DAY_BASE = 35
NIGHT_BASE = 19

MONDAY = date(2019, 2, 11)
WEDNESDAY = date(2019, 2, 13)
MONDAY_HOLIDAY = date(2019, 2, 18)


# ---------------------------------------------------------------
# reduction_percent
# ---------------------------------------------------------------

def test_reduction_on_plain_monday():
    assert reduction_percent(MONDAY, is_holiday=False) == 35


def test_no_reduction_without_date():
    assert reduction_percent(None, is_holiday=False) == 0
    # A holiday flag without a date has nothing to apply to
    assert reduction_percent(None, is_holiday=True) == 0


def test_holiday_overrides_monday():
    assert reduction_percent(MONDAY_HOLIDAY, is_holiday=True) == 0


@pytest.mark.parametrize("offset", range(1, 7))
def test_no_reduction_on_other_weekdays(offset):
    day = MONDAY + timedelta(days=offset)
    assert reduction_percent(day, is_holiday=False) == 0, f"{day:%A} should not be discounted"


def test_every_monday_holiday_has_no_reduction():
    """Holiday status wins on every Monday of a year."""
    day = date(2024, 1, 1)  # a Monday
    while day.year == 2024:
        assert reduction_percent(day, is_holiday=True) == 0
        day += timedelta(days=7)


# ---------------------------------------------------------------
# select_bracket
# ---------------------------------------------------------------

@pytest.mark.parametrize("pass_type,age,expected", [
    (PassType.DAY, None, AgeBracket.UNSPECIFIED),
    (PassType.NIGHT, None, AgeBracket.UNSPECIFIED),
    (PassType.DAY, 0, AgeBracket.FREE),
    (PassType.DAY, 5, AgeBracket.FREE),
    (PassType.NIGHT, 5, AgeBracket.FREE),
    (PassType.DAY, 6, AgeBracket.CHILD),
    (PassType.DAY, 14, AgeBracket.CHILD),
    (PassType.DAY, 15, AgeBracket.ADULT),
    (PassType.DAY, 64, AgeBracket.ADULT),
    (PassType.DAY, 65, AgeBracket.SENIOR),
    (PassType.NIGHT, 6, AgeBracket.ADULT),
    (PassType.NIGHT, 14, AgeBracket.ADULT),
    (PassType.NIGHT, 64, AgeBracket.ADULT),
    (PassType.NIGHT, 65, AgeBracket.SENIOR),
], ids=lambda v: getattr(v, 'value', str(v)))
def test_select_bracket(pass_type, age, expected):
    assert select_bracket(pass_type, age) is expected


# ---------------------------------------------------------------
# evaluate
# ---------------------------------------------------------------

@pytest.mark.parametrize("pass_type,base,age,visit_date,is_holiday,expected", [
    # Under 6: free
    ("1jour", DAY_BASE, 5, None, False, 0),
    ("1jour", DAY_BASE, 0, MONDAY, False, 0),
    ("1jour", DAY_BASE, 5, MONDAY_HOLIDAY, True, 0),
    ("night", NIGHT_BASE, 5, None, False, 0),
    # Night pass
    ("night", NIGHT_BASE, None, None, False, 0),
    ("night", NIGHT_BASE, None, WEDNESDAY, False, 0),
    ("night", NIGHT_BASE, 6, None, False, 19),
    ("night", NIGHT_BASE, 64, None, False, 19),
    ("night", NIGHT_BASE, 65, None, False, 8),        # ceil(19 * 0.4) = ceil(7.6)
    ("night", NIGHT_BASE, 25, MONDAY, False, 19),
    ("night", NIGHT_BASE, 65, MONDAY, False, 8),
    # Day pass, child: flat 0.7 on every date
    ("1jour", DAY_BASE, 6, None, False, 25),          # ceil(35 * 0.7) = ceil(24.5)
    ("1jour", DAY_BASE, 14, None, False, 25),
    ("1jour", DAY_BASE, 10, MONDAY, False, 25),
    ("1jour", DAY_BASE, 10, MONDAY_HOLIDAY, True, 25),
    # Day pass, adult
    ("1jour", DAY_BASE, 15, None, False, 35),
    ("1jour", DAY_BASE, 25, WEDNESDAY, False, 35),
    ("1jour", DAY_BASE, 25, MONDAY, False, 23),       # ceil(35 * 0.65) = ceil(22.75)
    ("1jour", DAY_BASE, 25, MONDAY_HOLIDAY, True, 35),
    # Day pass, senior
    ("1jour", DAY_BASE, 65, None, False, 27),         # ceil(35 * 0.75) = ceil(26.25)
    ("1jour", DAY_BASE, 65, MONDAY, False, 18),       # ceil(35 * 0.75 * 0.65) = ceil(17.0625)
    ("1jour", DAY_BASE, 65, MONDAY_HOLIDAY, True, 27),
    # Day pass, no age
    ("1jour", DAY_BASE, None, None, False, 35),
    ("1jour", DAY_BASE, None, MONDAY, False, 23),
    ("1jour", DAY_BASE, None, MONDAY_HOLIDAY, True, 35),
])
def test_evaluate(pass_type, base, age, visit_date, is_holiday, expected):
    cost = evaluate(pass_type, base, age, visit_date, is_holiday)
    assert cost == expected, \
        f"{pass_type} age={age} date={visit_date} holiday={is_holiday}: expected {expected}, got {cost}"


def test_evaluate_returns_int():
    assert type(evaluate(PassType.DAY, DAY_BASE, 65, MONDAY, False)) is int


def test_child_rate_ignores_reduction_even_when_eligible():
    """The reduction is 35 on this date, yet the child pays the flat rate."""
    assert reduction_percent(MONDAY, False) == 35
    assert evaluate(PassType.DAY, DAY_BASE, 10, MONDAY, False) == evaluate(PassType.DAY, DAY_BASE, 10, None, False)


def test_holiday_flag_ignored_without_date():
    assert evaluate(PassType.DAY, DAY_BASE, 25, None, True) == 35


def test_negative_age_prices_as_free():
    assert evaluate(PassType.DAY, DAY_BASE, -1) == 0
    assert evaluate(PassType.NIGHT, NIGHT_BASE, -1) == 0


def test_rounding_is_exact():
    """Multipliers apply to exact decimals before rounding up."""
    # 20 * 0.65 = 13 exactly, no spurious round-up
    assert evaluate(PassType.DAY, 20, 25, MONDAY, False) == 13
    # 100 * 0.7 = 70 exactly
    assert evaluate(PassType.DAY, 100, 10) == 70
    # 10 * 0.4 = 4 exactly
    assert evaluate(PassType.NIGHT, 10, 70) == 4


def test_zero_base_price_is_free_everywhere():
    for age in (None, 6, 25, 65):
        assert evaluate(PassType.DAY, 0, age, MONDAY, False) == 0
        assert evaluate(PassType.NIGHT, 0, age) == 0


@pytest.mark.parametrize("age", [None, 5, 6, 25, 64, 65, 90])
def test_night_pass_ignores_date(age):
    costs = {
        evaluate(PassType.NIGHT, NIGHT_BASE, age, d, h)
        for d, h in [(None, False), (MONDAY, False), (WEDNESDAY, False), (MONDAY_HOLIDAY, True)]
    }
    assert len(costs) == 1, f"Night pass cost varied with date for age {age}: {costs}"


def test_evaluate_is_deterministic():
    args = (PassType.DAY, DAY_BASE, 65, MONDAY, False)
    assert {evaluate(*args) for _ in range(5)} == {18}


def test_evaluate_rejects_unknown_pass_type():
    with pytest.raises(UnknownPassTypeError):
        evaluate("week", DAY_BASE, 25)


def test_pass_type_parse():
    assert PassType.parse("1jour") is PassType.DAY
    assert PassType.parse(" night ") is PassType.NIGHT
    assert PassType.parse(PassType.DAY) is PassType.DAY
    with pytest.raises(ValueError):
        PassType.parse("")
