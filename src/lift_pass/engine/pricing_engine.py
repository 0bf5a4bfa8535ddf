"""
Pricing Engine - Lift pass pricing rules with traceability.

The rule evaluator is a set of pure functions:
- reduction_percent: day-of-week / holiday discount eligibility
- select_bracket: age bracket for a pass type
- evaluate: final integer cost, rounded up

PricingEngine wires the evaluator to the base price store and the holiday
calendar, and records a trace of every resolution step.
"""
import logging
from datetime import date
from decimal import Decimal, ROUND_CEILING
from typing import Optional

from ..config.settings import get_settings, Settings
from .stores import BasePriceStore, HolidayCalendar
from .models import AgeBracket, PassType, Quote, QuoteRequest

logger = logging.getLogger(__name__)

MONDAY = 0
MONDAY_REDUCTION = 35

FREE_BELOW_AGE = 6
ADULT_FROM_AGE = 15
SENIOR_ABOVE_AGE = 64

CHILD_DAY_RATE = Decimal("0.7")
SENIOR_DAY_RATE = Decimal("0.75")
SENIOR_NIGHT_RATE = Decimal("0.4")


def reduction_percent(visit_date: Optional[date], is_holiday: bool) -> int:
    """
    Percentage taken off a day pass for the visit date.

    35 on a Monday that is not a holiday; 0 with no date, on any other
    weekday, or on any holiday.
    """
    if visit_date is None or is_holiday:
        return 0
    if visit_date.weekday() == MONDAY:
        return MONDAY_REDUCTION
    return 0


def select_bracket(pass_type: PassType, age: Optional[int]) -> AgeBracket:
    """Select the age bracket whose formula prices this pass."""
    if age is None:
        return AgeBracket.UNSPECIFIED
    if age < FREE_BELOW_AGE:
        return AgeBracket.FREE
    if age > SENIOR_ABOVE_AGE:
        return AgeBracket.SENIOR
    if pass_type is PassType.DAY and age < ADULT_FROM_AGE:
        return AgeBracket.CHILD
    return AgeBracket.ADULT


def _round_up(amount: Decimal) -> int:
    return int(amount.quantize(Decimal("1"), rounding=ROUND_CEILING))


def evaluate(
    pass_type,
    base_price: int,
    age: Optional[int] = None,
    visit_date: Optional[date] = None,
    is_holiday: bool = False,
) -> int:
    """
    Compute the final cost of a lift pass.

    Args:
        pass_type: PassType or its wire identifier
        base_price: Configured base price for the pass type
        age: Rider age, or None when not given
        visit_date: Day of the visit, or None when not given
        is_holiday: Whether visit_date is a holiday (ignored without a date)

    Returns:
        Integer cost, rounded up
    """
    pass_type = PassType.parse(pass_type)
    bracket = select_bracket(pass_type, age)
    base = Decimal(base_price)

    if bracket is AgeBracket.FREE:
        return 0

    if pass_type is PassType.NIGHT:
        # Night passes never look at the date.
        if bracket is AgeBracket.UNSPECIFIED:
            return 0
        if bracket is AgeBracket.SENIOR:
            return _round_up(base * SENIOR_NIGHT_RATE)
        return _round_up(base)

    reduction = reduction_percent(visit_date, is_holiday)

    if bracket is AgeBracket.CHILD:
        # Children pay the flat child rate; the reduction is intentionally not applied.
        return _round_up(base * CHILD_DAY_RATE)

    day_rate = 1 - Decimal(reduction) / 100
    if bracket is AgeBracket.SENIOR:
        return _round_up(base * SENIOR_DAY_RATE * day_rate)

    # ADULT and UNSPECIFIED
    return _round_up(base * day_rate)


class PricingEngine:
    """
    Lift pass pricing engine: Base Price → Holiday → Bracket → Cost.

    Resolution order:
    1. Look up the base price for the pass type
    2. Check the visit date against the holiday calendar
    3. Select the age bracket
    4. Compute the reduction (day pass only) and the rounded cost
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        prices: Optional[BasePriceStore] = None,
        holidays: Optional[HolidayCalendar] = None,
    ):
        """Initialize engine with the base price store and holiday calendar."""
        self.settings = settings or get_settings()

        if prices is None:
            prices = BasePriceStore.from_csv(
                self.settings.base_prices_csv,
                persist=self.settings.persist_prices,
            )
        if holidays is None:
            holidays = HolidayCalendar.from_csv(self.settings.holidays_csv)

        self.prices = prices
        self.holidays = holidays

    def reload_data(self):
        """Reload base prices and holidays from disk."""
        self.__init__(self.settings)

    def is_holiday(self, visit_date: Optional[date]) -> bool:
        if visit_date is None:
            return False
        return self.holidays.is_holiday(visit_date)

    def calculate_cost(self, pass_type, age: Optional[int] = None, visit_date: Optional[date] = None) -> int:
        """Cost only, without the trace."""
        return self.quote(QuoteRequest(PassType.parse(pass_type), age, visit_date)).cost

    def quote(self, request: QuoteRequest) -> Quote:
        """
        Price a lift pass with full traceability.

        Raises:
            UnknownPassTypeError: pass type is not a known pass
            MissingBasePriceError: no base price configured for the pass type
        """
        pass_type = PassType.parse(request.pass_type)
        base_price = self.prices.get(pass_type)
        is_holiday = self.is_holiday(request.visit_date)
        bracket = select_bracket(pass_type, request.age)

        quote = Quote(
            pass_type=pass_type,
            base_price=base_price,
            cost=0,
            bracket=bracket,
            age=request.age,
            visit_date=request.visit_date,
            is_holiday=is_holiday,
        )

        quote.add_trace("Base Price", f"Configured price for {pass_type.value}", str(base_price))

        if request.visit_date is None:
            quote.add_trace("Visit Date", "No date given, date rules skipped")
        else:
            day_name = request.visit_date.strftime("%A")
            quote.add_trace(
                "Visit Date",
                f"{request.visit_date.isoformat()} is a {day_name}",
                "holiday" if is_holiday else None,
            )

        age_text = "not given" if request.age is None else str(request.age)
        quote.add_trace("Age Bracket", f"Rider age {age_text}", bracket.value)

        if pass_type is PassType.DAY and bracket is not AgeBracket.FREE:
            quote.reduction = reduction_percent(request.visit_date, is_holiday)
            if bracket is AgeBracket.CHILD:
                quote.add_trace("Reduction", "Computed but not applied to the child rate", f"{quote.reduction}%")
            else:
                quote.add_trace("Reduction", "Day-of-week reduction", f"{quote.reduction}%")

        quote.cost = evaluate(pass_type, base_price, request.age, request.visit_date, is_holiday)
        quote.add_trace("Cost", "Final cost, rounded up", str(quote.cost))

        return quote

    def set_base_price(self, pass_type, cost: int):
        """Overwrite the base price for a pass type."""
        pass_type = PassType.parse(pass_type)
        self.prices.set(pass_type, cost)
        logger.info("Base price for %s set to %d", pass_type.value, cost)
