"""Engine subpackage - lift pass pricing rules and resolution."""
from .pricing_engine import PricingEngine, evaluate, reduction_percent, select_bracket
from .models import AgeBracket, PassType, Quote, QuoteRequest, TraceStep
from .exceptions import LiftPassError, MissingBasePriceError, UnknownPassTypeError
from .stores import BasePriceStore, HolidayCalendar

__all__ = [
    'PricingEngine', 'evaluate', 'reduction_percent', 'select_bracket',
    'AgeBracket', 'PassType', 'Quote', 'QuoteRequest', 'TraceStep',
    'LiftPassError', 'MissingBasePriceError', 'UnknownPassTypeError',
    'BasePriceStore', 'HolidayCalendar',
]
