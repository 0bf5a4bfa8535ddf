"""
Data models for the lift pass pricing engine.

Pass types and age brackets are closed enumerations; requests and quotes
are dataclasses carrying explicit optional values for age and visit date.
"""
from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Optional

from .exceptions import UnknownPassTypeError


class PassType(str, Enum):
    """Lift pass products. The value is the wire identifier."""
    DAY = "1jour"
    NIGHT = "night"

    @classmethod
    def parse(cls, value) -> 'PassType':
        """Resolve a wire identifier, raising UnknownPassTypeError if unknown."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip())
        except ValueError:
            raise UnknownPassTypeError(value) from None

    @classmethod
    def identifiers(cls) -> list[str]:
        return [p.value for p in cls]


class AgeBracket(str, Enum):
    """Age ranges that select a pricing formula."""
    FREE = "free"                # age < 6
    CHILD = "child"              # 6..14
    ADULT = "adult"              # 15..64 (6..64 for the night pass)
    SENIOR = "senior"            # > 64
    UNSPECIFIED = "unspecified"  # no age given


@dataclass
class TraceStep:
    """A single step in the quote resolution trace."""
    step: str
    description: str
    value: Optional[str] = None


@dataclass(frozen=True)
class QuoteRequest:
    """A pricing request for one lift pass."""
    pass_type: PassType
    age: Optional[int] = None
    visit_date: Optional[date] = None


@dataclass
class Quote:
    """Result of pricing one lift pass, with the trace that produced it."""
    pass_type: PassType
    base_price: int
    cost: int
    bracket: AgeBracket
    reduction: int = 0
    age: Optional[int] = None
    visit_date: Optional[date] = None
    is_holiday: bool = False
    trace: list[TraceStep] = field(default_factory=list)

    def add_trace(self, step: str, description: str, value: str = None):
        """Add a step to the quote trace."""
        self.trace.append(TraceStep(step=step, description=description, value=value))

    def get_trace_text(self) -> str:
        """Get human-readable trace as formatted text."""
        lines = []
        for t in self.trace:
            if t.value:
                lines.append(f"→ {t.step}: {t.description} = {t.value}")
            else:
                lines.append(f"→ {t.step}: {t.description}")
        return "\n".join(lines)

    def to_response(self) -> dict:
        """Wire shape of a quote: a single integer cost."""
        return {"cost": self.cost}
