"""
Shared engine instance for the API.

Endpoints receive the engine through the `get_engine` dependency so tests
can swap it with `app.dependency_overrides`.
"""
from typing import Optional

from ..engine import PricingEngine

_engine: Optional[PricingEngine] = None


def get_engine() -> PricingEngine:
    """Get the process-wide engine, loading seed data on first use."""
    global _engine
    if _engine is None:
        _engine = PricingEngine()
    return _engine
