import logging
from datetime import date
from typing import Optional

from fastapi import Depends, FastAPI, HTTPException, Query, Response
from fastapi.encoders import jsonable_encoder
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from lift_pass import __version__
from lift_pass.config.settings import get_settings
from lift_pass.engine import (
    MissingBasePriceError,
    PassType,
    PricingEngine,
    Quote,
    QuoteRequest,
    UnknownPassTypeError,
)
from lift_pass.api.state import get_engine

logging.basicConfig(
    level=get_settings().log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Lift Pass Pricing API",
    description="Quotes ski lift passes and manages their base prices",
    version=__version__,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)


class CostResponse(BaseModel):
    """Response model for a quote."""
    cost: int


class HolidayResponse(BaseModel):
    """Response model for a holiday."""
    date: date
    description: Optional[str] = None


class StatusResponse(BaseModel):
    """Response model for service status."""
    engine_active: bool
    pass_types: list[str]
    base_prices: dict[str, int]
    holidays_count: int
    persist_prices: bool


def parse_pass_type(value: str) -> PassType:
    """Resolve the `type` parameter, rejecting unknown passes with a 400."""
    try:
        return PassType.parse(value)
    except UnknownPassTypeError as e:
        logger.warning("Rejected request: %s", e)
        raise HTTPException(status_code=400, detail=str(e))


def build_quote(engine: PricingEngine, pass_type: str, age: Optional[int], visit_date: Optional[date]) -> Quote:
    request = QuoteRequest(parse_pass_type(pass_type), age, visit_date)
    try:
        return engine.quote(request)
    except MissingBasePriceError as e:
        logger.error("Cannot quote %s: %s", request.pass_type.value, e)
        raise HTTPException(status_code=503, detail=str(e))


@app.get("/")
async def root():
    return {"status": "online", "message": "Lift Pass Pricing API Active"}


@app.get("/prices", response_model=CostResponse)
async def get_price(
    pass_type: str = Query(..., alias="type"),
    age: Optional[int] = Query(None, ge=0),
    visit_date: Optional[date] = Query(None, alias="date"),
    engine: PricingEngine = Depends(get_engine),
):
    """Quote a lift pass: {"cost": <int>}."""
    quote = build_quote(engine, pass_type, age, visit_date)
    return quote.to_response()


@app.put("/prices")
async def put_price(
    pass_type: str = Query(..., alias="type"),
    cost: int = Query(..., ge=0),
    engine: PricingEngine = Depends(get_engine),
):
    """Overwrite the base price of a pass type. Empty body on success."""
    engine.set_base_price(parse_pass_type(pass_type), cost)
    return Response(status_code=200)


@app.get("/prices/explain")
async def explain_price(
    pass_type: str = Query(..., alias="type"),
    age: Optional[int] = Query(None, ge=0),
    visit_date: Optional[date] = Query(None, alias="date"),
    engine: PricingEngine = Depends(get_engine),
):
    """Quote a lift pass with the bracket, reduction and resolution trace."""
    quote = build_quote(engine, pass_type, age, visit_date)
    return jsonable_encoder(quote)


@app.get("/prices/base")
async def get_base_prices(engine: PricingEngine = Depends(get_engine)):
    return engine.prices.as_dict()


@app.get("/holidays", response_model=list[HolidayResponse])
async def get_holidays(engine: PricingEngine = Depends(get_engine)):
    return [
        HolidayResponse(date=day, description=engine.holidays.describe(day))
        for day in engine.holidays.dates()
    ]


@app.get("/system/status", response_model=StatusResponse)
async def get_status(engine: PricingEngine = Depends(get_engine)):
    return StatusResponse(
        engine_active=True,
        pass_types=PassType.identifiers(),
        base_prices=engine.prices.as_dict(),
        holidays_count=len(engine.holidays),
        persist_prices=engine.prices.persist,
    )
