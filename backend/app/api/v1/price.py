"""
Price Conversion Endpoints

Converts between decimal price, Q64.64 sqrt price and tick index.
Every handler is a thin wrapper around whirlpool_price.math; values the
library rejects (ValueError) become 400 responses.
"""
import logging

from fastapi import APIRouter, HTTPException

from app.api.schemas import (
    PriceRequest,
    SqrtPriceRequest,
    TickIndexRequest,
    PriceResponse,
    SqrtPriceResponse,
    TickIndexResponse,
)
from whirlpool_price.math import (
    price_to_sqrt_price,
    sqrt_price_to_price,
    price_to_tick_index,
    tick_index_to_price,
    invert_price,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def _convert(operation: str, func, *args):
    """Run a conversion, mapping library errors to HTTP errors"""
    try:
        return func(*args)
    except ValueError as e:
        logger.warning("[%s] Rejected input %s: %s", operation, args, e)
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.exception("[%s] Unexpected error for input %s", operation, args)
        raise HTTPException(
            status_code=500,
            detail=f"{operation} failed: {str(e)}"
        )


@router.post("/price/to-sqrt-price", response_model=SqrtPriceResponse)
async def convert_price_to_sqrt_price(request: PriceRequest):
    """
    Convert a decimal price into a Q64.64 sqrt price

    The float result carries the rounding error of the float path; do not
    feed it back into further float arithmetic.
    """
    sqrt_price = _convert(
        "price_to_sqrt_price",
        price_to_sqrt_price,
        request.price, request.decimals_a, request.decimals_b
    )
    return SqrtPriceResponse(sqrt_price=str(sqrt_price))


@router.post("/price/from-sqrt-price", response_model=PriceResponse)
async def convert_sqrt_price_to_price(request: SqrtPriceRequest):
    """Convert a Q64.64 sqrt price into a decimal price"""
    price = _convert(
        "sqrt_price_to_price",
        sqrt_price_to_price,
        request.sqrt_price, request.decimals_a, request.decimals_b
    )
    return PriceResponse(price=price)


@router.post("/price/to-tick-index", response_model=TickIndexResponse)
async def convert_price_to_tick_index(request: PriceRequest):
    """Convert a decimal price into the tick index at or below it"""
    tick_index = _convert(
        "price_to_tick_index",
        price_to_tick_index,
        request.price, request.decimals_a, request.decimals_b
    )
    return TickIndexResponse(tick_index=tick_index)


@router.post("/price/from-tick-index", response_model=PriceResponse)
async def convert_tick_index_to_price(request: TickIndexRequest):
    """Convert a tick index into a decimal price"""
    price = _convert(
        "tick_index_to_price",
        tick_index_to_price,
        request.tick_index, request.decimals_a, request.decimals_b
    )
    return PriceResponse(price=price)


@router.post("/price/invert", response_model=PriceResponse)
async def convert_invert_price(request: PriceRequest):
    """
    Invert a decimal price

    Inversion goes through the tick domain, so the result is quantized
    to a tick.
    """
    price = _convert(
        "invert_price",
        invert_price,
        request.price, request.decimals_a, request.decimals_b
    )
    return PriceResponse(price=price)
