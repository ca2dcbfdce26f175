"""
Slippage Bounds Endpoint

Computes the [min, max] sqrt price window a swap should tolerate.
"""
import logging

from fastapi import APIRouter, HTTPException

from app.api.schemas import SlippageBoundsRequest, SlippageBoundsResponse
from app.config import settings
from whirlpool_price.math import get_sqrt_price_slippage_bounds

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/slippage/bounds", response_model=SlippageBoundsResponse)
async def slippage_bounds(request: SlippageBoundsRequest):
    """
    Get sqrt price slippage bounds

    Flow:
    1. Fall back to settings.DEFAULT_SLIPPAGE_BPS when the request omits a tolerance
    2. Compute integer-only bounds (tolerance above 10000 bps is clamped)
    3. Return both bounds as Q64.64 decimal strings

    Args:
        request: SlippageBoundsRequest with sqrt_price and optional tolerance

    Returns:
        SlippageBoundsResponse with min/max sqrt price
    """
    slippage_bps = request.slippage_tolerance_bps
    if slippage_bps is None:
        slippage_bps = settings.DEFAULT_SLIPPAGE_BPS

    try:
        bounds = get_sqrt_price_slippage_bounds(request.sqrt_price, slippage_bps)
    except ValueError as e:
        logger.warning("[Slippage] Rejected input sqrt_price=%s bps=%s: %s",
                       request.sqrt_price, slippage_bps, e)
        raise HTTPException(status_code=400, detail=str(e))

    logger.debug("[Slippage] sqrt_price=%s bps=%s -> [%s, %s]",
                 request.sqrt_price, slippage_bps,
                 bounds.min_sqrt_price, bounds.max_sqrt_price)

    return SlippageBoundsResponse(
        min_sqrt_price=str(bounds.min_sqrt_price),
        max_sqrt_price=str(bounds.max_sqrt_price),
        slippage_tolerance_bps=slippage_bps
    )
