"""
Whirlpool Price Math

Concentrated liquidity 풀의 가격 표현(decimal price, Q64.64 sqrt price, tick index)을
서로 변환하고 슬리피지 보호용 sqrt price 범위를 계산하는 라이브러리.
"""

__version__ = "0.1.0"

from .constants import Q64, BPS_DENOMINATOR, MIN_SQRT_PRICE, MAX_SQRT_PRICE
from .math import (
    floor_sqrt,
    ceil_sqrt,
    price_to_sqrt_price,
    sqrt_price_to_price,
    price_to_tick_index,
    tick_index_to_price,
    invert_price,
    get_sqrt_price_slippage_bounds,
    SqrtPriceSlippageBounds,
)
