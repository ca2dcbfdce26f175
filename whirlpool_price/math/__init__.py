"""
Math layer for Whirlpool price conversions

정수/부동소수점 가격 변환 함수들:
- int_sqrt: 정수 제곱근 (내림/올림)
- tick_math: Tick ↔ Sqrt Price 변환
- price_math: Price ↔ Sqrt Price ↔ Tick 변환, 가격 반전
- slippage_math: 슬리피지 보호용 sqrt price 범위
"""

from .int_sqrt import (
    floor_sqrt,
    ceil_sqrt,
    saturating_mul,
)
from .tick_math import (
    tick_index_to_sqrt_price,
    sqrt_price_to_tick_index,
    invert_tick_index,
    is_tick_index_in_bounds,
    is_sqrt_price_in_bounds,
)
from .price_math import (
    price_to_sqrt_price,
    sqrt_price_to_price,
    price_to_tick_index,
    tick_index_to_price,
    invert_price,
)
from .slippage_math import (
    SqrtPriceSlippageBounds,
    get_sqrt_price_slippage_bounds,
)
