"""
Slippage Math - 슬리피지 보호용 sqrt price 범위

가격이 price * (1 ± bps / 10000) 범위로 움직이면 sqrt price는
sqrt_price * sqrt(1 ± bps / 10000) 범위로 움직입니다.

정수 연산만 사용합니다:
    factor = sqrt((10000 ± bps) * 10^6)      # = sqrt(1 ± bps/10000) * 10^5
    bound = sqrt_price * factor / 10^5

하한은 내림 제곱근, 상한은 올림 제곱근을 사용해 범위가 항상 실제 연속 범위보다
같거나 넓어지도록 합니다.
"""

from dataclasses import dataclass

from ..constants import BPS_DENOMINATOR, MIN_SQRT_PRICE, MAX_SQRT_PRICE, U128_MAX
from .int_sqrt import floor_sqrt, ceil_sqrt, saturating_mul


# sqrt(radicand * 10^6)는 sqrt(radicand)보다 소수점 3자리를 더 확보
SLIPPAGE_PRECISION: int = 1_000_000

# sqrt(BPS_DENOMINATOR * SLIPPAGE_PRECISION)
SQRT_SLIPPAGE_DENOMINATOR: int = 100_000


@dataclass(frozen=True)
class SqrtPriceSlippageBounds:
    """슬리피지 보호용 sqrt price 범위

    - min_sqrt_price: 허용 하한 (Q64.64)
    - max_sqrt_price: 허용 상한 (Q64.64)
    """
    min_sqrt_price: int
    max_sqrt_price: int


def get_sqrt_price_slippage_bounds(
    sqrt_price: int,
    slippage_tolerance_bps: int
) -> SqrtPriceSlippageBounds:
    """슬리피지 허용치에서 sqrt price 범위 계산

    slippage_tolerance_bps는 BPS_DENOMINATOR(10000)에서 잘라내므로
    (10000 - bps)가 음수가 되지 않습니다. 결과는 [MIN_SQRT_PRICE, MAX_SQRT_PRICE]로
    제한됩니다.

    Args:
        sqrt_price: 현재 sqrt price (Q64.64)
        slippage_tolerance_bps: 슬리피지 허용치 (basis points)

    Returns:
        SqrtPriceSlippageBounds

    Raises:
        ValueError: sqrt_price가 u128 범위를 벗어나거나 bps가 음수인 경우
    """
    if sqrt_price < 0 or sqrt_price > U128_MAX:
        raise ValueError(f"sqrt price가 u128 범위를 벗어났습니다: {sqrt_price}")
    if slippage_tolerance_bps < 0:
        raise ValueError(f"슬리피지 허용치는 음수일 수 없습니다: {slippage_tolerance_bps}")

    bps = min(slippage_tolerance_bps, BPS_DENOMINATOR)
    lower_radicand = (BPS_DENOMINATOR - bps) * SLIPPAGE_PRECISION
    upper_radicand = (BPS_DENOMINATOR + bps) * SLIPPAGE_PRECISION
    lower_factor = floor_sqrt(lower_radicand)
    upper_factor = ceil_sqrt(upper_radicand)

    def scale(factor: int) -> int:
        return saturating_mul(sqrt_price, factor) // SQRT_SLIPPAGE_DENOMINATOR

    # 유효 범위 밖의 sqrt_price에서도 min <= max 유지
    min_sqrt_price = min(max(scale(lower_factor), MIN_SQRT_PRICE), MAX_SQRT_PRICE)
    max_sqrt_price = max(min(scale(upper_factor), MAX_SQRT_PRICE), MIN_SQRT_PRICE)

    return SqrtPriceSlippageBounds(
        min_sqrt_price=min_sqrt_price,
        max_sqrt_price=max_sqrt_price,
    )
