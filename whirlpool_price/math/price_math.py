"""
Price Math - Price ↔ Sqrt Price ↔ Tick 변환

Whirlpool의 가격은 Q64.64 sqrt price 형식으로 저장됩니다.
sqrt_price = sqrt(price / 10^(decimals_a - decimals_b)) * 2^64

중요: 이 모듈의 변환은 부동소수점(f64) 연산을 사용하므로 정밀도가 떨어질 수 있습니다.
변환은 파이프라인의 마지막 단계에서만 하고, 그 결과를 다시 부동소수점 계산에
넣지 마세요. 정수 계산(예: 슬리피지 범위)은 sqrt price를 그대로 사용합니다.
"""

import math

from ..constants import (
    Q64_RESOLUTION,
    U128_MAX,
    U8_MAX,
    MIN_SQRT_PRICE,
    MAX_SQRT_PRICE,
)
from .tick_math import (
    tick_index_to_sqrt_price,
    sqrt_price_to_tick_index,
    invert_tick_index,
)


def _decimal_power(decimals_a: int, decimals_b: int) -> float:
    """10^(decimals_a - decimals_b) (f64 거듭제곱)"""
    for decimals in (decimals_a, decimals_b):
        if decimals < 0 or decimals > U8_MAX:
            raise ValueError(f"소수점 자릿수가 유효 범위를 벗어났습니다: {decimals}")
    return math.pow(10.0, decimals_a - decimals_b)


# f64 경로의 상대 오차 허용치 1 / 10^9 (1틱 간격 ~5e-5보다 훨씬 작음)
_F64_SNAP_DENOMINATOR = 10 ** 9


def _snap_to_sqrt_price_bounds(sqrt_price: int) -> int:
    """부동소수점 반올림으로 범위를 살짝 벗어난 sqrt price를 경계로 맞춤"""
    if sqrt_price > MAX_SQRT_PRICE and \
            (sqrt_price - MAX_SQRT_PRICE) * _F64_SNAP_DENOMINATOR <= MAX_SQRT_PRICE:
        return MAX_SQRT_PRICE
    if sqrt_price < MIN_SQRT_PRICE and \
            (MIN_SQRT_PRICE - sqrt_price) * _F64_SNAP_DENOMINATOR <= MIN_SQRT_PRICE:
        return MIN_SQRT_PRICE
    return sqrt_price


def price_to_sqrt_price(price: float, decimals_a: int, decimals_b: int) -> int:
    """Human-readable 가격을 sqrt price (Q64.64)로 변환

    sqrt_price = floor(sqrt(price / 10^(decimals_a - decimals_b)) * 2^64)

    Args:
        price: 가격 (token B / token A)
        decimals_a: token A 소수점 자릿수
        decimals_b: token B 소수점 자릿수

    Returns:
        sqrt price (Q64.64). u128 최대값을 넘으면 최대값으로 포화.

    Raises:
        ValueError: 가격이 양의 유한값이 아니거나 계산 결과가 무한대인 경우

    Example:
        >>> price_to_sqrt_price(100.0, 6, 6)
        184467440737095516160
    """
    if not (price > 0 and math.isfinite(price)):
        raise ValueError(f"가격은 양의 유한값이어야 합니다: {price}")

    power = _decimal_power(decimals_a, decimals_b)
    sqrt_price = math.sqrt(price / power) * Q64_RESOLUTION
    if not math.isfinite(sqrt_price):
        raise ValueError(
            f"sqrt price 계산 결과가 유한하지 않습니다: "
            f"price={price}, decimals_a={decimals_a}, decimals_b={decimals_b}"
        )

    return min(math.floor(sqrt_price), U128_MAX)


def sqrt_price_to_price(sqrt_price: int, decimals_a: int, decimals_b: int) -> float:
    """sqrt price (Q64.64)를 human-readable 가격으로 변환

    가격 = (sqrt_price / 2^64)^2 * 10^(decimals_a - decimals_b)

    Args:
        sqrt_price: sqrt price (Q64.64)
        decimals_a: token A 소수점 자릿수
        decimals_b: token B 소수점 자릿수

    Returns:
        가격 (token B / token A)
    """
    if sqrt_price < 0 or sqrt_price > U128_MAX:
        raise ValueError(f"sqrt price가 u128 범위를 벗어났습니다: {sqrt_price}")

    power = _decimal_power(decimals_a, decimals_b)
    return math.pow(sqrt_price / Q64_RESOLUTION, 2.0) * power


def tick_index_to_price(tick_index: int, decimals_a: int, decimals_b: int) -> float:
    """틱을 human-readable 가격으로 변환

    Args:
        tick_index: 틱 인덱스
        decimals_a: token A 소수점 자릿수
        decimals_b: token B 소수점 자릿수

    Returns:
        가격 (token B / token A)

    Example:
        >>> tick_index_to_price(0, 6, 6)
        1.0
    """
    sqrt_price = tick_index_to_sqrt_price(tick_index)
    return sqrt_price_to_price(sqrt_price, decimals_a, decimals_b)


def price_to_tick_index(price: float, decimals_a: int, decimals_b: int) -> int:
    """Human-readable 가격을 틱으로 변환 (내림)

    경계 틱의 가격은 f64 왕복에서 sqrt price 범위를 아주 조금 넘을 수 있어
    상대 오차 1e-9 이내는 경계 틱으로 취급합니다.

    Args:
        price: 가격 (token B / token A)
        decimals_a: token A 소수점 자릿수
        decimals_b: token B 소수점 자릿수

    Returns:
        틱 인덱스

    Example:
        >>> price_to_tick_index(99.999912, 6, 8)
        92108
    """
    sqrt_price = price_to_sqrt_price(price, decimals_a, decimals_b)
    return sqrt_price_to_tick_index(_snap_to_sqrt_price_bounds(sqrt_price))


def invert_price(price: float, decimals_a: int, decimals_b: int) -> float:
    """가격 반전

    1 / price를 부동소수점으로 계산하지 않고 틱 도메인에서 반전합니다.
    (price -> tick -> -tick -> price). 결과는 틱 단위로 양자화됩니다.

    Args:
        price: 반전할 가격
        decimals_a: token A 소수점 자릿수
        decimals_b: token B 소수점 자릿수

    Returns:
        반전된 가격
    """
    tick_index = price_to_tick_index(price, decimals_a, decimals_b)
    inverted_tick_index = invert_tick_index(tick_index)
    return tick_index_to_price(inverted_tick_index, decimals_a, decimals_b)
