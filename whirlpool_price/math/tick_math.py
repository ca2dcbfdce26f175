"""
Tick Math - Tick ↔ Sqrt Price 변환

Whirlpool의 틱 수학 함수들. 정수 연산만 사용하며 sqrt price는 Q64.64 형식.

핵심 공식:
    price = 1.0001^tick
    sqrt_price = sqrt(1.0001)^tick * 2^64
    tick = log_sqrt(1.0001)(sqrt_price / 2^64)

인접한 두 틱의 sqrt price는 단조 증가하며, 두 변환은 ±1 틱 안에서 서로의 역함수입니다.
"""

from ..constants import (
    MIN_TICK_INDEX,
    MAX_TICK_INDEX,
    MIN_SQRT_PRICE,
    MAX_SQRT_PRICE,
)


def is_tick_index_in_bounds(tick_index: int) -> bool:
    """틱이 유효 범위 안에 있는지 확인"""
    return MIN_TICK_INDEX <= tick_index <= MAX_TICK_INDEX


def is_sqrt_price_in_bounds(sqrt_price: int) -> bool:
    """sqrt price가 유효 범위 안에 있는지 확인"""
    return MIN_SQRT_PRICE <= sqrt_price <= MAX_SQRT_PRICE


def tick_index_to_sqrt_price(tick_index: int) -> int:
    """틱에서 sqrt price (Q64.64) 계산

    sqrt(1.0001)^(-2^i) 매직 넘버(Q128.128)를 비트별로 곱한 뒤,
    양수 틱은 역수를 취하고 Q64.64로 내림 변환합니다.
    근사 오차로 최대 틱의 결과가 MAX_SQRT_PRICE를 몇 단위 넘으므로
    결과를 [MIN_SQRT_PRICE, MAX_SQRT_PRICE]로 제한합니다.

    Args:
        tick_index: 틱 인덱스 (-443636 ~ 443636)

    Returns:
        sqrt price (Q64.64 형식)

    Raises:
        ValueError: 틱이 유효 범위를 벗어난 경우
    """
    if not is_tick_index_in_bounds(tick_index):
        raise ValueError(
            f"틱이 유효 범위를 벗어났습니다: {tick_index} "
            f"(범위: {MIN_TICK_INDEX} ~ {MAX_TICK_INDEX})"
        )

    abs_tick = abs(tick_index)

    ratio = 0x100000000000000000000000000000000 if abs_tick & 0x1 == 0 \
        else 0xfffcb933bd6fad37aa2d162d1a594001

    if abs_tick & 0x2:
        ratio = (ratio * 0xfff97272373d413259a46990580e213a) >> 128
    if abs_tick & 0x4:
        ratio = (ratio * 0xfff2e50f5f656932ef12357cf3c7fdcc) >> 128
    if abs_tick & 0x8:
        ratio = (ratio * 0xffe5caca7e10e4e61c3624eaa0941cd0) >> 128
    if abs_tick & 0x10:
        ratio = (ratio * 0xffcb9843d60f6159c9db58835c926644) >> 128
    if abs_tick & 0x20:
        ratio = (ratio * 0xff973b41fa98c081472e6896dfb254c0) >> 128
    if abs_tick & 0x40:
        ratio = (ratio * 0xff2ea16466c96a3843ec78b326b52861) >> 128
    if abs_tick & 0x80:
        ratio = (ratio * 0xfe5dee046a99a2a811c461f1969c3053) >> 128
    if abs_tick & 0x100:
        ratio = (ratio * 0xfcbe86c7900a88aedcffc83b479aa3a4) >> 128
    if abs_tick & 0x200:
        ratio = (ratio * 0xf987a7253ac413176f2b074cf7815e54) >> 128
    if abs_tick & 0x400:
        ratio = (ratio * 0xf3392b0822b70005940c7a398e4b70f3) >> 128
    if abs_tick & 0x800:
        ratio = (ratio * 0xe7159475a2c29b7443b29c7fa6e889d9) >> 128
    if abs_tick & 0x1000:
        ratio = (ratio * 0xd097f3bdfd2022b8845ad8f792aa5825) >> 128
    if abs_tick & 0x2000:
        ratio = (ratio * 0xa9f746462d870fdf8a65dc1f90e061e5) >> 128
    if abs_tick & 0x4000:
        ratio = (ratio * 0x70d869a156d2a1b890bb3df62baf32f7) >> 128
    if abs_tick & 0x8000:
        ratio = (ratio * 0x31be135f97d08fd981231505542fcfa6) >> 128
    if abs_tick & 0x10000:
        ratio = (ratio * 0x9aa508b5b7a84e1c677de54f3e99bc9) >> 128
    if abs_tick & 0x20000:
        ratio = (ratio * 0x5d6af8dedb81196699c329225ee604) >> 128
    if abs_tick & 0x40000:
        ratio = (ratio * 0x2216e584f5fa1ea926041bedfe98) >> 128

    if tick_index > 0:
        ratio = (2**256 - 1) // ratio

    # Q128.128 -> Q64.64, 경계 틱은 MIN/MAX_SQRT_PRICE와 정확히 일치
    return max(MIN_SQRT_PRICE, min(ratio >> 64, MAX_SQRT_PRICE))


def sqrt_price_to_tick_index(sqrt_price: int) -> int:
    """sqrt price (Q64.64)에서 틱 계산

    log2를 14비트 소수 정밀도로 근사한 뒤 밑을 sqrt(1.0001)로 바꾸고,
    tick_low / tick_high 후보 중 실제 sqrt price를 넘지 않는 쪽을 반환합니다 (내림).

    Args:
        sqrt_price: sqrt price (Q64.64 형식)

    Returns:
        틱 인덱스

    Raises:
        ValueError: sqrt price가 유효 범위를 벗어난 경우
    """
    if not is_sqrt_price_in_bounds(sqrt_price):
        raise ValueError(
            f"sqrt price가 유효 범위를 벗어났습니다: {sqrt_price} "
            f"(범위: {MIN_SQRT_PRICE} ~ {MAX_SQRT_PRICE})"
        )

    # Q64.64 -> Q128.128
    ratio = sqrt_price << 64

    r = ratio
    msb = 0

    # 최상위 비트 찾기
    f = (1 if r > 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFF else 0) << 7
    msb |= f
    r >>= f

    f = (1 if r > 0xFFFFFFFFFFFFFFFF else 0) << 6
    msb |= f
    r >>= f

    f = (1 if r > 0xFFFFFFFF else 0) << 5
    msb |= f
    r >>= f

    f = (1 if r > 0xFFFF else 0) << 4
    msb |= f
    r >>= f

    f = (1 if r > 0xFF else 0) << 3
    msb |= f
    r >>= f

    f = (1 if r > 0xF else 0) << 2
    msb |= f
    r >>= f

    f = (1 if r > 0x3 else 0) << 1
    msb |= f
    r >>= f

    f = 1 if r > 0x1 else 0
    msb |= f

    if msb >= 128:
        r = ratio >> (msb - 127)
    else:
        r = ratio << (127 - msb)

    log_2 = (msb - 128) << 64

    # 소수부 log2
    for i in range(14):
        r = (r * r) >> 127
        f = r >> 128
        log_2 |= f << (63 - i)
        r >>= f

    log_sqrt10001 = log_2 * 255738958999603826347141

    tick_low = (log_sqrt10001 - 3402992956809132418596140100660247210) >> 128
    tick_high = (log_sqrt10001 + 291339464771989622907027621153398088495) >> 128

    if tick_low == tick_high:
        tick = tick_low
    elif tick_high <= MAX_TICK_INDEX and tick_index_to_sqrt_price(tick_high) <= sqrt_price:
        tick = tick_high
    else:
        tick = tick_low

    # 경계값(MIN/MAX_SQRT_PRICE)에서의 근사 오차 보정
    return max(MIN_TICK_INDEX, min(tick, MAX_TICK_INDEX))


def invert_tick_index(tick_index: int) -> int:
    """틱 반전 (가격의 역수에 해당하는 틱)

    1.0001^(-tick) = 1 / 1.0001^tick 이므로 부호만 바꾸면 됩니다.
    유효 틱 범위는 0을 중심으로 대칭입니다.
    """
    if not is_tick_index_in_bounds(tick_index):
        raise ValueError(f"틱이 유효 범위를 벗어났습니다: {tick_index}")
    return -tick_index
