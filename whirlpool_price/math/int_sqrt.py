"""
Integer Sqrt - 정수 제곱근

부동소수점 없이 u128 도메인에서 제곱근을 계산합니다.
슬리피지 범위 계산처럼 반올림 방향이 중요한 경로에서 사용.

핵심 공식 (Newton's method):
    x_{n+1} = (x_n + value / x_n) / 2
    x_n이 더 이상 감소하지 않으면 x_n = floor(sqrt(value))
"""

from ..constants import U128_MAX


def saturating_mul(a: int, b: int) -> int:
    """a * b, u128 최대값에서 포화

    u128 곱셈의 saturating 동작과 동일. 오버플로우 대신 U128_MAX를 반환.

    Args:
        a: 피승수 (0 이상)
        b: 승수 (0 이상)

    Returns:
        min(a * b, U128_MAX)
    """
    return min(a * b, U128_MAX)


def _check_u128(value: int) -> None:
    if value < 0 or value > U128_MAX:
        raise ValueError(f"u128 범위를 벗어났습니다: {value}")


def floor_sqrt(value: int) -> int:
    """정수 제곱근 (내림)

    r * r <= value를 만족하는 가장 큰 정수 r을 반환합니다.

    Args:
        value: 제곱근을 구할 값 (0 ~ 2^128 - 1)

    Returns:
        floor(sqrt(value))

    Raises:
        ValueError: value가 u128 범위를 벗어난 경우
    """
    _check_u128(value)

    # 0, 1은 그대로 (0으로 나누기 방지)
    if value < 2:
        return value

    prev = value // 2
    next_ = (prev + value // prev) // 2
    while next_ < prev:
        prev = next_
        next_ = (prev + value // prev) // 2

    return prev


def ceil_sqrt(value: int) -> int:
    """정수 제곱근 (올림)

    r * r >= value를 만족하는 가장 작은 정수 r을 반환합니다.

    Args:
        value: 제곱근을 구할 값 (0 ~ 2^128 - 1)

    Returns:
        ceil(sqrt(value))
    """
    floor = floor_sqrt(value)
    if saturating_mul(floor, floor) < value:
        return floor + 1
    return floor
