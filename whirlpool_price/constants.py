"""
Whirlpool 상수 정의

프로토콜 전역 상수들 (프로세스 내에서 절대 변경하지 않음):
- Q64: sqrt price 인코딩에 사용 (2^64, Q64.64)
- BPS_DENOMINATOR: basis point 분모 (10000 = 100%)
- MIN/MAX_SQRT_PRICE: 풀이 가질 수 있는 sqrt price 범위
- MIN/MAX_TICK_INDEX: 유효 틱 범위
"""

# Fixed-point 인코딩 상수
Q64: int = 2 ** 64
Q64_RESOLUTION: float = 18446744073709551616.0

# 정수 도메인
U128_MAX: int = 2 ** 128 - 1
U16_MAX: int = 2 ** 16 - 1
U8_MAX: int = 2 ** 8 - 1

# 1 bps = 0.01%
BPS_DENOMINATOR: int = 10_000

# 틱 범위 상수
MIN_TICK_INDEX: int = -443636
MAX_TICK_INDEX: int = 443636

# sqrt price 범위 (MIN_TICK_INDEX, MAX_TICK_INDEX에서의 값)
MIN_SQRT_PRICE: int = 4295048016
MAX_SQRT_PRICE: int = 79226673515401279992447579055
