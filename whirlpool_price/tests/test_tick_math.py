"""
Tick Math 테스트

tick_math.py의 함수들을 테스트합니다.
"""

import pytest

from ..constants import Q64
from ..math.tick_math import (
    tick_index_to_sqrt_price,
    sqrt_price_to_tick_index,
    invert_tick_index,
    is_tick_index_in_bounds,
    is_sqrt_price_in_bounds,
    MIN_TICK_INDEX,
    MAX_TICK_INDEX,
    MIN_SQRT_PRICE,
    MAX_SQRT_PRICE,
)


class TestTickIndexToSqrtPrice:
    """tick_index_to_sqrt_price 테스트"""

    def test_tick_0(self):
        """틱 0에서의 sqrt price (price = 1)"""
        assert tick_index_to_sqrt_price(0) == Q64

    def test_min_tick(self):
        """최소 틱에서의 sqrt price"""
        assert tick_index_to_sqrt_price(MIN_TICK_INDEX) == MIN_SQRT_PRICE

    def test_max_tick(self):
        """최대 틱에서의 sqrt price"""
        assert tick_index_to_sqrt_price(MAX_TICK_INDEX) == MAX_SQRT_PRICE

    def test_ticks_next_to_bounds(self):
        """경계 바로 안쪽 틱은 범위 안에 있음"""
        assert tick_index_to_sqrt_price(MIN_TICK_INDEX + 1) == 4295262763
        assert tick_index_to_sqrt_price(MAX_TICK_INDEX - 1) == 79222712478800779441888593670

    def test_positive_tick(self):
        """양수 틱 테스트"""
        result = tick_index_to_sqrt_price(100)
        assert result > Q64
        # sqrt(1.0001)^100
        assert result / Q64 == pytest.approx(1.0001 ** 50, rel=1e-12)

    def test_negative_tick(self):
        """음수 틱 테스트"""
        result = tick_index_to_sqrt_price(-100)
        assert result < Q64
        assert result / Q64 == pytest.approx(1.0001 ** -50, rel=1e-12)

    def test_monotonic(self):
        """틱이 커지면 sqrt price도 커짐"""
        ticks = [MIN_TICK_INDEX, -300000, -92111, -1, 0, 1, 92108, 300000, MAX_TICK_INDEX]
        sqrt_prices = [tick_index_to_sqrt_price(t) for t in ticks]
        assert sqrt_prices == sorted(sqrt_prices)
        assert len(set(sqrt_prices)) == len(sqrt_prices)

    def test_adjacent_ticks(self):
        """인접 틱의 비율은 sqrt(1.0001)"""
        for tick in [-50000, -1, 0, 1, 50000]:
            low = tick_index_to_sqrt_price(tick)
            high = tick_index_to_sqrt_price(tick + 1)
            assert high / low == pytest.approx(1.0001 ** 0.5, rel=1e-9)

    def test_invalid_tick_too_low(self):
        """유효 범위를 벗어난 틱 (너무 낮음)"""
        with pytest.raises(ValueError):
            tick_index_to_sqrt_price(MIN_TICK_INDEX - 1)

    def test_invalid_tick_too_high(self):
        """유효 범위를 벗어난 틱 (너무 높음)"""
        with pytest.raises(ValueError):
            tick_index_to_sqrt_price(MAX_TICK_INDEX + 1)


class TestSqrtPriceToTickIndex:
    """sqrt_price_to_tick_index 테스트"""

    def test_sqrt_price_at_tick_0(self):
        """sqrt price 2^64에서의 틱"""
        assert sqrt_price_to_tick_index(Q64) == 0

    def test_min_sqrt_price(self):
        """최소 sqrt price에서의 틱"""
        assert sqrt_price_to_tick_index(MIN_SQRT_PRICE) == MIN_TICK_INDEX

    def test_max_sqrt_price(self):
        """최대 sqrt price에서의 틱"""
        assert sqrt_price_to_tick_index(MAX_SQRT_PRICE) == MAX_TICK_INDEX

    def test_roundtrip(self):
        """틱 -> sqrt price -> 틱 왕복 테스트"""
        for tick in [MIN_TICK_INDEX, MIN_TICK_INDEX + 1, -92111, -50000, -1000, -1, 0, 1, 1000,
                     50000, 92108, MAX_TICK_INDEX - 1, MAX_TICK_INDEX]:
            sqrt_price = tick_index_to_sqrt_price(tick)
            assert sqrt_price_to_tick_index(sqrt_price) == tick

    def test_rounds_down_between_ticks(self):
        """두 틱 사이의 sqrt price는 아래 틱으로 내림"""
        for tick in [-1000, -1, 0, 100, 1000]:
            sqrt_price = tick_index_to_sqrt_price(tick)
            assert sqrt_price_to_tick_index(sqrt_price + 1) == tick
            assert sqrt_price_to_tick_index(sqrt_price - 1) == tick - 1

    def test_invalid_sqrt_price_too_low(self):
        """유효 범위를 벗어난 sqrt price (너무 낮음)"""
        with pytest.raises(ValueError):
            sqrt_price_to_tick_index(MIN_SQRT_PRICE - 1)

    def test_invalid_sqrt_price_too_high(self):
        """유효 범위를 벗어난 sqrt price (너무 높음)"""
        with pytest.raises(ValueError):
            sqrt_price_to_tick_index(MAX_SQRT_PRICE + 1)


class TestInvertTickIndex:
    """invert_tick_index 테스트"""

    def test_invert(self):
        """부호 반전"""
        assert invert_tick_index(0) == 0
        assert invert_tick_index(92108) == -92108
        assert invert_tick_index(-92111) == 92111

    def test_bounds_are_symmetric(self):
        """최소/최대 틱은 서로의 반전"""
        assert invert_tick_index(MIN_TICK_INDEX) == MAX_TICK_INDEX
        assert invert_tick_index(MAX_TICK_INDEX) == MIN_TICK_INDEX

    def test_inverted_sqrt_price_is_reciprocal(self):
        """반전된 틱의 sqrt price는 역수"""
        sqrt_price = tick_index_to_sqrt_price(5000)
        inverted = tick_index_to_sqrt_price(invert_tick_index(5000))
        assert (sqrt_price / Q64) * (inverted / Q64) == pytest.approx(1.0, rel=1e-12)

    def test_invalid_tick(self):
        """유효 범위를 벗어난 틱"""
        with pytest.raises(ValueError):
            invert_tick_index(MAX_TICK_INDEX + 1)


class TestBounds:
    """범위 확인 함수 테스트"""

    def test_tick_index_in_bounds(self):
        assert is_tick_index_in_bounds(0)
        assert is_tick_index_in_bounds(MIN_TICK_INDEX)
        assert is_tick_index_in_bounds(MAX_TICK_INDEX)
        assert not is_tick_index_in_bounds(MIN_TICK_INDEX - 1)
        assert not is_tick_index_in_bounds(MAX_TICK_INDEX + 1)

    def test_sqrt_price_in_bounds(self):
        assert is_sqrt_price_in_bounds(Q64)
        assert is_sqrt_price_in_bounds(MIN_SQRT_PRICE)
        assert is_sqrt_price_in_bounds(MAX_SQRT_PRICE)
        assert not is_sqrt_price_in_bounds(0)
        assert not is_sqrt_price_in_bounds(MAX_SQRT_PRICE + 1)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
