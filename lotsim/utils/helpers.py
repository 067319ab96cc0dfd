"""
시뮬레이션에 필요한 확률 관련 유틸리티 함수들을 제공하는 모듈

모든 확률은 부동소수점 오차가 쌓이지 않도록 Fraction(유리수)으로 다룹니다.
"""
from fractions import Fraction

from lotsim.config import NUM_SECONDS_IN_1H


def arrival_probability(per_hour_arrival_rate: int) -> Fraction:
    """
    시간당 도착 대수를 초당 도착 확률로 변환합니다.

    Args:
        per_hour_arrival_rate: 시간당 도착 차량 수

    Returns:
        Fraction: 1초 동안 차량이 도착할 확률
    """
    if per_hour_arrival_rate < 0:
        raise ValueError("arrival rate must be non-negative")
    return Fraction(per_hour_arrival_rate, NUM_SECONDS_IN_1H)


class TriangularDistribution:
    """
    [a, b] 구간에서 c를 최빈값으로 갖는 삼각분포.

    양 끝점에서 밀도가 0이고 c에서 최대값 2 / (b - a)를 가집니다.
    """

    def __init__(self, a: int, c: int, b: int):
        """
        Args:
            a: 구간 시작
            c: 최빈값 (a <= c <= b)
            b: 구간 끝 (a < b)
        """
        if not a <= c <= b or a == b:
            raise ValueError("triangular distribution requires a <= c <= b and a < b")
        self.a = a
        self.c = c
        self.b = b

    def pdf(self, x: int) -> Fraction:
        """
        x에서의 확률밀도를 반환합니다.

        Raises:
            ValueError: 계산된 밀도가 [0, 1] 범위를 벗어나는 경우
        """
        a, b, c = self.a, self.b, self.c

        if x < a or x > b:
            density = Fraction(0)
        elif x < c:
            density = Fraction(2 * (x - a), (b - a) * (c - a))
        elif x == c:
            density = Fraction(2, b - a)
        else:
            density = Fraction(2 * (b - x), (b - a) * (b - c))

        # 구간 폭이 2 미만이면 최빈값의 밀도가 1을 넘어 확률로 쓸 수 없음
        if not 0 <= density <= 1:
            raise ValueError(f"density {density} at {x} is not a probability")
        return density

    def __str__(self) -> str:
        return f"TriangularDistribution(a={self.a}, c={self.c}, b={self.b})"
