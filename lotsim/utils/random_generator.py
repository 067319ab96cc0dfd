"""
시뮬레이션 전체가 공유하는 난수 생성기
"""
from fractions import Fraction
from typing import Union

import numpy as np

from lotsim.config import SEED, PLATE_ALPHABET

# numpy 정수 샘플링이 다룰 수 있는 최대 분모
MAX_DENOMINATOR = 2 ** 62

Probability = Union[Fraction, int, float]


class RandomGenerator:
    """시드가 고정된 베르누이 시행 및 번호판 생성기"""

    def __init__(self, seed=SEED):
        """
        Args:
            seed: 난수 시드 (정수 또는 numpy SeedSequence)
        """
        self.rng = np.random.default_rng(seed)

    def event_occurred(self, probability: Probability) -> bool:
        """
        주어진 확률로 참을 반환하는 베르누이 시행.

        [0, 분모) 구간의 정수를 균등 추출해 분자보다 작은지 비교하므로
        부동소수점 연산을 거치지 않습니다.

        Args:
            probability: 사건 발생 확률 (0 이하면 항상 거짓, 1 이상이면 항상 참)
        """
        probability = Fraction(probability)
        if probability <= 0:
            return False
        if probability >= 1:
            return True
        if probability.denominator > MAX_DENOMINATOR:
            probability = probability.limit_denominator(MAX_DENOMINATOR)
        draw = int(self.rng.integers(0, probability.denominator))
        return draw < probability.numerator

    def generate_random_string(self, length: int) -> str:
        """
        PLATE_ALPHABET 문자로 이루어진 임의의 문자열(번호판)을 생성합니다.
        중복된 번호판이 나올 수 있습니다.
        """
        if length < 0:
            raise ValueError("length must be non-negative")
        indices = self.rng.integers(0, len(PLATE_ALPHABET), size=length)
        return "".join(PLATE_ALPHABET[i] for i in indices)
