"""테스트 공용 fixture"""
from fractions import Fraction
from itertools import count

import pytest


class ScriptedRandom:
    """
    확률이 1 이상일 때만 사건이 일어나는 결정적 난수 생성기.

    번호판은 주어진 목록을 순서대로 사용하고, 목록이 끝나면 일련번호를 만듭니다.
    """

    def __init__(self, plates=None):
        self.plates = list(plates or [])
        self.serial = count()
        self.probabilities = []

    def event_occurred(self, probability) -> bool:
        self.probabilities.append(Fraction(probability))
        return Fraction(probability) >= 1

    def generate_random_string(self, length: int) -> str:
        if self.plates:
            return self.plates.pop(0)
        return f"{next(self.serial):0{length}d}"


@pytest.fixture
def scripted_random():
    return ScriptedRandom
