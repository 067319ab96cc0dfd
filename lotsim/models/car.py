"""
주차장에 들어오는 차량과 차량이 차지한 자리를 나타내는 모델 클래스
"""
from dataclasses import dataclass

from lotsim.config import PLATE_NUM_LENGTH


@dataclass(frozen=True)
class Car:
    """번호판으로 식별되는 차량 (생성 이후 변경 불가)"""
    plate: str  # 차량 번호판 (예: "A7K")

    def __post_init__(self):
        """번호판 형식 검사"""
        if not isinstance(self.plate, str) or len(self.plate) != PLATE_NUM_LENGTH:
            raise ValueError(f"plate must be a string of length {PLATE_NUM_LENGTH}")

    def __str__(self) -> str:
        return f"Car(plate={self.plate})"


@dataclass(frozen=True)
class Spot:
    """
    차량과 시각을 묶은 항목.

    입차 대기열에서는 도착 시각, 주차장 안에서는 주차 시작 시각을 뜻합니다.
    """
    car: Car
    timestamp: int

    def __str__(self) -> str:
        return f"Spot(car={self.car.plate}, timestamp={self.timestamp})"
