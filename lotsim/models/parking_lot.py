"""
주차면 수가 정해진 주차장 모델
"""
from typing import List, Optional

from lotsim.models.car import Car, Spot
from lotsim.utils.lot_layout_loader import LotLayoutLoader


class ParkingLot:
    """주차장 관리 클래스"""

    def __init__(self, capacity: int):
        """
        주차장 초기화

        Args:
            capacity: 총 주차면 수
        """
        if capacity < 0:
            raise ValueError("capacity must be non-negative")

        self.capacity = capacity
        self.occupants: List[Spot] = []  # 주차 순서대로 정렬된 주차 항목

        # 입차 시도 통계
        self.stats = {
            "attempts": 0,
            "rejected": 0,
            "parked": 0,
            "removed": 0
        }

    @classmethod
    def from_layout(cls, layout_file: str) -> "ParkingLot":
        """레이아웃 파일의 주차면 수로 주차장을 생성합니다."""
        loader = LotLayoutLoader(layout_file)
        loader.load()
        return cls(loader.count_parking_cells())

    def get_total_capacity(self) -> int:
        return self.capacity

    def get_occupancy(self) -> int:
        """현재 주차된 차량 수 반환"""
        return len(self.occupants)

    def get_spot_at(self, index: int) -> Optional[Spot]:
        """해당 위치의 주차 항목 반환 (범위를 벗어나면 None)"""
        if 0 <= index < len(self.occupants):
            return self.occupants[index]
        return None

    def attempt_parking(self, car: Car, timestamp: int) -> bool:
        """
        차량이 입차할 수 있는지 확인합니다.

        실제 점유 변경은 park()에서만 일어나며 여기서는 시도 통계만 갱신합니다.

        Args:
            car: 입차하려는 차량
            timestamp: 현재 시뮬레이션 시각

        Returns:
            bool: 입차 가능 여부
        """
        self.stats["attempts"] += 1
        if self.get_occupancy() < self.capacity:
            return True
        self.stats["rejected"] += 1
        return False

    def park(self, car: Car, timestamp: int) -> None:
        """
        차량을 주차합니다.

        Raises:
            ValueError: 빈 주차면이 없는 경우
        """
        if self.get_occupancy() >= self.capacity:
            raise ValueError(f"lot is full, cannot park {car.plate}")
        self.occupants.append(Spot(car, timestamp))
        self.stats["parked"] += 1

    def remove(self, index: int) -> Spot:
        """
        해당 위치의 차량을 빼고 반환합니다. 뒤쪽 항목은 한 칸씩 앞으로 당겨집니다.

        Raises:
            IndexError: 범위를 벗어난 위치인 경우
        """
        if not 0 <= index < len(self.occupants):
            raise IndexError(f"no occupied spot at index {index}")
        self.stats["removed"] += 1
        return self.occupants.pop(index)

    def __str__(self) -> str:
        return f"ParkingLot(capacity={self.capacity}, occupancy={self.get_occupancy()})"
