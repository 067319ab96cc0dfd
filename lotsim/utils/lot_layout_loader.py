import json
from pathlib import Path
from typing import List, Optional

from lotsim.config import CELL_ENTRANCE, CELL_ROAD, CELL_PARK, CELL_EXIT, CELL_UNUSED


class LotLayoutLoader:
    # 한글-영문 변환 매핑
    KOREAN_TO_ENGLISH = {
        "길": CELL_ROAD,
        "주차면": CELL_PARK,
        "입구": CELL_ENTRANCE,
        "출구": CELL_EXIT,
        "미사용": CELL_UNUSED
    }

    # 레이아웃 파일에서 허용하는 최상위 키
    LAYOUT_KEYS = ["lot", "Ground", "주차장"]

    def __init__(self, layout_file: str):
        """
        주차장 레이아웃 로더 초기화

        Args:
            layout_file: 레이아웃 JSON 파일 경로
        """
        self.layout_file = Path(layout_file)
        self.layout: Optional[List[List[str]]] = None

    def load(self) -> List[List[str]]:
        """
        레이아웃 파일을 로드하고 셀 코드를 영문으로 변환

        Returns:
            List[List[str]]: 변환된 주차장 레이아웃
        """
        if not self.layout_file.exists():
            print(f"[ERROR] 파일을 찾을 수 없습니다: {self.layout_file}")
            raise FileNotFoundError(f"layout file not found: {self.layout_file}")

        with open(self.layout_file, 'r', encoding='utf-8') as f:
            data = json.load(f)

        layout_data = None
        for key in self.LAYOUT_KEYS:
            if key in data:
                layout_data = data[key]
                break

        if layout_data is None:
            print(f"[ERROR] 유효한 레이아웃 데이터를 찾을 수 없습니다: {self.layout_file}")
            raise ValueError(f"no layout grid in {self.layout_file}")

        self.layout = self._convert_layout(layout_data)
        return self.layout

    def _convert_layout(self, layout_data: List[List[str]]) -> List[List[str]]:
        """한글로 된 셀 이름을 영문 약자로 변환 (매핑이 없으면 원래 값 유지)"""
        return [[self.KOREAN_TO_ENGLISH.get(cell, cell) for cell in row] for row in layout_data]

    def count_parking_cells(self) -> int:
        """주차면 셀 수 반환"""
        if self.layout is None:
            raise ValueError("layout has not been loaded")
        return sum(row.count(CELL_PARK) for row in self.layout)
