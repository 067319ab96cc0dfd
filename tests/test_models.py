"""Car, Spot, SpotQueue, ParkingLot 단위 테스트"""
import json
from pathlib import Path

import pytest

from lotsim.config import CELL_ENTRANCE, CELL_ROAD, CELL_PARK, CELL_EXIT, CELL_UNUSED
from lotsim.models.car import Car, Spot
from lotsim.models.parking_lot import ParkingLot
from lotsim.models.spot_queue import SpotQueue
from lotsim.utils.lot_layout_loader import LotLayoutLoader


class TestCar:

    def test_plate_must_have_fixed_length(self):
        with pytest.raises(ValueError):
            Car("AB")
        with pytest.raises(ValueError):
            Car("ABCD")

    def test_car_is_immutable(self):
        car = Car("A1B")
        with pytest.raises(AttributeError):
            car.plate = "ZZZ"

    def test_duplicate_plates_are_equal_values(self):
        assert Car("AAA") == Car("AAA")
        assert Spot(Car("AAA"), 3).timestamp == 3


class TestSpotQueue:

    def test_fifo_order(self):
        queue = SpotQueue()
        for i in range(3):
            queue.enqueue(i)

        assert queue.size() == 3
        assert queue.peek() == 0
        assert [queue.dequeue() for _ in range(3)] == [0, 1, 2]
        assert queue.is_empty()
        assert queue.size() == 0

    def test_peek_does_not_remove(self):
        queue = SpotQueue()
        queue.enqueue("head")
        queue.peek()
        assert queue.size() == 1

    def test_empty_queue_access_fails(self):
        queue = SpotQueue()
        with pytest.raises(IndexError):
            queue.dequeue()
        with pytest.raises(IndexError):
            queue.peek()


class TestParkingLot:

    def test_admission_respects_capacity(self):
        lot = ParkingLot(1)
        assert lot.attempt_parking(Car("AAA"), 0)
        lot.park(Car("AAA"), 0)

        assert not lot.attempt_parking(Car("BBB"), 1)
        assert lot.get_occupancy() == 1
        assert lot.stats == {"attempts": 2, "rejected": 1, "parked": 1, "removed": 0}

    def test_attempt_does_not_change_occupancy(self):
        lot = ParkingLot(2)
        lot.attempt_parking(Car("AAA"), 0)
        assert lot.get_occupancy() == 0

    def test_park_on_full_lot_fails(self):
        lot = ParkingLot(0)
        with pytest.raises(ValueError):
            lot.park(Car("AAA"), 0)

    def test_negative_capacity_is_rejected(self):
        with pytest.raises(ValueError):
            ParkingLot(-1)

    def test_remove_shifts_later_spots(self):
        lot = ParkingLot(3)
        for t, plate in enumerate(["AAA", "BBB", "CCC"]):
            lot.park(Car(plate), t)

        removed = lot.remove(1)

        assert removed == Spot(Car("BBB"), 1)
        assert lot.get_spot_at(1) == Spot(Car("CCC"), 2)
        assert lot.get_spot_at(2) is None
        with pytest.raises(IndexError):
            lot.remove(2)

    def test_from_layout_counts_parking_cells(self, tmp_path):
        layout = {"lot": [["입구", "길", "주차면"], ["주차면", "P", "N"]]}
        path = tmp_path / "layout.json"
        path.write_text(json.dumps(layout, ensure_ascii=False), encoding="utf-8")

        lot = ParkingLot.from_layout(str(path))

        assert lot.get_total_capacity() == 3

    def test_layout_cells_translated_to_codes(self, tmp_path):
        layout = {"lot": [["입구", "길", "주차면", "출구", "미사용"]]}
        path = tmp_path / "layout.json"
        path.write_text(json.dumps(layout, ensure_ascii=False), encoding="utf-8")

        loader = LotLayoutLoader(str(path))

        assert loader.load() == [[CELL_ENTRANCE, CELL_ROAD, CELL_PARK, CELL_EXIT, CELL_UNUSED]]

    def test_bundled_layout(self):
        layout_file = Path(__file__).resolve().parent.parent / "data" / "lot_layout.json"
        assert ParkingLot.from_layout(str(layout_file)).get_total_capacity() == 24

    def test_from_layout_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            ParkingLot.from_layout(str(tmp_path / "missing.json"))

    def test_from_layout_without_grid(self, tmp_path):
        path = tmp_path / "layout.json"
        path.write_text(json.dumps({"other": []}), encoding="utf-8")
        with pytest.raises(ValueError):
            ParkingLot.from_layout(str(path))
