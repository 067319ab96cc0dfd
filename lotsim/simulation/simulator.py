"""
주차장 시뮬레이션을 실행하는 모듈
"""
from typing import List, Optional

import simpy

from lotsim.config import (
    SEED, PLATE_NUM_LENGTH, MAX_PARKING_DURATION, OCCUPANCY_SAMPLE_INTERVAL
)
from lotsim.models.car import Car, Spot
from lotsim.models.parking_lot import ParkingLot
from lotsim.models.spot_queue import SpotQueue
from lotsim.utils.helpers import arrival_probability, TriangularDistribution
from lotsim.utils.logger import SimulationLogger
from lotsim.utils.random_generator import RandomGenerator


class Simulator:
    """
    1초 단위로 주차장의 입차와 출차를 시뮬레이션하는 클래스

    매 초마다 (1) 차량 도착 여부를 추첨하고 (2) 입차 대기열 맨 앞 차량의
    입차를 시도한 뒤 (3) 주차 중인 차량의 출차 여부를 결정하고
    (4) 출차 대기열에서 한 대를 내보냅니다.
    """

    def __init__(self,
                 lot: ParkingLot,
                 per_hour_arrival_rate: int,
                 steps: int,
                 random_generator: Optional[RandomGenerator] = None,
                 logger: Optional[SimulationLogger] = None,
                 max_parking_duration: int = MAX_PARKING_DURATION):
        """
        시뮬레이션 객체를 초기화합니다.

        Args:
            lot: 시뮬레이션할 주차장
            per_hour_arrival_rate: 시간당 도착 차량 수
            steps: 시뮬레이션 시간 (초)
            random_generator: 난수 생성기 (없으면 기본 시드로 생성)
            logger: 이벤트 로깅을 위한 로거 객체
            max_parking_duration: 최대 주차 가능 시간 (초)
        """
        if steps < 0:
            raise ValueError("steps must be non-negative")
        if max_parking_duration < 2:
            raise ValueError("max_parking_duration must be at least 2 seconds")

        self.lot = lot
        self.steps = steps
        self.clock = 0
        self.probability_of_arrival_per_sec = arrival_probability(per_hour_arrival_rate)

        self.max_parking_duration = max_parking_duration
        self.departure_pdf = TriangularDistribution(0, max_parking_duration // 2, max_parking_duration)

        self.random = random_generator if random_generator is not None else RandomGenerator(SEED)
        self.logger = logger

        # 입차/출차 대기열
        self.incoming_queue: SpotQueue[Spot] = SpotQueue()
        self.outgoing_queue: SpotQueue[Spot] = SpotQueue()

        # SimPy 환경 초기화
        self.env = simpy.Environment()

    def simulate(self) -> None:
        """
        steps 만큼 시뮬레이션을 실행합니다.

        Raises:
            RuntimeError: 시계가 0이 아닌 상태(이미 실행된 시뮬레이션)에서 호출한 경우
        """
        if self.clock != 0:
            raise RuntimeError("The clock is invalid: a simulation can only be run once")

        self.env.process(self._run())
        self.env.run()

    def _run(self):
        """매 초마다 한 번씩 step()을 실행하는 SimPy 프로세스"""
        while self.clock < self.steps:
            self.step()
            self.clock += 1
            yield self.env.timeout(1)

    def step(self) -> None:
        """현재 시각(clock)의 1초를 처리합니다. 시계는 증가시키지 않습니다."""
        self.process_arrival()
        self.process_entry()
        self.process_departure()
        self.process_exit()

        if self.logger is not None and self.clock % OCCUPANCY_SAMPLE_INTERVAL == 0:
            self.logger.record_occupancy(
                self.clock,
                self.lot.get_occupancy(),
                self.incoming_queue.size(),
                self.outgoing_queue.size()
            )

    def process_arrival(self) -> None:
        """도착 확률에 따라 새 차량을 입차 대기열에 추가"""
        if not self.random.event_occurred(self.probability_of_arrival_per_sec):
            return

        car = Car(self.random.generate_random_string(PLATE_NUM_LENGTH))
        self.incoming_queue.enqueue(Spot(car, self.clock))
        self._log(car, "arrive")

    def process_entry(self) -> None:
        """
        입차 대기열 맨 앞 차량의 입차를 시도합니다.

        맨 앞 차량이 입차하지 못하면 뒤의 차량도 기다립니다.
        """
        if self.incoming_queue.is_empty():
            return

        head = self.incoming_queue.peek()
        if self.lot.attempt_parking(head.car, self.clock):
            spot = self.incoming_queue.dequeue()
            self.lot.park(spot.car, self.clock)
            self._log(spot.car, "park", self.clock - spot.timestamp)
        elif self.logger is not None:
            self.logger.update_stats("blocked")

    def process_departure(self) -> None:
        """
        주차 중인 모든 차량의 출차 여부를 결정합니다.

        출차할 차량을 먼저 모은 뒤 한꺼번에 주차장에서 빼므로
        순회 도중 인덱스가 밀리지 않습니다. 출차 대기열에는 주차장 내 순서대로 들어갑니다.
        """
        leaving: List[int] = []
        for index in range(self.lot.get_occupancy()):
            spot = self.lot.get_spot_at(index)
            parking_time = self.clock - spot.timestamp

            # 최대 주차 시간에 도달하면 무조건 출차
            if parking_time >= self.max_parking_duration:
                leaving.append(index)
            elif self.random.event_occurred(self.departure_pdf.pdf(parking_time)):
                leaving.append(index)

        departed = [self.lot.remove(index) for index in reversed(leaving)]
        for spot in reversed(departed):
            self.outgoing_queue.enqueue(spot)
            parking_time = self.clock - spot.timestamp
            forced = parking_time >= self.max_parking_duration
            self._log(spot.car, "depart", parking_time, "forced_depart" if forced else "depart")

    def process_exit(self) -> None:
        """출구는 1초에 한 대만 통과할 수 있음"""
        if self.outgoing_queue.is_empty():
            return

        spot = self.outgoing_queue.dequeue()
        self._log(spot.car, "exit")

    def _log(self, car: Car, event: str, duration: Optional[int] = None,
             stats_event: Optional[str] = None) -> None:
        """로거가 설정된 경우 이벤트와 통계를 기록"""
        if self.logger is None:
            return
        self.logger.add_event(time=self.clock, plate=car.plate, event=event, duration=duration)
        self.logger.update_stats(stats_event or event, duration or 0)

    def get_incoming_queue_size(self) -> int:
        return self.incoming_queue.size()

    def get_outgoing_queue_size(self) -> int:
        return self.outgoing_queue.size()
