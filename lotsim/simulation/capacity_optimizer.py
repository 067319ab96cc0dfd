"""
입차 대기열이 허용 범위 안에 머무는 최소 주차면 수를 찾는 모듈
"""
import os
import time
from typing import Dict, List, Optional

import numpy as np
import pandas as pd
import matplotlib.pyplot as plt

from lotsim.config import (
    SEED, SIMULATION_DURATION, NUM_RUNS, QUEUE_THRESHOLD, MAX_LOT_CAPACITY
)
from lotsim.models.parking_lot import ParkingLot
from lotsim.simulation.simulator import Simulator
from lotsim.utils.random_generator import RandomGenerator


class CapacityOptimizer:
    """
    주차면 수를 1부터 하나씩 늘려가며 시뮬레이션을 반복 실행하고,
    시뮬레이션 종료 시점의 평균 입차 대기열 길이가 임계값 이하가 되는
    첫 번째 주차면 수를 찾습니다.
    """

    def __init__(self,
                 per_hour_arrival_rate: int,
                 steps: int = SIMULATION_DURATION,
                 num_runs: int = NUM_RUNS,
                 threshold: float = QUEUE_THRESHOLD,
                 max_capacity: int = MAX_LOT_CAPACITY,
                 seed: int = SEED,
                 verbose: bool = True):
        """
        Args:
            per_hour_arrival_rate: 시간당 도착 차량 수
            steps: 각 시뮬레이션의 실행 시간 (초)
            num_runs: 주차면 수별 반복 횟수
            threshold: 허용 가능한 평균 대기열 길이
            max_capacity: 탐색할 최대 주차면 수
            seed: 반복 실행별 시드를 만들기 위한 기본 시드
            verbose: 실행 과정 출력 여부
        """
        if num_runs < 1:
            raise ValueError("num_runs must be at least 1")

        self.per_hour_arrival_rate = per_hour_arrival_rate
        self.steps = steps
        self.num_runs = num_runs
        self.threshold = threshold
        self.max_capacity = max_capacity
        self.verbose = verbose

        # 모든 주차면 수에 같은 난수열을 사용해 비교
        self.seeds = np.random.SeedSequence(seed).spawn(num_runs)

        self.results: List[Dict[str, float]] = []

    def run_once(self, capacity: int, run: int) -> int:
        """
        한 번의 시뮬레이션을 실행하고 종료 시점의 입차 대기열 길이를 반환합니다.
        """
        start = time.perf_counter()
        sim = Simulator(
            lot=ParkingLot(capacity),
            per_hour_arrival_rate=self.per_hour_arrival_rate,
            steps=self.steps,
            random_generator=RandomGenerator(self.seeds[run])
        )
        sim.simulate()
        elapsed_ms = (time.perf_counter() - start) * 1000
        queue_size = sim.get_incoming_queue_size()

        self.results.append({
            "capacity": capacity,
            "run": run + 1,
            "queue_size": queue_size,
            "elapsed_ms": elapsed_ms
        })
        if self.verbose:
            print(f"  - 시뮬레이션 {run + 1}회차 ({elapsed_ms:.0f}ms): 종료 시 대기열 {queue_size}대")
        return queue_size

    def average_queue_size(self, capacity: int) -> float:
        """주어진 주차면 수로 num_runs 번 실행한 평균 대기열 길이"""
        if self.verbose:
            print(f"\n==== 주차면 수: {capacity} ====")
        total = sum(self.run_once(capacity, run) for run in range(self.num_runs))
        return total / self.num_runs

    def get_optimal_capacity(self) -> int:
        """
        평균 대기열 길이가 임계값 이하가 되는 최소 주차면 수를 찾습니다.

        Raises:
            RuntimeError: max_capacity 까지 찾지 못한 경우
        """
        for capacity in range(1, self.max_capacity + 1):
            if self.average_queue_size(capacity) <= self.threshold:
                if self.verbose:
                    print(f"\n[INFO] 시간당 {self.per_hour_arrival_rate}대 도착 시 최적 주차면 수: {capacity}")
                return capacity
        raise RuntimeError(f"no capacity up to {self.max_capacity} keeps the queue within {self.threshold}")

    def get_results_dataframe(self) -> pd.DataFrame:
        """실행 결과를 DataFrame으로 반환"""
        return pd.DataFrame(self.results, columns=["capacity", "run", "queue_size", "elapsed_ms"])

    def plot_results(self, results_dir: str, filename: Optional[str] = None) -> str:
        """주차면 수에 따른 평균 대기열 길이 그래프를 저장합니다."""
        df = self.get_results_dataframe()
        summary = df.groupby("capacity")["queue_size"].mean()

        plt.figure(figsize=(12, 6))
        plt.plot(summary.index, summary.values, marker="o", label="평균 대기열 길이")
        plt.axhline(self.threshold, color="red", linestyle="--", label="임계값")
        plt.xlabel("주차면 수")
        plt.ylabel("대기 차량 수")
        plt.title(f"주차면 수에 따른 입차 대기열 (시간당 {self.per_hour_arrival_rate}대)")
        plt.legend()
        plt.grid(True)

        path = os.path.join(results_dir, filename or "capacity_search.png")
        plt.savefig(path)
        plt.close()
        return path
