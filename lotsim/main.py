#!/usr/bin/env python3
"""
주차장 점유 시뮬레이션 메인 실행 파일

사용법:
    python -m lotsim.main --rate 50 --capacity 30
    python -m lotsim.main --layout data/lot_layout.json --plots
    python -m lotsim.main --rate 50 --optimize

이 파일은 주차장 시뮬레이션을 실행하고 결과를 저장/시각화합니다.
"""
import argparse
import os
import sys
from datetime import datetime

from lotsim.config import (
    SEED, SIMULATION_DURATION, DEFAULT_ARRIVAL_RATE, DEFAULT_LOT_CAPACITY,
    NUM_RUNS, QUEUE_THRESHOLD
)
from lotsim.models.parking_lot import ParkingLot
from lotsim.simulation.capacity_optimizer import CapacityOptimizer
from lotsim.simulation.simulator import Simulator
from lotsim.utils.logger import SimulationLogger
from lotsim.utils.random_generator import RandomGenerator


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description='주차장 점유 시뮬레이션')
    parser.add_argument("--rate", type=int, default=DEFAULT_ARRIVAL_RATE,
                        help=f"시간당 도착 차량 수 (기본값: {DEFAULT_ARRIVAL_RATE})")
    parser.add_argument("--time", type=int, default=SIMULATION_DURATION,
                        help="시뮬레이션 시간 (초, 기본값: 24시간)")
    parser.add_argument("--capacity", type=int, default=DEFAULT_LOT_CAPACITY,
                        help=f"전체 주차면 수 (기본값: {DEFAULT_LOT_CAPACITY})")
    parser.add_argument("--layout", type=str, help="주차장 레이아웃 파일 경로 (지정 시 --capacity 무시)")
    parser.add_argument("--seed", type=int, default=SEED, help=f"랜덤 시드 (기본값: {SEED})")
    parser.add_argument("--results-dir", type=str, help="결과 저장 디렉토리")
    parser.add_argument("--plots", action="store_true", help="결과 그래프 저장")
    parser.add_argument("--no-save-csv", action="store_true", help="CSV 저장 안 함")
    parser.add_argument("--optimize", action="store_true", help="최소 주차면 수 탐색")
    parser.add_argument("--runs", type=int, default=NUM_RUNS,
                        help=f"주차면 수별 반복 횟수 (기본값: {NUM_RUNS})")
    parser.add_argument("--threshold", type=float, default=QUEUE_THRESHOLD,
                        help=f"허용 평균 대기열 길이 (기본값: {QUEUE_THRESHOLD})")
    return parser.parse_args(argv)


def create_output_directory(prefix: str) -> str:
    """
    결과 파일을 저장할 디렉토리를 생성합니다.

    Args:
        prefix: 디렉토리 이름 접두사

    Returns:
        생성된 디렉토리 경로
    """
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    output_dir = f"results_{prefix}_{timestamp}"
    os.makedirs(output_dir, exist_ok=True)
    print(f"[INFO] 결과 저장 디렉토리 생성: {output_dir}")
    return output_dir


def run_simulation(args, results_dir: str) -> Simulator:
    """주차장 한 개를 시뮬레이션하고 결과를 저장합니다."""
    if args.layout:
        lot = ParkingLot.from_layout(args.layout)
    else:
        lot = ParkingLot(args.capacity)

    # 시뮬레이션 설정 출력
    print("\n=== 시뮬레이션 설정 ===")
    print(f"  - 주차면: {lot.get_total_capacity()}면")
    print(f"  - 시간당 도착: {args.rate}대")
    print(f"  - 시뮬레이션 시간: {args.time}초")
    print(f"  - 시드: {args.seed}")

    log_file = None if args.no_save_csv else os.path.join(results_dir, "simulation_log.csv")
    logger = SimulationLogger(
        log_file=log_file,
        stats_file=os.path.join(results_dir, "simulation_stats.json")
    )

    sim = Simulator(
        lot=lot,
        per_hour_arrival_rate=args.rate,
        steps=args.time,
        random_generator=RandomGenerator(args.seed),
        logger=logger
    )
    sim.simulate()

    print("\n=== 시뮬레이션 결과 ===")
    logger.print_summary()
    print(f"\n종료 시 주차 차량: {lot.get_occupancy()}대")
    print(f"종료 시 입차 대기열: {sim.get_incoming_queue_size()}대")
    print(f"종료 시 출차 대기열: {sim.get_outgoing_queue_size()}대")
    print(f"입차 시도 {lot.stats['attempts']}회 중 거절 {lot.stats['rejected']}회")

    logger.save_stats()
    if log_file is not None:
        print(f"[INFO] 이벤트 로그가 {log_file}에 저장되었습니다.")
    if args.plots:
        logger.generate_plots(results_dir)
        print(f"[INFO] 그래프가 {results_dir}에 저장되었습니다.")
    return sim


def run_optimizer(args, results_dir: str) -> int:
    """최소 주차면 수를 탐색하고 결과를 저장합니다."""
    optimizer = CapacityOptimizer(
        per_hour_arrival_rate=args.rate,
        steps=args.time,
        num_runs=args.runs,
        threshold=args.threshold,
        seed=args.seed
    )
    capacity = optimizer.get_optimal_capacity()

    if not args.no_save_csv:
        csv_path = os.path.join(results_dir, "capacity_search.csv")
        optimizer.get_results_dataframe().to_csv(csv_path, index=False)
        print(f"[INFO] 탐색 결과가 {csv_path}에 저장되었습니다.")
    if args.plots:
        optimizer.plot_results(results_dir)
    return capacity


def main(argv=None):
    """
    메인 실행 함수
    """
    args = parse_args(argv)

    if args.results_dir:
        results_dir = args.results_dir
        os.makedirs(results_dir, exist_ok=True)
    else:
        results_dir = create_output_directory("opt" if args.optimize else "sim")

    if args.optimize:
        run_optimizer(args, results_dir)
    else:
        run_simulation(args, results_dir)
    return 0


if __name__ == "__main__":
    sys.exit(main())
