"""CapacityOptimizer 및 CLI 테스트"""
import pytest

from lotsim.config import NUM_SECONDS_IN_1H
from lotsim.main import main
from lotsim.simulation.capacity_optimizer import CapacityOptimizer


def test_finds_smallest_capacity_with_empty_queue():
    # 매 초 한 대씩 도착하고 20초 동안은 사실상 출차가 없음
    optimizer = CapacityOptimizer(NUM_SECONDS_IN_1H, steps=20, num_runs=2,
                                  threshold=0, verbose=False)

    assert optimizer.get_optimal_capacity() == 20

    df = optimizer.get_results_dataframe()
    assert sorted(df.capacity.unique()) == list(range(1, 21))
    assert list(df[df.capacity == 5].queue_size) == [15, 15]


def test_gives_up_past_max_capacity():
    optimizer = CapacityOptimizer(NUM_SECONDS_IN_1H, steps=20, num_runs=1,
                                  threshold=0, max_capacity=5, verbose=False)
    with pytest.raises(RuntimeError):
        optimizer.get_optimal_capacity()


def test_requires_at_least_one_run():
    with pytest.raises(ValueError):
        CapacityOptimizer(10, num_runs=0)


def test_cli_simulation(tmp_path):
    code = main(["--rate", "600", "--time", "900", "--capacity", "5",
                 "--results-dir", str(tmp_path), "--plots"])

    assert code == 0
    assert (tmp_path / "simulation_log.csv").exists()
    assert (tmp_path / "simulation_stats.json").exists()
    assert (tmp_path / "parking_occupancy.png").exists()


def test_cli_optimize(tmp_path):
    code = main(["--rate", "3600", "--time", "10", "--runs", "1", "--threshold", "0",
                 "--optimize", "--results-dir", str(tmp_path), "--plots"])

    assert code == 0
    assert (tmp_path / "capacity_search.csv").exists()
    assert (tmp_path / "capacity_search.png").exists()
