"""도착 확률, 삼각분포, 난수 생성기 테스트"""
from fractions import Fraction

import pytest

from lotsim.config import NUM_SECONDS_IN_1H, MAX_PARKING_DURATION, PLATE_ALPHABET
from lotsim.utils.helpers import arrival_probability, TriangularDistribution
from lotsim.utils.random_generator import RandomGenerator


def test_arrival_probability_is_exact():
    assert arrival_probability(50) == Fraction(50, 3600)
    assert arrival_probability(NUM_SECONDS_IN_1H) == 1
    with pytest.raises(ValueError):
        arrival_probability(-1)


class TestTriangularDistribution:

    def test_zero_at_endpoints_and_outside(self):
        pdf = TriangularDistribution(0, MAX_PARKING_DURATION // 2, MAX_PARKING_DURATION)
        assert pdf.pdf(0) == 0
        assert pdf.pdf(MAX_PARKING_DURATION) == 0
        assert pdf.pdf(-5) == 0
        assert pdf.pdf(MAX_PARKING_DURATION + 1) == 0

    def test_peak_at_mode(self):
        pdf = TriangularDistribution(0, 5, 10)
        assert pdf.pdf(5) == Fraction(1, 5)
        assert pdf.pdf(4) < pdf.pdf(5)
        assert pdf.pdf(6) < pdf.pdf(5)
        assert pdf.pdf(2) == pdf.pdf(8)

    def test_density_integrates_to_one(self):
        pdf = TriangularDistribution(0, 50, 100)
        assert sum(pdf.pdf(x) for x in range(0, 101)) == 1

    def test_invalid_parameters(self):
        with pytest.raises(ValueError):
            TriangularDistribution(0, 11, 10)
        with pytest.raises(ValueError):
            TriangularDistribution(3, 3, 3)

    def test_density_above_one_is_rejected(self):
        pdf = TriangularDistribution(0, 0, 1)
        with pytest.raises(ValueError):
            pdf.pdf(0)


class TestRandomGenerator:

    def test_probability_edges(self):
        rng = RandomGenerator(1)
        assert not any(rng.event_occurred(0) for _ in range(100))
        assert all(rng.event_occurred(1) for _ in range(100))
        assert all(rng.event_occurred(Fraction(3, 2)) for _ in range(10))

    def test_frequency_roughly_matches_probability(self):
        rng = RandomGenerator(7)
        hits = sum(rng.event_occurred(Fraction(1, 4)) for _ in range(20_000))
        assert 4_500 < hits < 5_500

    def test_plates_use_alphabet(self):
        rng = RandomGenerator(3)
        plate = rng.generate_random_string(3)
        assert len(plate) == 3
        assert set(plate) <= set(PLATE_ALPHABET)
        with pytest.raises(ValueError):
            rng.generate_random_string(-1)

    def test_same_seed_same_sequence(self):
        a, b = RandomGenerator(11), RandomGenerator(11)
        assert [a.generate_random_string(3) for _ in range(5)] == \
            [b.generate_random_string(3) for _ in range(5)]
