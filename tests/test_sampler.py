import math

import numpy as np
import pytest

from statsvisualizer.errors import ValidationError, ComputationError
from statsvisualizer.model.sampler import (
    parse_sample_size, sample_distribution, score_positions, round_half_up
)
from statsvisualizer.model.stats import Stats, DataPoint


def reference_frequency(x: float, stats: Stats, sample_size: int) -> float:
    y = (1 / (stats.std_dev * math.sqrt(2 * math.pi))) * math.exp(-0.5 * ((x - stats.mean) / stats.std_dev) ** 2)
    return math.floor(y * sample_size * 100 + 0.5) / 100


class TestSampleDistribution:

    def test_always_fifty_points(self, example_stats):
        points = sample_distribution(example_stats, 200)
        assert len(points) == 50
        assert all(isinstance(p, DataPoint) for p in points)

    @pytest.mark.parametrize(
        "stats",
        [
            Stats(mean=50.0, std_dev=10.0, min=0.0, max=100.0),
            Stats(mean=5.0, std_dev=0.1, min=0.0, max=1.0),
            Stats(mean=77.31, std_dev=15.17, min=24.0, max=100.0),
        ],
    )
    def test_endpoints_match_range(self, stats):
        points = sample_distribution(stats, 10)
        assert len(points) == 50
        assert points[0].score == f"{stats.min:.1f}"
        assert points[-1].score == f"{stats.max:.1f}"

    def test_example_endpoints(self, example_stats):
        points = sample_distribution(example_stats, 200)
        assert points[0].score == "24.0"
        assert points[-1].score == "100.0"

    def test_scores_ascending(self, example_stats):
        points = sample_distribution(example_stats, 200)
        values = [float(p.score) for p in points]
        assert values == sorted(values)

    def test_matches_density_formula(self, example_stats):
        points = sample_distribution(example_stats, 200)
        xs = [example_stats.min + i * (example_stats.max - example_stats.min) / 49 for i in range(50)]
        for point, x in zip(points, xs):
            assert point.score == f"{x:.1f}"
            assert point.frequency == pytest.approx(reference_frequency(x, example_stats, 200), abs=0.0101)

    def test_pinned_rounding(self):
        # x values are exactly 0, 1, 2, ... for this range
        stats = Stats(mean=0.0, std_dev=1.0, min=0.0, max=49.0)
        points = sample_distribution(stats, 100)
        assert [p.score for p in points[:3]] == ["0.0", "1.0", "2.0"]
        assert points[0].frequency == 39.89
        assert points[1].frequency == 24.2
        assert points[2].frequency == 5.4
        assert points[-1].frequency == 0.0

    def test_peak_near_mean(self):
        stats = Stats(mean=50.0, std_dev=10.0, min=0.0, max=100.0)
        points = sample_distribution(stats, 1000)
        frequencies = [p.frequency for p in points]
        assert frequencies.index(max(frequencies)) in (24, 25)

    def test_symmetric_around_mean(self):
        stats = Stats(mean=50.0, std_dev=10.0, min=0.0, max=100.0)
        points = sample_distribution(stats, 1000)
        for i in range(25):
            assert points[i].frequency == pytest.approx(points[49 - i].frequency, abs=0.0101)

    def test_doubling_sample_size_doubles_frequency(self, example_stats):
        single = sample_distribution(example_stats, 100)
        double = sample_distribution(example_stats, 200)
        for a, b in zip(single, double):
            assert a.score == b.score
            assert b.frequency == pytest.approx(2 * a.frequency, abs=0.0151)

    def test_idempotent(self, example_stats):
        first = sample_distribution(example_stats, 200)
        second = sample_distribution(example_stats, 200)
        assert first == second
        assert [p.frequency.hex() for p in first] == [p.frequency.hex() for p in second]

    def test_result_is_immutable(self, example_stats):
        points = sample_distribution(example_stats, 200)
        assert isinstance(points, tuple)
        with pytest.raises(AttributeError):
            points[0].frequency = 1.0

    def test_frequencies_are_finite_floats(self, example_stats):
        points = sample_distribution(example_stats, 200)
        assert all(type(p.frequency) is float and math.isfinite(p.frequency) for p in points)

    def test_zero_width_range(self):
        stats = Stats(mean=50.0, std_dev=5.0, min=50.0, max=50.0)
        points = sample_distribution(stats, 100)
        assert len(points) == 50
        assert {p.score for p in points} == {"50.0"}
        assert len({p.frequency for p in points}) == 1

    @pytest.mark.parametrize("std_dev", [0.0, -1.0, -15.17])
    def test_non_positive_std_dev_rejected(self, std_dev):
        stats = Stats(mean=50.0, std_dev=std_dev, min=0.0, max=100.0)
        with pytest.raises(ComputationError):
            sample_distribution(stats, 200)

    def test_inverted_range_rejected(self):
        with pytest.raises(ComputationError):
            sample_distribution(Stats(mean=50.0, std_dev=10.0, min=90.0, max=10.0), 200)

    def test_non_finite_stats_rejected(self):
        with pytest.raises(ComputationError):
            sample_distribution(Stats(mean=float("nan"), std_dev=10.0, min=0.0, max=100.0), 200)

    @pytest.mark.parametrize("sample_size", [0, -5, 2.5, "200", None, True])
    def test_invalid_sample_size_rejected(self, example_stats, sample_size):
        with pytest.raises(ValidationError):
            sample_distribution(example_stats, sample_size)

    def test_sample_size_checked_before_stats(self):
        # Both inputs are invalid; the sample size is reported first
        with pytest.raises(ValidationError):
            sample_distribution(Stats(mean=50.0, std_dev=0.0, min=0.0, max=100.0), 0)

    def test_numpy_integer_sample_size(self, example_stats):
        assert sample_distribution(example_stats, np.int64(200)) == sample_distribution(example_stats, 200)

    def test_custom_point_count(self, example_stats):
        points = sample_distribution(example_stats, 200, points=5)
        assert [p.score for p in points] == ["24.0", "43.0", "62.0", "81.0", "100.0"]

    def test_too_few_points(self, example_stats):
        with pytest.raises(ComputationError):
            sample_distribution(example_stats, 200, points=1)


class TestParseSampleSize:

    @pytest.mark.parametrize("text", ["0", "-5", "", "abc", "   ", "2.5", "200abc", "1e3", None])
    def test_rejected(self, text):
        with pytest.raises(ValidationError, match="valid sample size"):
            parse_sample_size(text)

    @pytest.mark.parametrize("text, expected", [("200", 200), (" 50 ", 50), ("+7", 7), ("1", 1)])
    def test_accepted(self, text, expected):
        assert parse_sample_size(text) == expected


def test_score_positions_inclusive():
    xs = score_positions(Stats(mean=0.0, std_dev=1.0, min=24.0, max=100.0))
    assert xs.shape == (50,)
    assert xs[0] == 24.0
    assert xs[-1] == 100.0
    assert np.all(np.diff(xs) > 0)


def test_round_half_up():
    values = np.array([0.125, 0.124, 2.675e-3, 39.894228])
    rounded = round_half_up(values, 2)
    assert rounded[0] == 0.13
    assert rounded[1] == 0.12
    assert rounded[2] == 0.0
    assert rounded[3] == 39.89


@pytest.mark.parametrize("text", ["1" * 5000, "9" * 4301])
def test_parse_sample_size_too_many_digits(text):
    with pytest.raises(ValidationError, match="valid sample size"):
        parse_sample_size(text)


def test_parse_sample_size_ascii_digits_only():
    with pytest.raises(ValidationError):
        parse_sample_size("٢٠٠")


def test_sample_size_beyond_float_range(example_stats):
    with pytest.raises(ComputationError, match="too large"):
        sample_distribution(example_stats, 10 ** 400)


def test_sample_size_overflowing_frequencies(example_stats):
    # Converts to float, but density * size * 100 overflows to inf
    with pytest.raises(ComputationError, match="too large"):
        sample_distribution(Stats(mean=50.0, std_dev=0.5, min=0.0, max=100.0), 10 ** 308)
