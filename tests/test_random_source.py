"""
Tests for the randomness sources.
"""
# noinspection PyPackageRequirements
import pytest

from bitga.errors import ExhaustedRandomSource
from bitga.random_source import NumpyRandomSource, ReplayRandomSource, default_source


class TestReplayRandomSource:
    """Tests for the `ReplayRandomSource`-object (from `bitga.random_source`)."""

    def test_replay_order(self):
        rng = ReplayRandomSource(units=[.1, .9, 0], indices=[3, 0])
        assert [rng.next_unit() for _ in range(3)] == [.1, .9, 0]
        assert rng.next_index(5) == 3
        assert rng.next_index(1) == 0

    def test_remaining(self):
        rng = ReplayRandomSource(units=[.1, .2], indices=[1])
        assert rng.remaining == (2, 1)
        rng.next_unit()
        assert rng.remaining == (1, 1)
        rng.next_index(2)
        assert rng.remaining == (1, 0)

    """Errors"""

    def test_error_exhausted_units(self):
        rng = ReplayRandomSource(units=[.5])
        rng.next_unit()
        with pytest.raises(ExhaustedRandomSource):
            rng.next_unit()

    def test_error_exhausted_indices(self):
        rng = ReplayRandomSource(units=[.5])
        with pytest.raises(ExhaustedRandomSource):
            rng.next_index(10)

    def test_exhausted_is_index_error(self):
        with pytest.raises(IndexError):
            ReplayRandomSource().next_unit()

    def test_error_index_out_of_range(self):
        rng = ReplayRandomSource(indices=[5])
        with pytest.raises(ValueError):
            rng.next_index(5)
        # failed draw is not consumed
        assert rng.remaining == (0, 1)

    def test_error_invalid_units(self):
        invalid_units = [-.1], [1], [.5, 1.5]
        for u in invalid_units:
            with pytest.raises(ValueError):
                ReplayRandomSource(units=u)


class TestNumpyRandomSource:
    """Tests for the `NumpyRandomSource`-object (from `bitga.random_source`)."""

    def test_ranges(self):
        rng = NumpyRandomSource(seed=0)
        for _ in range(1000):
            assert 0 <= rng.next_unit() < 1
            assert 0 <= rng.next_index(7) < 7

    def test_types(self):
        rng = NumpyRandomSource(seed=0)
        assert isinstance(rng.next_unit(), float)
        assert isinstance(rng.next_index(3), int)

    def test_seed_reproducible(self):
        rng_1, rng_2 = default_source(12), default_source(12)
        draws_1 = [(rng_1.next_unit(), rng_1.next_index(10)) for _ in range(50)]
        draws_2 = [(rng_2.next_unit(), rng_2.next_index(10)) for _ in range(50)]
        assert draws_1 == draws_2
