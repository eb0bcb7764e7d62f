"""
Sources of randomness for the genetic algorithm. Every stochastic operation draws from a `RandomSource`, which is passed
explicitly: a seeded `NumpyRandomSource` makes a run reproducible, a `ReplayRandomSource` replays canned draws.
"""
import logging

import numpy as np
import typing

from bitga.errors import ExhaustedRandomSource

_LOG = logging.getLogger(__name__)


class RandomSource:
    """Interface of a source of randomness."""

    def next_unit(self) -> float:
        """
        :return: uniform real draw in [0, 1)
        :rtype: float
        """
        raise NotImplementedError

    def next_index(self, n: int) -> int:
        """
        :param n: upper bound (exclusive)
        :type n: int

        :return: uniform integer draw in [0, n)
        :rtype: int
        """
        raise NotImplementedError


class NumpyRandomSource(RandomSource):
    """Randomness source backed by a `numpy.random.Generator`."""

    def __init__(self, seed: typing.Union[int, None] = None, generator: np.random.Generator = None) -> None:
        """
        :param seed: random seed, defaults to None
        :param generator: random generator, defaults to `numpy.random.default_rng(seed)`

        :type seed: int, optional
        :type generator: numpy.random.Generator, optional
        """
        self.generator = generator if generator is not None else np.random.default_rng(seed)

    def next_unit(self) -> float:
        return float(self.generator.random())

    def next_index(self, n: int) -> int:
        return int(self.generator.integers(n))


class ReplayRandomSource(RandomSource):
    """Randomness source replaying a finite, canned sequence of draws. Real draws and integer draws are kept in two
    separate sequences, and each call advances its own sequence by one element.
    """

    def __init__(self, units: typing.Iterable[float] = (), indices: typing.Iterable[int] = ()) -> None:
        """
        :param units: real draws in [0, 1), defaults to ()
        :param indices: integer draws, defaults to ()

        :type units: iterable, optional
        :type indices: iterable, optional

        :raises ValueError: if any of `units` is not in [0, 1)
        """
        self._units = list(units)
        self._indices = list(indices)
        self._unit_cursor = 0
        self._index_cursor = 0

        if not all(0 <= u < 1 for u in self._units):
            msg = f'Not all real draws are in [0, 1): {self._units}'
            raise ValueError(msg)

    @property
    def remaining(self) -> typing.Tuple[int, int]:
        """
        :return: number of remaining real draws, and integer draws
        :rtype: tuple
        """
        return len(self._units) - self._unit_cursor, len(self._indices) - self._index_cursor

    def next_unit(self) -> float:
        """
        :raises ExhaustedRandomSource: if all real draws are consumed
        """
        if self._unit_cursor >= len(self._units):
            msg = f'Replay source exhausted: all {len(self._units)} real draws are consumed.'
            raise ExhaustedRandomSource(msg)

        value = self._units[self._unit_cursor]
        self._unit_cursor += 1
        return value

    def next_index(self, n: int) -> int:
        """
        :raises ExhaustedRandomSource: if all integer draws are consumed
        :raises ValueError: if the replayed draw is not in [0, n)
        """
        if self._index_cursor >= len(self._indices):
            msg = f'Replay source exhausted: all {len(self._indices)} integer draws are consumed.'
            raise ExhaustedRandomSource(msg)

        value = self._indices[self._index_cursor]
        if not 0 <= value < n:
            msg = f'Replayed integer draw out of range: {value} not in [0, {n})'
            raise ValueError(msg)

        self._index_cursor += 1
        return value


def default_source(seed: typing.Union[int, None] = None) -> RandomSource:
    """Default randomness source.

    :param seed: random seed, defaults to None
    :type seed: int, optional

    :return: randomness source
    :rtype: NumpyRandomSource
    """
    _LOG.debug(f'Default randomness source initiated: seed={seed}')
    return NumpyRandomSource(seed)
