"""
Errors raised by the genetic algorithm.
"""


class GeneticAlgorithmError(Exception):
    """Base class of all genetic algorithm errors."""


class InvalidConfiguration(GeneticAlgorithmError, ValueError):
    """Invalid problem definition or operator input."""


class GenomeLengthMismatch(InvalidConfiguration):
    """Genetic operation on genomes of unequal length."""


class FitnessSumNonPositive(GeneticAlgorithmError, ValueError):
    """Total fitness of the population is not positive: fitness-proportional selection is undefined."""


class ExhaustedRandomSource(GeneticAlgorithmError, IndexError):
    """A replayed randomness source is asked for more draws than it holds."""
