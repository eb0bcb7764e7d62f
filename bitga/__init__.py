"""
bitga is a genetic algorithm over fixed-length bit-string genomes, using the `numpy`-package. The population evolves by
roulette wheel selection, one-point crossover, and single-locus mutation, and the fittest individual ever seen is
returned. Every stochastic operation draws from an explicitly passed randomness source, so runs can be replayed.
"""
from bitga.errors import (
    ExhaustedRandomSource, FitnessSumNonPositive, GeneticAlgorithmError, GenomeLengthMismatch, InvalidConfiguration,
)
from bitga.ga import (
    GeneticAlgorithm, Individual, Problem, breed, calculate_sampling_probabilities, compare_fitness, cross, crossover,
    evolve, genetic_algorithm, make_next_generation, mutate, pair_off_and_breed, random_genome, random_individual,
    random_population, roulette_wheel_selection, statistics,
)
from bitga.random_source import NumpyRandomSource, RandomSource, ReplayRandomSource, default_source

__all__ = [
    'GeneticAlgorithm', 'Individual', 'Problem', 'genetic_algorithm', 'evolve',
    'random_genome', 'random_individual', 'random_population',
    'mutate', 'cross', 'crossover', 'breed',
    'calculate_sampling_probabilities', 'roulette_wheel_selection',
    'pair_off_and_breed', 'make_next_generation', 'compare_fitness', 'statistics',
    'RandomSource', 'NumpyRandomSource', 'ReplayRandomSource', 'default_source',
    'GeneticAlgorithmError', 'InvalidConfiguration', 'GenomeLengthMismatch', 'FitnessSumNonPositive',
    'ExhaustedRandomSource',
]

__version__ = '1.0'
__description__ = 'Genetic algorithm over bit-string genomes with replayable randomness'
