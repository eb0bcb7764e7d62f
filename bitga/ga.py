"""
Genetic algorithm over fixed-length bit-string genomes: roulette wheel selection, one-point crossover, and single-locus
mutation.
"""
import functools
import logging
import numbers
import os
import sys

import numpy as np
import typing

from bitga.errors import FitnessSumNonPositive, GenomeLengthMismatch, InvalidConfiguration
from bitga.random_source import RandomSource, default_source

_LOG = logging.getLogger(__name__)

FitnessFunction = typing.Callable[[np.ndarray], float]
Observer = typing.Callable[[int, 'Individual'], None]

_PROGRESS_DETAILS = (None, 'range', 'stats', 'full', 'all')


class Individual(typing.NamedTuple):
    """A genome with its (evaluated) fitness. Individuals compare (and hash) by value: equal bits and equal fitness."""
    genome: np.ndarray
    fitness: float

    def __eq__(self, other) -> bool:
        # no element-wise tuple comparison: that would compare genomes as arrays
        if not isinstance(other, Individual):
            return False
        return self.fitness == other.fitness and np.array_equal(self.genome, other.genome)

    def __ne__(self, other) -> bool:
        return not self.__eq__(other)

    def __hash__(self) -> int:
        return hash((tuple(np.asarray(self.genome).tolist()), self.fitness))


class Problem(typing.NamedTuple):
    """Definition of the problem to be optimised by the genetic algorithm."""
    max_generations: int
    n: int
    k: int
    fitness: FitnessFunction
    mutation_rate: float
    crossover_rate: float

    def validate(self) -> 'Problem':
        """Check the problem definition.

        :return: problem definition
        :rtype: Problem

        :raises TypeError: if `fitness` is not callable
        :raises InvalidConfiguration: if any count or rate is invalid
        """
        # fitness function must be callable
        if not callable(self.fitness):
            msg = f'Fitness function must be callable: `fitness` of type {type(self.fitness)}'
            raise TypeError(msg)

        # counts must be integers
        counts = dict(max_generations=self.max_generations, n=self.n, k=self.k)
        if not all(_is_integer(v) for v in counts.values()):
            msg = f'Not all counts are integers: {counts}'
            raise InvalidConfiguration(msg)

        # genome length
        if self.k < 1:
            msg = f'Genome length must be positive: k={self.k}'
            raise InvalidConfiguration(msg)

        # population size: an odd population would shrink by one every generation
        if self.n < 1 or self.n % 2:
            msg = f'Population size must be positive and even: n={self.n}'
            raise InvalidConfiguration(msg)

        # number of generations
        if self.max_generations < 0:
            msg = f'Number of generations must be non-negative: max_generations={self.max_generations}'
            raise InvalidConfiguration(msg)

        # rates are probabilities
        rates = dict(mutation_rate=self.mutation_rate, crossover_rate=self.crossover_rate)
        if not all(isinstance(v, numbers.Real) and 0 <= v <= 1 for v in rates.values()):
            msg = f'Not all rates are in [0, 1]: {rates}'
            raise InvalidConfiguration(msg)

        return self


def _is_integer(value) -> bool:
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


"""Genomes and individuals"""


def _as_genome(bits: typing.Iterable[int]) -> np.ndarray:
    """Create a read-only genome from a sequence of bits; the bits are always copied."""
    genome = np.array(bits, dtype=int)
    genome.flags.writeable = False
    return genome


def _check_lengths(genome_1: np.ndarray, genome_2: np.ndarray) -> None:
    if not len(genome_1) == len(genome_2):
        msg = f'Genome lengths mismatch: {len(genome_1)} =/= {len(genome_2)}'
        raise GenomeLengthMismatch(msg)


def rand_bit(rng: RandomSource) -> int:
    """Random bit, 0 or 1 with equal probability."""
    return 0 if rng.next_unit() < .5 else 1


def flip_bit(bit: int) -> int:
    return 1 if bit == 0 else 0


def random_genome(k: int, rng: RandomSource) -> np.ndarray:
    """Generate a random genome.

    :param k: genome length
    :param rng: randomness source

    :type k: int
    :type rng: RandomSource

    :return: genome of `k` random bits
    :rtype: numpy.ndarray

    :raises InvalidConfiguration: if `k` is smaller than 1
    """
    # check genome length
    if k < 1:
        msg = f'Genome length must be positive: k={k}'
        raise InvalidConfiguration(msg)

    # draw bits one by one
    return _as_genome([rand_bit(rng) for _ in range(k)])


def evaluate(genome: typing.Iterable[int], fitness: FitnessFunction) -> Individual:
    genome = _as_genome(genome)
    return Individual(genome, float(fitness(genome)))


def random_individual(k: int, fitness: FitnessFunction, rng: RandomSource) -> Individual:
    """Generate a random, fitness-evaluated individual.

    :param k: genome length
    :param fitness: fitness function
    :param rng: randomness source

    :type k: int
    :type fitness: callable
    :type rng: RandomSource

    :return: individual
    :rtype: Individual
    """
    return evaluate(random_genome(k, rng), fitness)


def random_population(n: int, k: int, fitness: FitnessFunction, rng: RandomSource) -> typing.List[Individual]:
    """Generate a random population.

    :param n: population size
    :param k: genome length
    :param fitness: fitness function
    :param rng: randomness source

    :type n: int
    :type k: int
    :type fitness: callable
    :type rng: RandomSource

    :return: population
    :rtype: list

    :raises InvalidConfiguration: if `n` is smaller than 1
    """
    # check population size
    if n < 1:
        msg = f'Population size must be positive: n={n}'
        raise InvalidConfiguration(msg)

    # return population
    return [random_individual(k, fitness, rng) for _ in range(n)]


"""Genetic operations: Mutation"""


def mutate(mutation_rate: float, genome: typing.Iterable[int], rng: RandomSource) -> np.ndarray:
    """Single-locus mutation: with probability `mutation_rate`, a randomly selected bit is flipped. Otherwise, the
    genome is returned unchanged.

    :param mutation_rate: probability of mutation
    :param genome: genome
    :param rng: randomness source

    :type mutation_rate: float
    :type genome: iterable
    :type rng: RandomSource

    :return: (mutated) genome
    :rtype: numpy.ndarray
    """
    genome = _as_genome(genome)

    # apply mutation: flip a single locus of a copy
    if rng.next_unit() < mutation_rate:
        locus = rng.next_index(len(genome))
        child = genome.copy()
        child[locus] = flip_bit(child[locus])
        return _as_genome(child)

    # no mutation
    return genome


"""Genetic operations: Crossover"""


def cross(front_genome: typing.Iterable[int], back_genome: typing.Iterable[int], point: int) -> np.ndarray:
    """Splice two genomes: the first `point` bits of the front genome followed by the bits of the back genome from
    `point` onward.

    :param front_genome: front genome
    :param back_genome: back genome
    :param point: crossover point

    :type front_genome: iterable
    :type back_genome: iterable
    :type point: int

    :return: spliced genome
    :rtype: numpy.ndarray

    :raises GenomeLengthMismatch: if the genomes are of unequal length
    :raises InvalidConfiguration: if `point` is not in [0, k]
    """
    front_genome, back_genome = _as_genome(front_genome), _as_genome(back_genome)
    _check_lengths(front_genome, back_genome)

    # check crossover point
    if not 0 <= point <= len(front_genome):
        msg = f'Crossover point out of range: {point} not in [0, {len(front_genome)}]'
        raise InvalidConfiguration(msg)

    # splice genomes
    return _as_genome(np.concatenate([front_genome[:point], back_genome[point:]]))


def crossover(
        dad_genome: typing.Iterable[int], mom_genome: typing.Iterable[int], crossover_rate: float, rng: RandomSource
) -> typing.Tuple[np.ndarray, np.ndarray]:
    """One-point crossover: with probability `crossover_rate`, both children are spliced from the parents at the same,
    randomly selected point. Otherwise, the parents' genomes are returned unchanged.

    :param dad_genome: genome of parent (1)
    :param mom_genome: genome of parent (2)
    :param crossover_rate: probability of crossover
    :param rng: randomness source

    :type dad_genome: iterable
    :type mom_genome: iterable
    :type crossover_rate: float
    :type rng: RandomSource

    :return: genomes of children
    :rtype: tuple

    :raises GenomeLengthMismatch: if the genomes are of unequal length
    """
    # lengths are checked before any draw
    dad_genome, mom_genome = _as_genome(dad_genome), _as_genome(mom_genome)
    _check_lengths(dad_genome, mom_genome)

    # apply crossover: both children share the crossover point
    if rng.next_unit() < crossover_rate:
        point = rng.next_index(len(dad_genome))
        return cross(dad_genome, mom_genome, point), cross(mom_genome, dad_genome, point)

    # no crossover
    return dad_genome, mom_genome


def breed(
        dad: Individual, mom: Individual, fitness: FitnessFunction, mutation_rate: float, crossover_rate: float,
        rng: RandomSource
) -> typing.Tuple[Individual, Individual]:
    """Create two new, fitness-evaluated individuals from two parents by crossover followed by mutation.

    :param dad: parent (1)
    :param mom: parent (2)
    :param fitness: fitness function
    :param mutation_rate: probability of mutation
    :param crossover_rate: probability of crossover
    :param rng: randomness source

    :type dad: Individual
    :type mom: Individual
    :type fitness: callable
    :type mutation_rate: float
    :type crossover_rate: float
    :type rng: RandomSource

    :return: children
    :rtype: tuple
    """
    # crossover
    son, daughter = crossover(dad.genome, mom.genome, crossover_rate, rng)

    # mutation, per child
    son = mutate(mutation_rate, son, rng)
    daughter = mutate(mutation_rate, daughter, rng)

    # return evaluated children
    return evaluate(son, fitness), evaluate(daughter, fitness)


"""Selection procedure"""


def calculate_sampling_probabilities(population: typing.Sequence[Individual]) -> np.ndarray:
    """Calculate the probability of selection of every individual, proportional to its share of the population's total
    fitness.

    :param population: population
    :type population: sequence

    :return: probability of selection
    :rtype: numpy.ndarray

    :raises FitnessSumNonPositive: if the total fitness is not positive
    """
    fitness = np.array([p.fitness for p in population], dtype=float)

    # total fitness must be positive (also catches NaN)
    total = fitness.sum()
    if not total > 0:
        msg = f'Total fitness must be positive for roulette wheel selection: {total}'
        raise FitnessSumNonPositive(msg)

    # return probabilities based on fitness
    return fitness / total


def roulette_wheel_selection(probabilities: typing.Sequence[float], rng: RandomSource) -> int:
    """Select the index of an individual with a probability proportional to its relative fitness. If floating point
    drift exhausts the wheel, the last individual with a positive probability is selected.

    :param probabilities: probability of selection
    :param rng: randomness source

    :type probabilities: sequence
    :type rng: RandomSource

    :return: index of selected individual
    :rtype: int

    :raises InvalidConfiguration: if `probabilities` is empty
    """
    if len(probabilities) == 0:
        msg = 'Cannot select from an empty population.'
        raise InvalidConfiguration(msg)

    # spin the wheel
    mark = rng.next_unit()
    for index, slot in enumerate(probabilities):
        if mark < slot:
            return index
        mark -= slot

    # wheel exhausted: clamp to last occupied slot
    positive = np.flatnonzero(np.asarray(probabilities) > 0)
    return int(positive[-1]) if len(positive) else len(probabilities) - 1


"""Generations"""


def pair_off_and_breed(
        population: typing.Sequence[Individual], probabilities: typing.Sequence[float], fitness: FitnessFunction,
        mutation_rate: float, crossover_rate: float, rng: RandomSource
) -> typing.Tuple[Individual, Individual]:
    """Select two parents by roulette wheel selection (possibly the same individual twice), and breed them."""
    dad = population[roulette_wheel_selection(probabilities, rng)]
    mom = population[roulette_wheel_selection(probabilities, rng)]
    return breed(dad, mom, fitness, mutation_rate, crossover_rate, rng)


def make_next_generation(
        population: typing.Sequence[Individual], n: int, fitness: FitnessFunction, mutation_rate: float,
        crossover_rate: float, rng: RandomSource
) -> typing.List[Individual]:
    """Create the next generation of `2 * (n // 2)` individuals. The probabilities of selection are determined once, from
    the current population.

    :param population: current population
    :param n: population size
    :param fitness: fitness function
    :param mutation_rate: probability of mutation
    :param crossover_rate: probability of crossover
    :param rng: randomness source

    :type population: sequence
    :type n: int
    :type fitness: callable
    :type mutation_rate: float
    :type crossover_rate: float
    :type rng: RandomSource

    :return: next generation
    :rtype: list
    """
    if n % 2:
        _LOG.debug(f'Odd population size: next generation truncated to {n - 1} individuals.')

    # probability of selection: frozen for the whole generation
    probabilities = calculate_sampling_probabilities(population)

    # new generation: pairs of children
    generation = []
    for _ in range(n // 2):
        generation.extend(pair_off_and_breed(population, probabilities, fitness, mutation_rate, crossover_rate, rng))
    return generation


"""Statistics"""


def compare_fitness(a: Individual, b: Individual) -> Individual:
    """Fittest of two individuals; on equal fitness, `a`."""
    return b if a.fitness < b.fitness else a


def statistics(population: typing.Sequence[Individual]) -> Individual:
    """Fittest individual of the population; on equal fitness, the first one.

    :raises InvalidConfiguration: if `population` is empty
    """
    if len(population) == 0:
        msg = 'Cannot determine the fittest individual of an empty population.'
        raise InvalidConfiguration(msg)

    return functools.reduce(compare_fitness, population)


"""Execution"""


def evolve(
        problem: Problem, rng: RandomSource = None
) -> typing.Iterator[typing.Tuple[int, typing.List[Individual], Individual]]:
    """Evolve a random population for `problem.max_generations` generations. The problem definition is validated before
    any randomness is drawn.

    :param problem: problem definition
    :param rng: randomness source, defaults to `default_source()`

    :type problem: Problem
    :type rng: RandomSource, optional

    :return: generation number, population, and best individual so far (per generation, including the initial one)
    :rtype: iterator
    """
    problem = problem.validate()
    if rng is None:
        rng = default_source()

    # initial population
    population = random_population(problem.n, problem.k, problem.fitness, rng)
    best = statistics(population)
    yield 0, population, best

    # evolution
    for generation_no in range(1, problem.max_generations + 1):
        population = make_next_generation(
            population, problem.n, problem.fitness, problem.mutation_rate, problem.crossover_rate, rng
        )
        best = compare_fitness(best, statistics(population))
        yield generation_no, population, best


def genetic_algorithm(problem: Problem, rng: RandomSource = None, observer: Observer = None) -> Individual:
    """Apply the genetic algorithm to the problem.

    :param problem: problem definition
    :param rng: randomness source, defaults to `default_source()`
    :param observer: called with the generation number and best individual so far, after the initial population and
        after every generation, defaults to None

    :type problem: Problem
    :type rng: RandomSource, optional
    :type observer: callable, optional

    :return: best individual
    :rtype: Individual
    """
    best = None
    for generation_no, _, best in evolve(problem, rng):
        # report progress
        if generation_no == 0:
            _LOG.info(f'Initial best: {best}')
        else:
            _LOG.debug(f'Generation {generation_no}: best fitness {best.fitness}')
        if observer is not None:
            observer(generation_no, best)

    _LOG.info(f'Evolution completed after {problem.max_generations} generations: best fitness {best.fitness}')
    return best


class GeneticAlgorithm:
    """A genetic algorithm that searches for the bit-string genome that maximises a fitness function."""
    _settings: dict = {
        'population_size': 100,
        'mutation_probability': .05,
        'crossover_probability': .9,
    }

    def __init__(self, function: FitnessFunction, dimension: int, n_iterations: int = None, **kwargs) -> None:
        """
        :param function: fitness function
        :param dimension: genome length
        :param n_iterations: number of generations, defaults to None
        :param kwargs: genetic algorithm settings:
            :param population_size: population size, defaults to 100
            :param mutation_probability: probability of mutation, defaults to 0.05
            :param crossover_probability: probability of crossover, defaults to 0.9

        :type function: callable
        :type dimension: int
        :type n_iterations: int, optional
        :type kwargs: optional
            :type population_size: int
            :type mutation_probability: float
            :type crossover_probability: float

        :raises TypeError: if `function` is not callable
        :raises InvalidConfiguration: if the settings do not define a valid problem
        """
        self.func = function
        self.dim = dimension

        # genetic algorithm settings
        self._settings = self._set_settings(kwargs)
        self.pop_size: int = self._settings['population_size']
        self.p_mutation: float = self._settings['mutation_probability']
        self.p_crossover: float = self._settings['crossover_probability']

        # check the settings before the number of generations is derived from them
        problem = Problem(
            max_generations=0, n=self.pop_size, k=self.dim, fitness=self.func,
            mutation_rate=self.p_mutation, crossover_rate=self.p_crossover,
        ).validate()

        # number of generations
        self.n_iterations: int = self._set_iterations(n_iterations)
        self.problem = problem._replace(max_generations=self.n_iterations).validate()

    """Genetic algorithm settings"""

    @property
    def settings(self) -> dict:
        """
        :return: genetic algorithm settings
        :rtype: dict
        """
        return self._settings

    def _set_settings(self, settings: dict) -> dict:
        """Merge custom settings into a per-instance copy of the default settings; the defaults are never modified.
        Unknown settings are skipped, with a single warning listing them all.

        :param settings: custom-defined settings
        :type settings: dict

        :return: genetic algorithm settings
        :rtype: dict
        """
        unknown = sorted(set(settings) - set(self._settings))
        if unknown:
            _LOG.warning(f'Unknown setting\'s key(s): {", ".join(unknown)} [skipped]')

        merged = {k: settings.get(k, v) for k, v in self._settings.items()}
        _LOG.debug(f'Genetic algorithm settings: {merged}')
        return merged

    def _set_iterations(self, iterations: typing.Union[int, None]) -> int:
        """Set the number of generations. If no value is provided (i.e. `None`), it is derived from the genome length
        and the population size: longer genomes get more generations, larger populations fewer, with at most 1e7
        fitness evaluations in total.

        :param iterations: number of generations
        :type iterations: int, None

        :return: number of generations
        :rtype: int
        """
        # user-defined number of generations
        if iterations is not None:
            return iterations

        # derived number of generations
        generations = max(self.dim * 5000 // self.pop_size, 1)
        return min(generations, int(1e7 // self.pop_size))

    """Progress data"""

    @staticmethod
    def _collect_progress_data(population: typing.Sequence[Individual], progress_details: str, **kwargs) -> dict:
        """Collect data on evolutionary progress. See documentation of `.progress_update()` on the possible keywords of
        `progress_details`, and what data is collected based on every keyword.

        :param population: population
        :param progress_details: progress details to include
        :param kwargs: data to accelerate the execution
            best_fitness: fitness of best individual so far, defaults to `statistics(population).fitness`

        :type population: sequence
        :type progress_details: str
        :type kwargs: optional
            best_fitness: float

        :return: collected progress data
        :rtype: dict
        """
        fitness = np.array([p.fitness for p in population], dtype=float)
        best_fitness: float = kwargs.get('best_fitness', statistics(population).fitness)

        # include best fitness so far
        data = {
            'best_fitness': best_fitness,
        }

        # include worst fitness
        if progress_details in ('range', 'stats', 'all'):
            data['worst_fitness'] = float(fitness.min())

        # include fitness statistics
        if progress_details in ('stats', 'all'):
            data['mean_fitness'] = float(np.mean(fitness))
            data['std_fitness'] = float(np.std(fitness))

        # include whole population's fitness
        if progress_details in ('full', 'all'):
            data['pop_fitness'] = list(fitness)

        return data

    def progress_update(
            self, population: typing.Sequence[Individual], progress_details: str, progress_data: dict = None,
            **kwargs
    ) -> dict:
        """Initiate and update progress data. The data included is defined by `progress_details`:
         -  None        :   store the best fitness so far [default]
         -  'range'     :   store the best fitness so far, and the worst fitness
         -  'stats'     :   store the best fitness so far, the worst fitness, the mean fitness, and the standard
                            deviation in fitness
         -  'full'      :   store the best fitness so far, and the fitness of the whole population
         -  'all'       :   all the above

        :param population: population
        :param progress_details: progress details to include
        :param progress_data: previous progress data, defaults to None
        :param kwargs: data to accelerate the execution
            best_fitness: fitness of best individual so far, defaults to its calculation

        :type population: sequence
        :type progress_details: str
        :type progress_data: dict, optional
        :type kwargs: optional
            best_fitness: float

        :return: updated progress data
        :rtype: dict
        """
        # collect progress data
        data = self._collect_progress_data(population, progress_details, **kwargs)

        # initiate progress data
        if progress_data is None:
            progress_data = {k: [] for k in data.keys()}

        # append progress data
        for k in progress_data.keys():
            progress_data[k].append(data[k])

        return progress_data

    """Execution"""

    def exec(self, **kwargs) -> typing.Tuple[Individual, dict]:
        """Execute genetic algorithm.

        :param kwargs: execution settings
            max_iterations: overwrite the number of generations, defaults to None
            seed: random seed of the default randomness source, defaults to None
            rng: randomness source, defaults to `default_source(seed)`
            observer: called with the generation number and best individual so far, defaults to None

            progress_bar: print a progress bar, defaults to False
            progress_bar_length: print-length of progress bar, defaults to 50
            progress_export: export progress details, if a directory is provided, the progress details are exported
                accordingly, defaults to False
            progress_details: progress details to be stored (see `.progress_update()`), defaults to None

        :type kwargs: optional
            max_iterations: int
            seed: int
            rng: RandomSource
            observer: callable

            progress_bar: bool
            progress_bar_length: int
            progress_export: bool, str
            progress_details: str

        :return: best individual, and progress data
        :rtype: tuple

        :raises ValueError: if `progress_details` is unknown
        :raises InvalidConfiguration: if `max_iterations` is invalid
        """
        # execution settings
        # > generations
        n_iterations: int = kwargs.get('max_iterations', self.n_iterations)
        problem = self.problem._replace(max_generations=n_iterations).validate()
        # > randomness
        rng: RandomSource = kwargs.get('rng') or default_source(kwargs.get('seed'))
        observer: typing.Union[Observer, None] = kwargs.get('observer')
        # > progress
        progress_bar: bool = kwargs.get('progress_bar', False)
        progress_bar_length: int = kwargs.get('progress_bar_length', 50)
        progress_export: typing.Union[bool, str] = kwargs.get('progress_export', False)
        progress_details: str = kwargs.get('progress_details')
        if progress_details not in _PROGRESS_DETAILS:
            msg = f'Unknown `progress_details`: {progress_details} not in {_PROGRESS_DETAILS}'
            raise ValueError(msg)

        # evolution
        best, progress_data = None, None
        for t, population, best in evolve(problem, rng):
            if t == 0:
                _LOG.info(f'Initial best: {best}')
            if progress_bar:
                _progress_bar(t, n_iterations, best.fitness, bar_length=progress_bar_length)

            # update progress data
            progress_data = self.progress_update(
                population, progress_details, progress_data, best_fitness=best.fitness
            )
            if observer is not None:
                observer(t, best)

        _LOG.info(f'Evolution completed after {n_iterations} generations: best fitness {best.fitness}')

        # export progress details
        if progress_export:
            wd = progress_export if isinstance(progress_export, str) else None
            _export_progress(progress_data, wd=wd)

        # return best individual, and progress data
        return best, progress_data


def _progress_bar(generation: int, n_generations: int, best_fitness: float, **kwargs) -> None:
    """Print the progress of an evolution on a single, overwritten line, e.g.
    `|.....     |  50.0% | generation 5/10 | best fitness 7.0`.

    :param generation: generation number
    :param n_generations: total number of generations
    :param best_fitness: fitness of best individual so far
    :param kwargs:
        bar_length: printed length of progress bar, default to 50

    :type generation: int
    :type n_generations: int
    :type best_fitness: float
    :type kwargs: optional
        bar_length: int
    """
    length: int = kwargs.get('bar_length', 50)

    # progress: no generations counts as completed
    completed = generation / n_generations if n_generations else 1.
    filled = int(round(completed * length))
    bar = '|' + '.' * filled + ' ' * (length - filled) + '|'

    # status: line is closed after the last generation
    status = f'generation {generation}/{n_generations} | best fitness {best_fitness}'
    if generation >= n_generations:
        status += ' | completed\n'

    sys.stdout.write(f'\r{bar} {completed * 100:5.1f}% | {status}')
    sys.stdout.flush()


def _export_progress(progress_data: dict, file_name: str = None, wd: str = None) -> str:
    """Export progress data as `*.csv`-file, with one row per generation (starting at the initial population, i.e.
    generation 0) and one column per progress detail. The fitness of the whole population is written as a
    space-separated list within its cell.

    :param progress_data: progress data (see `GeneticAlgorithm.progress_update()`)
    :param file_name: file name, defaults to 'ga_progress.csv'
    :param wd: working directory, defaults to the current working directory

    :type progress_data: dict
    :type file_name: str, optional
    :type wd: str, optional

    :return: file path
    :rtype: str

    :raises ValueError: if progress details are not recorded for the same number of generations
    """
    # output file
    file_name = file_name or 'ga_progress.csv'
    if not file_name.endswith('.csv'):
        file_name += '.csv'
    file = os.path.join(wd or os.getcwd(), file_name)

    # every progress detail covers the same generations
    n_generations = {len(v) for v in progress_data.values()}
    if not len(n_generations) == 1:
        msg = f'Progress details recorded for different numbers of generations: {n_generations}'
        raise ValueError(msg)

    def cell(value) -> str:
        return ' '.join(map(str, value)) if isinstance(value, list) else str(value)

    # write to `*.csv`-file: header, and a row per generation
    with open(file, mode='w') as f:
        f.write(','.join(['generation', *progress_data.keys()]) + '\n')
        f.write('\n'.join(
            ','.join([str(t), *map(cell, row)]) for t, row in enumerate(zip(*progress_data.values()))
        ))

    _LOG.info(f'Progress of {n_generations.pop()} generations exported to {file}')
    return file
