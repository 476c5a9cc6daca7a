from __future__ import annotations

from datetime import datetime, timezone
import random
from typing import Generic, TypeVar

from loguru import logger

from genevo.evolution.crossover import SinglePointCrossover
from genevo.evolution.engine.config import Parameters
from genevo.evolution.engine.metrics import EngineMetrics
from genevo.evolution.models import ReplacementMode
from genevo.evolution.mutation import UniformGeneMutation
from genevo.evolution.protocols import ChromosomeInitializer, FitnessFunction
from genevo.evolution.scaling import get_fitness_scaler
from genevo.evolution.selection import TruncationSelector
from genevo.exceptions import (
    ChromosomeLengthError,
    EvolutionError,
    GenEvoError,
    ValidationError,
)
from genevo.individual import Individual

__all__ = ["GeneticAlgorithm"]

GeneT = TypeVar("GeneT")


class GeneticAlgorithm(Generic[GeneT]):
    """
    Generational evolution loop over a fixed-size population:
    - Each step keeps the best parents, breeds adjacent pairs, mutates the
      children, evaluates them, refills the population and re-ranks it.
    - The population is always sorted by descending fitness between calls.
    - `initialize` and `fitness` are the only contact points with the problem.
    """

    def __init__(
        self,
        population_size: int,
        initialize: ChromosomeInitializer[GeneT],
        fitness: FitnessFunction[GeneT],
        parameters: Parameters | None = None,
        *,
        rng: random.Random | None = None,
        seed: int | None = None,
    ):
        if population_size <= 0:
            raise ValidationError(
                f"population_size must be positive, got {population_size}"
            )

        self.population_size = population_size
        self.initialize = initialize
        self.fitness = fitness
        if rng is not None and seed is not None:
            raise ValidationError("Pass either rng or seed, not both")
        self.rng = rng if rng is not None else random.Random(seed)
        if parameters is None:
            parameters = Parameters.for_chromosome(list(initialize()))
        self.parameters = parameters.model_copy()

        self.generation_count = 0
        self.metrics = EngineMetrics()
        self.chromosome_length: int | None = None

        self.selector = TruncationSelector(self.parameters.parent_proportion)
        self.crossover = SinglePointCrossover(self.parameters.crossover_point_index)
        self.mutation = UniformGeneMutation(
            self.parameters.chromosome_mutation_probability,
            self.parameters.gene_mutation_probability,
            initialize=self._initialize_chromosome,
            rng=self.rng,
        )
        self.scaler = get_fitness_scaler(self.parameters.fitness_scale)

        initial = self._spawn(population_size)
        self.parameters.validate_chromosome_length(self.chromosome_length)
        # Ranked up front so best_individual is meaningful before generate()
        self._population: list[Individual[GeneT]] = self._rank(self._evaluate(initial))
        self.metrics.individuals_evaluated += len(initial)

        logger.info(
            "[GeneticAlgorithm] Init | population={}, genes={}, parents={}, scale={}, replacement={}",
            self.population_size,
            self.chromosome_length,
            self.selector.parent_count(self.population_size),
            self.parameters.fitness_scale.value,
            self.parameters.replacement.value,
        )

    @property
    def best_individual(self) -> Individual[GeneT]:
        return self._population[0]

    @property
    def population(self) -> list[Individual[GeneT]]:
        """Current population, best first (a new list; individuals are shared)."""
        return list(self._population)

    def generate(
        self, generation_count: int, fitness_target: float | None = None
    ) -> Individual[GeneT]:
        """Run up to `generation_count` generations and return the best individual.

        Stops early once the best fitness is within `parameters.fitness_tolerance`
        of `fitness_target`. A failing generation raises EvolutionError and
        leaves the population of the last completed generation in place.
        """
        if generation_count < 1:
            raise ValidationError(
                f"generation_count must be at least 1, got {generation_count}"
            )

        logger.info(
            "[GeneticAlgorithm] Generate | generations={}, target={}, start={}",
            generation_count,
            fitness_target,
            self.generation_count,
        )
        for _ in range(generation_count):
            self.evolve_step()
            if fitness_target is not None and self._fitness_target_reached(fitness_target):
                logger.info(
                    "[GeneticAlgorithm] Stop: target {} reached at generation {}",
                    fitness_target,
                    self.generation_count,
                )
                break

        logger.info(
            "[GeneticAlgorithm] Done | generation={}, best_fitness={}",
            self.generation_count,
            self.best_individual.fitness,
        )
        return self.best_individual

    def evolve_step(self) -> None:
        try:
            self._step()
        except GenEvoError:
            raise
        except Exception as exc:
            raise EvolutionError(
                f"Generation {self.generation_count + 1} failed: {exc}"
            ) from exc

    def _step(self) -> None:
        parents = self.selector(self._population)
        children = self.crossover(parents)
        stats = self.mutation(children)
        self._evaluate(children)

        population, refills = self._replace(parents, children)
        self.scaler(population)
        self._population = population

        self.generation_count += 1
        self.metrics.total_generations += 1
        self.metrics.individuals_evaluated += len(children) + refills
        self.metrics.children_created += len(children)
        self.metrics.random_refills += refills
        self.metrics.mutations_applied += stats.mutated
        self.metrics.genes_mutated += stats.genes
        self.metrics.best_fitness_per_generation.append(self.best_individual.fitness)
        self.metrics.last_generation_time = datetime.now(timezone.utc)

        logger.debug(
            "[GeneticAlgorithm] Generation {} | parents={}, children={}, mutated={}, best={}",
            self.generation_count,
            len(parents),
            len(children),
            stats.mutated,
            self.best_individual.fitness,
        )

    def _replace(
        self, parents: list[Individual[GeneT]], children: list[Individual[GeneT]]
    ) -> tuple[list[Individual[GeneT]], int]:
        """Next population (ranked, truncated) and the number of random refills."""
        missing = 0
        if self.parameters.replacement is ReplacementMode.STEADY_STATE:
            survivors = self._population[: max(self.population_size - len(children), 0)]
            population = survivors + children
        else:
            population = parents + children
            missing = max(self.population_size - len(population), 0)
            if missing:
                population += self._evaluate(self._spawn(missing))
        # parents + children can outnumber the population for large proportions
        return self._rank(population)[: self.population_size], missing

    def _initialize_chromosome(self) -> list[GeneT]:
        chromosome = list(self.initialize())
        if self.chromosome_length is None:
            if not chromosome:
                raise ValidationError("Initializer returned an empty chromosome")
            self.chromosome_length = len(chromosome)
        elif len(chromosome) != self.chromosome_length:
            raise ChromosomeLengthError(
                f"Initializer returned {len(chromosome)} genes, expected {self.chromosome_length}"
            )
        return chromosome

    def _spawn(self, count: int) -> list[Individual[GeneT]]:
        return [Individual(chromosome=self._initialize_chromosome()) for _ in range(count)]

    def _evaluate(self, individuals: list[Individual[GeneT]]) -> list[Individual[GeneT]]:
        for individual in individuals:
            individual.fitness = self.fitness(individual.chromosome)
        return individuals

    @staticmethod
    def _rank(individuals: list[Individual[GeneT]]) -> list[Individual[GeneT]]:
        return sorted(individuals, key=lambda ind: ind.fitness, reverse=True)

    def _fitness_target_reached(self, target: float) -> bool:
        best = self.best_individual.fitness
        return best == target or abs(best - target) <= self.parameters.fitness_tolerance
