from abc import ABC, abstractmethod
from dataclasses import dataclass
import random

from loguru import logger

from genevo.evolution.protocols import ChromosomeInitializer
from genevo.exceptions import ChromosomeLengthError
from genevo.individual import Individual


@dataclass
class MutationStats:
    """Outcome of one mutation pass."""

    mutated: int = 0  # Individuals that passed the chromosome gate
    genes: int = 0  # Genes replaced across all of them


class MutationOperator(ABC):
    """Abstract base class for mutating freshly bred children in place."""

    @abstractmethod
    def __call__(self, individuals: list[Individual]) -> MutationStats:
        """Mutate `individuals` and report what changed."""


class UniformGeneMutation(MutationOperator):
    """Replaces genes with those of a freshly initialised chromosome.

    Each child first passes a chromosome-level gate with probability
    `chromosome_probability`. For a child that passes, one donor chromosome is
    drawn from the initializer and every position is independently replaced by
    the donor's gene with probability `gene_probability`.
    """

    def __init__(
        self,
        chromosome_probability: float,
        gene_probability: float,
        initialize: ChromosomeInitializer,
        rng: random.Random | None = None,
    ):
        for name, value in (
            ("chromosome_probability", chromosome_probability),
            ("gene_probability", gene_probability),
        ):
            if not 0.0 <= value <= 1.0:
                raise ValueError(f"{name} must be in [0, 1], got {value}")
        self.chromosome_probability = chromosome_probability
        self.gene_probability = gene_probability
        self.initialize = initialize
        self.rng = rng or random.Random()

    def mutate(self, individual: Individual) -> int:
        """Mutate one individual; return the number of genes replaced."""
        donor = list(self.initialize())
        if len(donor) != individual.gene_count:
            raise ChromosomeLengthError(
                f"Initializer returned {len(donor)} genes, expected {individual.gene_count}"
            )

        chromosome = list(individual.chromosome)
        replaced = 0
        for position, gene in enumerate(donor):
            if self.rng.random() < self.gene_probability:
                chromosome[position] = gene
                replaced += 1
        individual.chromosome = chromosome
        return replaced

    def __call__(self, individuals: list[Individual]) -> MutationStats:
        stats = MutationStats()
        for individual in individuals:
            if self.rng.random() < self.chromosome_probability:
                stats.mutated += 1
                stats.genes += self.mutate(individual)

        logger.debug(
            "[UniformGeneMutation] Mutated {}/{} individual(s), {} gene(s)",
            stats.mutated,
            len(individuals),
            stats.genes,
        )
        return stats
