from abc import ABC, abstractmethod

from genevo.exceptions import ChromosomeLengthError
from genevo.individual import Individual


class CrossoverOperator(ABC):
    """Abstract base class for breeding children out of ranked parents."""

    @abstractmethod
    def __call__(self, parents: list[Individual]) -> list[Individual]:
        """Return new, unevaluated children bred from `parents`."""


class SinglePointCrossover(CrossoverOperator):
    """Splices each pair of adjacent parents at a fixed gene index.

    For parents ranked p0, p1, ..., pn the children are (p0, p1), (p1, p2), ...,
    (pn-1, pn), so n parents yield n - 1 children. Genes 0..index come from the
    better parent, the rest from the next one.
    """

    def __init__(self, crossover_point_index: int):
        if crossover_point_index < 0:
            raise ValueError(
                f"crossover_point_index must be non-negative, got {crossover_point_index}"
            )
        self.crossover_point_index = crossover_point_index

    def splice(self, first: Individual, second: Individual) -> Individual:
        length = first.gene_count
        if second.gene_count != length:
            raise ChromosomeLengthError(
                f"Cannot cross chromosomes of length {length} and {second.gene_count}"
            )
        if self.crossover_point_index >= length - 1:
            raise ChromosomeLengthError(
                f"Crossover index {self.crossover_point_index} out of range for length {length}"
            )
        cut = self.crossover_point_index + 1
        return Individual(chromosome=first.chromosome[:cut] + second.chromosome[cut:])

    def __call__(self, parents: list[Individual]) -> list[Individual]:
        return [
            self.splice(first, second) for first, second in zip(parents, parents[1:])
        ]
