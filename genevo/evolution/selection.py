from abc import ABC, abstractmethod
import math

from loguru import logger

from genevo.individual import Individual

MIN_PARENTS = 2


class ParentSelector(ABC):
    """Abstract base class for choosing the breeding parents of a generation."""

    @abstractmethod
    def __call__(self, population: list[Individual]) -> list[Individual]:
        """Return the parents, best first.

        Args:
            population: Current population sorted by descending fitness

        Returns:
            Selected parents; the individuals themselves, not copies
        """


class TruncationSelector(ParentSelector):
    """Keeps the top `parent_proportion` of a ranked population (never fewer than 2)."""

    def __init__(self, parent_proportion: float):
        if not 0.0 < parent_proportion <= 1.0:
            raise ValueError(
                f"parent_proportion must be in (0, 1], got {parent_proportion}"
            )
        self.parent_proportion = parent_proportion

    def parent_count(self, population_size: int) -> int:
        # Ties round half up
        return max(
            math.floor(population_size * self.parent_proportion + 0.5), MIN_PARENTS
        )

    def __call__(self, population: list[Individual]) -> list[Individual]:
        count = self.parent_count(len(population))
        logger.debug(
            "[TruncationSelector] Selected {} of {} individuals",
            min(count, len(population)),
            len(population),
        )
        return population[:count]
