"""Fitness scaling strategies.

Scalers run on a population already sorted by descending fitness and rewrite
fitness values in place. Every scaler here is monotone on a sorted population
so the ranking survives; NaN fitness (e.g. square root of a negative value)
propagates instead of being repaired.
"""

from abc import ABC, abstractmethod

from loguru import logger
import numpy as np

from genevo.evolution.models import FitnessScale
from genevo.individual import Individual


class FitnessScaler(ABC):
    """Base class for fitness scaling strategies."""

    mode: FitnessScale

    def __call__(self, population: list[Individual]) -> None:
        if not population:
            return
        fitness = np.array([ind.fitness for ind in population], dtype=np.float64)
        scaled = self.scale(fitness)
        for individual, value in zip(population, scaled):
            individual.fitness = float(value)

    @abstractmethod
    def scale(self, fitness: np.ndarray) -> np.ndarray:
        """Return scaled values for fitness sorted best-first."""


class RoughScaler(FitnessScaler):
    """Leaves fitness as computed by the fitness function."""

    mode = FitnessScale.ROUGH

    def __call__(self, population: list[Individual]) -> None:
        return

    def scale(self, fitness: np.ndarray) -> np.ndarray:
        return fitness


class WindowingScaler(FitnessScaler):
    """Shifts fitness so the last-ranked individual sits at exactly 0."""

    mode = FitnessScale.WINDOWING

    def scale(self, fitness: np.ndarray) -> np.ndarray:
        return fitness - fitness[-1]


class ExponentialScaler(FitnessScaler):
    """Square root of every fitness value.

    Negative fitness has no real square root and becomes NaN; callers using
    this mode must keep fitness non-negative.
    """

    mode = FitnessScale.EXPONENTIAL

    def scale(self, fitness: np.ndarray) -> np.ndarray:
        with np.errstate(invalid="ignore"):
            scaled = np.sqrt(fitness)
        nans = int(np.count_nonzero(np.isnan(scaled)))
        if nans:
            logger.warning(
                "[ExponentialScaler] {} fitness value(s) are NaN after scaling",
                nans,
            )
        return scaled


class LinearScaler(FitnessScaler):
    """Evenly spaced ladder: best gets len(population), worst gets 1."""

    mode = FitnessScale.LINEAR

    def scale(self, fitness: np.ndarray) -> np.ndarray:
        return np.arange(len(fitness), 0, -1, dtype=np.float64)


_SCALERS: dict[FitnessScale, type[FitnessScaler]] = {
    scaler.mode: scaler
    for scaler in (RoughScaler, WindowingScaler, ExponentialScaler, LinearScaler)
}


def get_fitness_scaler(mode: FitnessScale | str) -> FitnessScaler:
    """Instantiate the scaler registered for `mode`."""
    try:
        return _SCALERS[FitnessScale(mode)]()
    except (KeyError, ValueError) as exc:
        raise ValueError(f"Unknown fitness scale: {mode!r}") from exc
