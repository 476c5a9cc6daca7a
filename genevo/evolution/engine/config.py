from __future__ import annotations

from typing import Any, Sequence

from pydantic import BaseModel, ConfigDict, Field

from genevo.evolution.models import FitnessScale, ReplacementMode
from genevo.exceptions import ValidationError

DEFAULT_PARENT_PROPORTION = 0.2
DEFAULT_MUTATION_PROBABILITY = 0.3


class Parameters(BaseModel):
    """Tunables controlling one GeneticAlgorithm run."""

    crossover_point_index: int = Field(
        ...,
        ge=0,
        description="Last gene index taken from the first parent during crossover",
    )
    parent_proportion: float = Field(
        default=DEFAULT_PARENT_PROPORTION,
        gt=0.0,
        le=1.0,
        description="Fraction of the population kept as parents (at least 2)",
    )
    chromosome_mutation_probability: float = Field(
        default=DEFAULT_MUTATION_PROBABILITY,
        ge=0.0,
        le=1.0,
        description="Probability that a child is eligible for mutation",
    )
    gene_mutation_probability: float = Field(
        default=DEFAULT_MUTATION_PROBABILITY,
        ge=0.0,
        le=1.0,
        description="Per-gene replacement probability inside a mutating child",
    )
    fitness_scale: FitnessScale = Field(default=FitnessScale.ROUGH)
    fitness_tolerance: float = Field(
        default=0.0,
        ge=0.0,
        description="Max distance between best fitness and target to stop early",
    )
    replacement: ReplacementMode = Field(default=ReplacementMode.REGENERATE)

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    @classmethod
    def from_crossover_point(cls, crossover_point: int, **overrides: Any) -> Parameters:
        """Build parameters from a 1-based crossover point (index = point - 1)."""
        return cls(crossover_point_index=crossover_point - 1, **overrides)

    @classmethod
    def for_chromosome(cls, chromosome: Sequence[Any], **overrides: Any) -> Parameters:
        """Default parameters splicing a chromosome of this length at its middle."""
        if len(chromosome) < 2:
            raise ValidationError(
                f"Cannot derive a crossover point from a chromosome of length {len(chromosome)}"
            )
        return cls.from_crossover_point(len(chromosome) // 2, **overrides)

    def validate_chromosome_length(self, length: int) -> None:
        """Raise unless the crossover index splits a chromosome of `length` in two."""
        if not 0 <= self.crossover_point_index < length - 1:
            raise ValidationError(
                f"crossover_point_index={self.crossover_point_index} is invalid for "
                f"chromosomes of length {length} (must be in [0, {length - 2}])"
            )
