from __future__ import annotations

from collections import deque
from datetime import datetime

from pydantic import BaseModel, Field, computed_field


class EngineMetrics(BaseModel):
    """Counters collected by GeneticAlgorithm across generate() calls."""

    total_generations: int = Field(
        default=0, description="Total number of generations run"
    )
    individuals_evaluated: int = Field(
        default=0, description="Total number of fitness function calls"
    )
    children_created: int = Field(
        default=0, description="Total number of crossover children"
    )
    mutations_applied: int = Field(
        default=0, description="Children that passed the chromosome mutation gate"
    )
    genes_mutated: int = Field(
        default=0, description="Total number of replaced genes"
    )
    random_refills: int = Field(
        default=0, description="Fresh random individuals added during replacement"
    )
    last_generation_time: datetime | None = Field(
        default=None, description="Timestamp of last generation"
    )
    best_fitness_per_generation: deque = Field(
        default_factory=lambda: deque(maxlen=10),
        description="Rolling window of best fitness per generation",
    )

    @computed_field
    @property
    def avg_best_fitness(self) -> float:
        """Average best fitness over the rolling window."""
        return sum(self.best_fitness_per_generation) / max(
            1, len(self.best_fitness_per_generation)
        )

    def to_dict(self) -> dict[str, int | float | str | None]:
        return {
            "total_generations": self.total_generations,
            "individuals_evaluated": self.individuals_evaluated,
            "children_created": self.children_created,
            "mutations_applied": self.mutations_applied,
            "genes_mutated": self.genes_mutated,
            "random_refills": self.random_refills,
            "last_generation_time": self.last_generation_time,
            "avg_best_fitness": self.avg_best_fitness,
        }

    model_config = {"arbitrary_types_allowed": True, "extra": "allow"}
