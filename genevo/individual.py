from __future__ import annotations

import math
from typing import Generic, TypeVar
import uuid

from pydantic import BaseModel, ConfigDict, Field

GeneT = TypeVar("GeneT")

UNEVALUATED_FITNESS = float("-inf")


class Individual(BaseModel, Generic[GeneT]):
    """A candidate solution: a chromosome and the fitness it was scored with."""

    id: str = Field(
        default_factory=lambda: str(uuid.uuid4()),
        description="Unique individual identifier",
    )
    chromosome: list[GeneT] = Field(
        ..., description="Ordered genes of the candidate solution"
    )
    fitness: float = Field(
        default=UNEVALUATED_FITNESS,
        description="Fitness score; -inf until evaluated",
    )

    model_config = ConfigDict(
        arbitrary_types_allowed=True,
        extra="forbid",
        validate_assignment=True,
    )

    @property
    def gene_count(self) -> int:
        return len(self.chromosome)

    @property
    def is_evaluated(self) -> bool:
        """False while fitness still holds the -inf sentinel."""
        return not (math.isinf(self.fitness) and self.fitness < 0)

    def __repr__(self) -> str:
        return f"Individual(id={self.id[:8]}, fitness={self.fitness}, genes={self.gene_count})"
