import numpy as np
from pydantic import BaseModel, Field, PrivateAttr, model_validator


class SphereProblem(BaseModel):
    """Real-valued chromosomes; fitness is the negated sum of squares (max 0 at the origin)."""

    dimensions: int = Field(default=8, ge=2)
    low: float = Field(default=-5.12)
    high: float = Field(default=5.12)
    seed: int | None = Field(default=None, description="Seed for the initializer")

    _rng: np.random.Generator = PrivateAttr()

    @model_validator(mode="after")
    def validate_bounds(self):
        if self.low >= self.high:
            raise ValueError(f"low ({self.low}) must be < high ({self.high})")
        return self

    def model_post_init(self, __context) -> None:
        self._rng = np.random.default_rng(self.seed)

    @property
    def max_fitness(self) -> float:
        return 0.0

    def initialize(self) -> list[float]:
        return self._rng.uniform(self.low, self.high, size=self.dimensions).tolist()

    def fitness(self, chromosome: list[float]) -> float:
        genes = np.asarray(chromosome, dtype=np.float64)
        return -float(np.dot(genes, genes))
