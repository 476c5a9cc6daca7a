import random

from pydantic import BaseModel, Field, PrivateAttr


class OneMaxProblem(BaseModel):
    """Binary chromosomes; fitness is the number of ones."""

    chromosome_length: int = Field(default=16, ge=2)
    seed: int | None = Field(default=None, description="Seed for the initializer")

    _rng: random.Random = PrivateAttr()

    def model_post_init(self, __context) -> None:
        self._rng = random.Random(self.seed)

    @property
    def max_fitness(self) -> float:
        return float(self.chromosome_length)

    def initialize(self) -> list[int]:
        return [self._rng.randint(0, 1) for _ in range(self.chromosome_length)]

    def fitness(self, chromosome: list[int]) -> float:
        return float(sum(chromosome))
