from typing import Protocol, Sequence, TypeVar

GeneT = TypeVar("GeneT")


class ChromosomeInitializer(Protocol[GeneT]):
    """Produces a fresh random chromosome.

    Every call within one engine must return a chromosome of the same length.
    """

    def __call__(self) -> Sequence[GeneT]: ...


class FitnessFunction(Protocol[GeneT]):
    """Scores a chromosome; higher is better.

    Must be total over every chromosome the engine can produce. Determinism
    is up to the caller.
    """

    def __call__(self, chromosome: list[GeneT]) -> float: ...
