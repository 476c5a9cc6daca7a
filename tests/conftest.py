import random

from loguru import logger
import pytest

from genevo import Parameters
from genevo.individual import Individual


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def binary_initializer(rng):
    """Four-gene binary chromosomes drawn from a seeded source."""

    def initialize() -> list[int]:
        return [rng.randint(0, 1) for _ in range(4)]

    return initialize


@pytest.fixture
def count_ones():
    def fitness(chromosome: list[int]) -> float:
        return float(sum(chromosome))

    return fitness


@pytest.fixture
def no_mutation_parameters() -> Parameters:
    return Parameters(
        crossover_point_index=1,
        parent_proportion=0.5,
        chromosome_mutation_probability=0.0,
        gene_mutation_probability=0.0,
        fitness_scale="rough",
    )


@pytest.fixture
def make_population():
    """Build individuals from (chromosome, fitness) pairs."""

    def build(*pairs) -> list[Individual]:
        return [Individual(chromosome=list(c), fitness=f) for c, f in pairs]

    return build


@pytest.fixture
def log_messages():
    """Collect loguru messages emitted during a test."""
    messages: list[str] = []
    handler_id = logger.add(lambda msg: messages.append(msg.record["message"]), level="DEBUG")
    yield messages
    logger.remove(handler_id)
