import math

import pydantic
import pytest

from genevo import FitnessScale, Individual, Parameters, ReplacementMode
from genevo.exceptions import ValidationError


class TestIndividual:
    def test_starts_unevaluated(self):
        individual = Individual(chromosome=[1, 0, 1])
        assert individual.fitness == float("-inf")
        assert not individual.is_evaluated
        assert individual.gene_count == 3

    def test_fitness_assignment_coerces_to_float(self):
        individual = Individual(chromosome=[1, 1])
        individual.fitness = 2
        assert isinstance(individual.fitness, float)
        assert individual.is_evaluated

    def test_chromosome_is_not_aliased(self):
        genes = [1, 2, 3]
        individual = Individual(chromosome=genes)
        genes[0] = 99
        assert individual.chromosome == [1, 2, 3]

    def test_accepts_arbitrary_gene_types(self):
        genes = [object(), object()]
        individual = Individual(chromosome=genes)
        assert individual.chromosome[0] is genes[0]

    def test_nan_fitness_is_allowed(self):
        individual = Individual(chromosome=[0, 0], fitness=float("nan"))
        assert math.isnan(individual.fitness)

    def test_unique_ids(self):
        assert Individual(chromosome=[0]).id != Individual(chromosome=[0]).id


class TestParameters:
    def test_defaults(self):
        params = Parameters(crossover_point_index=3)
        assert params.parent_proportion == 0.2
        assert params.chromosome_mutation_probability == 0.3
        assert params.gene_mutation_probability == 0.3
        assert params.fitness_scale is FitnessScale.ROUGH
        assert params.fitness_tolerance == 0.0
        assert params.replacement is ReplacementMode.REGENERATE

    def test_from_crossover_point_is_one_based(self):
        assert Parameters.from_crossover_point(3).crossover_point_index == 2

    def test_for_chromosome_splits_in_the_middle(self):
        assert Parameters.for_chromosome([0] * 10).crossover_point_index == 4
        assert Parameters.for_chromosome([0] * 7).crossover_point_index == 2
        assert Parameters.for_chromosome([0, 1]).crossover_point_index == 0

    def test_for_chromosome_accepts_overrides(self):
        params = Parameters.for_chromosome([0] * 4, fitness_scale="linear")
        assert params.fitness_scale is FitnessScale.LINEAR

    @pytest.mark.parametrize("chromosome", [[], [1]])
    def test_for_chromosome_rejects_short_chromosomes(self, chromosome):
        with pytest.raises(ValidationError):
            Parameters.for_chromosome(chromosome)

    @pytest.mark.parametrize(
        "field, value",
        [
            ("crossover_point_index", -1),
            ("parent_proportion", 0.0),
            ("parent_proportion", 1.5),
            ("chromosome_mutation_probability", -0.1),
            ("gene_mutation_probability", 1.1),
            ("fitness_tolerance", -1.0),
            ("fitness_scale", "cubic"),
        ],
    )
    def test_rejects_out_of_range_values(self, field, value):
        kwargs = {"crossover_point_index": 1, field: value}
        with pytest.raises(pydantic.ValidationError):
            Parameters(**kwargs)

    def test_rejects_unknown_fields(self):
        with pytest.raises(pydantic.ValidationError):
            Parameters(crossover_point_index=1, elitism=True)

    def test_validate_chromosome_length(self):
        params = Parameters(crossover_point_index=2)
        params.validate_chromosome_length(4)
        with pytest.raises(ValidationError):
            params.validate_chromosome_length(3)
