from pathlib import Path

from hydra import compose, initialize_config_dir
import pytest

from problems.one_max import OneMaxProblem
from problems.sphere import SphereProblem
from run import build_parameters, run_experiment

CONFIG_DIR = str(Path(__file__).resolve().parents[1] / "config")


def load_config(*overrides):
    with initialize_config_dir(config_dir=CONFIG_DIR, version_base=None):
        return compose(config_name="config", overrides=list(overrides))


class TestProblems:
    def test_one_max(self):
        problem = OneMaxProblem(chromosome_length=10, seed=1)
        chromosome = problem.initialize()
        assert len(chromosome) == 10
        assert set(chromosome) <= {0, 1}
        assert problem.fitness([1, 0, 1, 1]) == 3.0
        assert problem.max_fitness == 10.0

    def test_one_max_seeded(self):
        assert OneMaxProblem(seed=3).initialize() == OneMaxProblem(seed=3).initialize()

    def test_sphere(self):
        problem = SphereProblem(dimensions=3, low=-1.0, high=1.0, seed=0)
        chromosome = problem.initialize()
        assert len(chromosome) == 3
        assert all(-1.0 <= gene <= 1.0 for gene in chromosome)
        assert problem.fitness([1.0, 2.0, 0.0]) == -5.0
        assert problem.fitness([0.0, 0.0, 0.0]) == 0.0

    def test_sphere_rejects_empty_bounds(self):
        with pytest.raises(ValueError):
            SphereProblem(low=1.0, high=1.0)


class TestRunner:
    def test_default_parameters_split_in_the_middle(self):
        cfg = load_config()
        parameters = build_parameters(cfg, [0] * 16)
        assert parameters.crossover_point_index == 7
        assert parameters.parent_proportion == 0.2

    def test_explicit_crossover_index(self):
        cfg = load_config("parameters.crossover_point_index=3", "parameters.fitness_scale=linear")
        parameters = build_parameters(cfg, [0] * 16)
        assert parameters.crossover_point_index == 3
        assert parameters.fitness_scale.value == "linear"

    def test_one_max_run_reaches_optimum(self):
        cfg = load_config(
            "population_size=30",
            "generations=500",
            "problem.chromosome_length=8",
            "parameters.parent_proportion=0.5",
        )
        best = run_experiment(cfg)
        assert best.fitness == 8.0

    def test_sphere_run(self):
        cfg = load_config(
            "problem=sphere",
            "population_size=20",
            "generations=5",
            "parameters.fitness_scale=windowing",
        )
        best = run_experiment(cfg)
        assert best.gene_count == 8


class TestLoggerSetup:
    def test_file_sink(self, tmp_path):
        from loguru import logger

        from genevo.utils.logger_setup import setup_logger

        log_file = setup_logger(log_dir=str(tmp_path), level="DEBUG", enable_colors=False)
        try:
            logger.info("hello from the test")
        finally:
            logger.remove()
        assert log_file.startswith(str(tmp_path))
        assert "hello from the test" in Path(log_file).read_text(encoding="utf-8")

    def test_console_only(self):
        from loguru import logger

        from genevo.utils.logger_setup import setup_logger

        try:
            assert setup_logger(log_dir=None) is None
        finally:
            logger.remove()
