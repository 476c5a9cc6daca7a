from datetime import datetime, timezone
import time

import hydra
from hydra.utils import instantiate
from loguru import logger
from omegaconf import DictConfig, OmegaConf

from genevo import GeneticAlgorithm, Individual, Parameters
from genevo.utils.logger_setup import setup_logger


def build_parameters(cfg: DictConfig, sample_chromosome: list) -> Parameters:
    """Parameters from config; a null crossover index means "split in the middle"."""
    overrides = OmegaConf.to_container(cfg.parameters, resolve=True)
    crossover_point_index = overrides.pop("crossover_point_index", None)
    if crossover_point_index is None:
        return Parameters.for_chromosome(sample_chromosome, **overrides)
    return Parameters(crossover_point_index=crossover_point_index, **overrides)


def run_experiment(cfg: DictConfig) -> Individual:
    start_time = time.time()

    logger.info("Genetic algorithm run")
    logger.info(f"Problem: {cfg.problem._target_}")
    logger.info(f"Start time: {datetime.now(timezone.utc).isoformat()}")

    problem = instantiate(cfg.problem)
    parameters = build_parameters(cfg, problem.initialize())
    fitness_target = cfg.fitness_target
    if fitness_target is None and cfg.stop_at_optimum:
        fitness_target = problem.max_fitness

    logger.info("Configuration:")
    logger.info(f"  - Population size: {cfg.population_size}")
    logger.info(f"  - Max generations: {cfg.generations}")
    logger.info(f"  - Fitness target: {fitness_target}")
    logger.info(f"  - Parameters: {parameters.model_dump(mode='json')}")

    try:
        engine = GeneticAlgorithm(
            population_size=cfg.population_size,
            initialize=problem.initialize,
            fitness=problem.fitness,
            parameters=parameters,
            seed=cfg.seed,
        )
        best = engine.generate(cfg.generations, fitness_target=fitness_target)
    except Exception as e:  # pylint: disable=broad-except
        logger.error(f"Run failed: {e}")
        raise
    finally:
        duration = time.time() - start_time
        logger.info(f"Total run duration: {duration:.2f} seconds")

    logger.info(
        "Best individual after {} generation(s): fitness={}, chromosome={}",
        engine.generation_count,
        best.fitness,
        best.chromosome,
    )
    logger.info(f"Metrics: {engine.metrics.to_dict()}")
    return best


@hydra.main(version_base=None, config_path="config", config_name="config")
def main(cfg: DictConfig) -> None:
    """Main entrypoint with Hydra configuration management."""
    log_file_path = setup_logger(
        log_dir=cfg.logging.log_dir,
        level=cfg.logging.level,
        rotation=cfg.logging.rotation,
        retention=cfg.logging.retention,
    )
    logger.info(f"Log file: {log_file_path}")
    run_experiment(cfg)


if __name__ == "__main__":
    main()
