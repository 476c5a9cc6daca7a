"""genevo – generic genetic algorithm engine."""

from genevo.evolution.engine import EngineMetrics, GeneticAlgorithm, Parameters
from genevo.evolution.models import FitnessScale, ReplacementMode
from genevo.individual import Individual

__all__ = [
    "EngineMetrics",
    "FitnessScale",
    "GeneticAlgorithm",
    "Individual",
    "Parameters",
    "ReplacementMode",
]
