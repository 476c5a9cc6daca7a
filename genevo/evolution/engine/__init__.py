from __future__ import annotations

from genevo.evolution.engine.config import Parameters
from genevo.evolution.engine.core import GeneticAlgorithm
from genevo.evolution.engine.metrics import EngineMetrics
