from enum import Enum


class FitnessScale(str, Enum):
    """Post-replacement transforms applied to population fitness."""

    # Fitness as returned by the fitness function
    ROUGH = "rough"

    # Zero-based: worst individual ends at 0
    WINDOWING = "windowing"

    # Square root, dampens the strongest individuals
    EXPONENTIAL = "exponential"

    # Evenly spaced ladder from population_size down to 1
    LINEAR = "linear"


class ReplacementMode(str, Enum):
    """How offspring enter the next population."""

    # Parents + children, gap filled with fresh random individuals
    REGENERATE = "regenerate"

    # Current population minus its worst len(children) individuals, plus children
    STEADY_STATE = "steady_state"
