class GenEvoError(Exception):
    """Base for all genevo exceptions."""

    pass


# High-level families
class ValidationError(GenEvoError):
    """Invalid configuration or precondition violations."""

    pass


class EvolutionError(GenEvoError):
    """Evolution process failures."""

    pass


# Validation subtypes
class ChromosomeLengthError(ValidationError):
    """Chromosomes of one run disagree in length or with the crossover point."""

    pass
