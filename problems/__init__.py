"""Toy problems for exercising the engine from the Hydra runner."""
