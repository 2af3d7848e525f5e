"""
Domain models and value objects.

Contains immutable results of the Euclidean algorithm family.
"""

from src.numtheory.domain.results import BezoutResult, EuclidStep, ExtendedEuclidStep

__all__ = [
    "BezoutResult",
    "EuclidStep",
    "ExtendedEuclidStep",
]
