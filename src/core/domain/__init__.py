"""
Domain models and value objects.

Contains the spacetime value objects Event and Boost.
"""

from src.core.domain.event import Boost, Event
from src.core.math.lorentz import IntervalType

__all__ = [
    "Boost",
    "Event",
    "IntervalType",
]
