"""Cooperative task queue and green-thread scheduler with timer-driven preemption points."""

__version__ = "0.1.0"

__all__ = ["__version__"]