"""Truck pallet loading: exact and heuristic solvers for the 0/1 knapsack problem."""

__version__ = "0.1.0"
__all__ = ["__version__"]