"""Genetic-algorithm path planning for a robot on a square grid arena."""

__version__ = "0.1.0"
__all__ = ["arena", "genetics", "navigator"]