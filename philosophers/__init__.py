"""Threaded dining philosophers simulation: argument parsing, simulation and command line."""

__version__ = "1.0.0"
__all__ = ["parsing", "simulation", "cli"]