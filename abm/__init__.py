"""Arithmetic Brownian Motion (ABM) Price Path Simulator.

A Python package for generating Monte Carlo sample paths of Arithmetic
Brownian Motion with the Euler-Maruyama scheme.
"""

from abm.exceptions import ConfigurationError
from abm.model import ABM
from abm.simulation import NoiseSource, NormalNoise, PathSimulator, PathSummary

__version__ = "1.0.0"
__all__ = [
    "ABM",
    "ConfigurationError",
    "NoiseSource",
    "NormalNoise",
    "PathSimulator",
    "PathSummary",
]
