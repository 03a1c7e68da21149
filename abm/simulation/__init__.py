"""Simulation engine for generating and summarizing Monte Carlo paths."""

from abm.simulation.noise import NoiseSource, NormalNoise
from abm.simulation.path_simulator import PathSimulator
from abm.simulation.path_summary import PathSummary

__all__ = ["NoiseSource", "NormalNoise", "PathSimulator", "PathSummary"]
