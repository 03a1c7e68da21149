"""
Arithmetic Brownian Motion model for asset price simulation.

This module wires the path simulator and the path summary into a single
pipeline, mirroring the step-by-step workflow of a Monte Carlo study.
"""

from typing import Optional
import numpy as np

from abm.simulation.path_simulator import PathSimulator
from abm.simulation.path_summary import PathSummary


class ABM:
    """
    Arithmetic Brownian Motion model for price path simulation.

    The model simulates ``path_count`` price paths following
    ``dS = mu * dt + sigma * dW`` and summarizes the resulting batch.

    Parameters
    ----------
    drift : float
        Expected change per unit time (mu)
    volatility : float
        Diffusion coefficient (sigma), non-negative
    path_count : int, default=50
        Number of simulated paths
    step_count : int, default=200
        Number of time steps per path
    horizon : float, default=1.0
        Total simulated time span
    initial_value : float, default=200.0
        Price at time 0
    seed : int, optional
        Random seed for the simulator's own NumPy generator

    Attributes
    ----------
    simulator : PathSimulator
        Underlying path simulator
    paths : np.ndarray
        Last simulated batch, shape (path_count, step_count + 1)
    summary : PathSummary
        Statistics of the last simulated batch
    """

    def __init__(
        self,
        drift: float,
        volatility: float,
        path_count: int = 50,
        step_count: int = 200,
        horizon: float = 1.0,
        initial_value: float = 200.0,
        seed: Optional[int] = None,
    ):
        self.simulator = PathSimulator(
            drift=drift,
            volatility=volatility,
            path_count=path_count,
            step_count=step_count,
            horizon=horizon,
            initial_value=initial_value,
            seed=seed,
        )
        self.seed = seed

        self.paths: Optional[np.ndarray] = None
        self.summary: Optional[PathSummary] = None

    def simulate(self) -> np.ndarray:
        """
        Simulate a new batch of paths.

        Returns
        -------
        np.ndarray
            Simulated paths, one row per path
        """
        self.paths = self.simulator.simulate()
        self.summary = None
        return self.paths

    def summarize(self) -> PathSummary:
        """
        Compute statistics of the last simulated batch.

        Returns
        -------
        PathSummary
            Summary over the simulated paths, indexed by simulation time

        Raises
        ------
        ValueError
            If no paths have been simulated yet
        """
        if self.paths is None:
            raise ValueError("Paths not available. Call simulate() first.")

        self.summary = PathSummary(self.paths, time_index=self.simulator.time_grid())
        return self.summary

    def run(self) -> PathSummary:
        """
        Run the complete simulation pipeline.

        This method executes all steps in order:
        1. Simulate paths
        2. Summarize the batch

        Returns
        -------
        PathSummary
            Summary of the new batch
        """
        self.simulate()
        return self.summarize()
