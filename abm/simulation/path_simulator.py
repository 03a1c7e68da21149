"""Monte Carlo path simulator for Arithmetic Brownian Motion."""

import logging
from numbers import Integral, Real
from typing import Optional
import numpy as np
import pandas as pd

from abm.exceptions import ConfigurationError
from abm.simulation.noise import NoiseSource, NormalNoise

logger = logging.getLogger(__name__)


def _positive_int(name: str, value) -> int:
    if isinstance(value, bool) or not isinstance(value, Integral) or value <= 0:
        raise ConfigurationError(f"{name} must be a positive integer, got {value!r}")
    return int(value)


def _finite_real(name: str, value) -> float:
    if isinstance(value, bool) or not isinstance(value, Real) or not np.isfinite(value):
        raise ConfigurationError(f"{name} must be a finite real number, got {value!r}")
    return float(value)


class PathSimulator:
    """Generates sample paths of Arithmetic Brownian Motion.

    Paths follow ``dS = mu * dt + sigma * dW`` and are discretized with the
    Euler-Maruyama scheme::

        S[j+1] = S[j] + mu * dt + sigma * sqrt(dt) * Z[j],   Z[j] ~ N(0, 1)

    Parameters
    ----------
    drift : float
        Expected change per unit time (mu)
    volatility : float
        Diffusion coefficient (sigma), must be non-negative
    path_count : int
        Number of independent paths to generate
    step_count : int
        Number of discretization intervals per path
    horizon : float
        Total simulated time span
    initial_value : float
        Value of every path at time 0
    seed : int, optional
        Seed for the default ``NormalNoise`` source
    noise : NoiseSource, optional
        Injected noise source, used instead of a seeded ``NormalNoise``

    Raises
    ------
    ConfigurationError
        If any parameter is out of range
    """

    def __init__(
        self,
        drift: float,
        volatility: float,
        path_count: int,
        step_count: int,
        horizon: float,
        initial_value: float,
        seed: Optional[int] = None,
        noise: Optional[NoiseSource] = None,
    ):
        self._drift = _finite_real("drift", drift)
        self._volatility = _finite_real("volatility", volatility)
        if self._volatility < 0:
            raise ConfigurationError(f"volatility must be non-negative, got {volatility!r}")
        self._path_count = _positive_int("path_count", path_count)
        self._step_count = _positive_int("step_count", step_count)
        self._horizon = _finite_real("horizon", horizon)
        if self._horizon <= 0:
            raise ConfigurationError(f"horizon must be positive, got {horizon!r}")
        self._initial_value = _finite_real("initial_value", initial_value)

        if noise is not None:
            if seed is not None:
                raise ConfigurationError("Pass either seed or noise, not both")
            if not isinstance(noise, NoiseSource):
                raise ConfigurationError(
                    f"noise must be a NoiseSource, got {type(noise).__name__}"
                )
            self._noise = noise
        else:
            self._noise = NormalNoise(seed=seed)

        logger.debug("Configured %r", self)

    @property
    def drift(self) -> float:
        return self._drift

    @property
    def volatility(self) -> float:
        return self._volatility

    @property
    def path_count(self) -> int:
        return self._path_count

    @property
    def step_count(self) -> int:
        return self._step_count

    @property
    def horizon(self) -> float:
        return self._horizon

    @property
    def initial_value(self) -> float:
        return self._initial_value

    @property
    def noise(self) -> NoiseSource:
        return self._noise

    @property
    def dt(self) -> float:
        """Time step size, ``horizon / step_count``."""
        if self._step_count <= 0:
            raise ConfigurationError(
                f"step_count must be a positive integer, got {self._step_count!r}"
            )
        return self._horizon / self._step_count

    def time_grid(self) -> np.ndarray:
        """Times ``j * dt`` for ``j = 0 .. step_count``."""
        return np.arange(self._step_count + 1) * self.dt

    def expected_path(self) -> np.ndarray:
        """Mean path ``initial_value + drift * t`` over the time grid."""
        return self._initial_value + self._drift * self.time_grid()

    def simulate(self) -> np.ndarray:
        """Simulate a fresh batch of paths.

        Returns
        -------
        np.ndarray
            Array of shape ``(path_count, step_count + 1)``; row ``i`` is
            path ``i`` and column 0 equals ``initial_value``
        """
        dt = self.dt
        num_steps = self._step_count

        paths = np.full((self._path_count, num_steps + 1), self._initial_value, dtype=float)

        # dW = sqrt(dt) * N(0, 1)
        dW = self._noise.standard_normal((self._path_count, num_steps)) * np.sqrt(dt)

        drift_term = self._drift * dt
        for j in range(1, num_steps + 1):
            paths[:, j] = paths[:, j - 1] + drift_term + self._volatility * dW[:, j - 1]

        logger.debug("Simulated %d paths x %d steps (dt=%g)", self._path_count, num_steps, dt)
        return paths

    def simulate_frame(self) -> pd.DataFrame:
        """Simulate a batch as a DataFrame indexed by time, one column per path."""
        paths = self.simulate()
        index = pd.Index(self.time_grid(), name="time")
        columns = [f"path_{i}" for i in range(self._path_count)]
        return pd.DataFrame(paths.T, index=index, columns=columns)

    def __repr__(self) -> str:
        return (
            f"PathSimulator(drift={self._drift!r}, volatility={self._volatility!r}, "
            f"path_count={self._path_count!r}, step_count={self._step_count!r}, "
            f"horizon={self._horizon!r}, initial_value={self._initial_value!r})"
        )
