"""Descriptive statistics over a batch of simulated paths."""

from typing import Dict, Optional, Sequence
import numpy as np
import pandas as pd


class PathSummary:
    """Summarizes a batch of Monte Carlo paths.

    Parameters
    ----------
    paths : np.ndarray
        Array of shape ``(num_paths, num_points)`` as returned by
        ``PathSimulator.simulate``
    time_index : sequence of float, optional
        Time of each column; defaults to the column positions

    Raises
    ------
    ValueError
        If ``paths`` is not 2-D or holds no increments
    """

    def __init__(self, paths: np.ndarray, time_index: Optional[Sequence[float]] = None):
        paths = np.asarray(paths, dtype=float)
        if paths.ndim != 2:
            raise ValueError(f"paths must be a 2-D array, got {paths.ndim} dimension(s)")
        if paths.shape[0] < 1 or paths.shape[1] < 2:
            raise ValueError(
                "paths must hold at least one path with two time points, "
                f"got shape {paths.shape}"
            )

        self.paths = paths
        self.num_paths, self.num_points = paths.shape

        if time_index is None:
            time_index = np.arange(self.num_points)
        if len(time_index) != self.num_points:
            raise ValueError(
                f"time_index has {len(time_index)} entries, expected {self.num_points}"
            )
        self.time_index = pd.Index(np.asarray(time_index, dtype=float), name="time")

    def increments(self) -> np.ndarray:
        """Step increments ``p[j+1] - p[j]``, shape ``(num_paths, num_points - 1)``."""
        return np.diff(self.paths, axis=1)

    def increment_mean(self) -> float:
        return float(np.mean(self.increments()))

    def increment_variance(self) -> float:
        """Sample variance of all increments pooled together."""
        increments = self.increments()
        ddof = 1 if increments.size > 1 else 0
        return float(np.var(increments, ddof=ddof))

    def terminal_values(self) -> np.ndarray:
        return self.paths[:, -1]

    def statistics_at(self, index: int) -> Dict[str, float]:
        """Get min/max/mean/std/median across paths at one time index.

        Parameters
        ----------
        index : int
            Column position; negative values count from the end

        Returns
        -------
        dict
            Dictionary with 'min', 'max', 'mean', 'std' and 'median' keys

        Raises
        ------
        IndexError
            If ``index`` is outside the time grid
        """
        if not -self.num_points <= index < self.num_points:
            raise IndexError(
                f"index {index} out of range for {self.num_points} time points"
            )

        values = self.paths[:, index]

        return {
            "min": float(np.min(values)),
            "max": float(np.max(values)),
            "mean": float(np.mean(values)),
            "std": float(np.std(values)),
            "median": float(np.median(values)),
        }

    def quantiles(self, levels: Sequence[float] = (0.05, 0.5, 0.95)) -> pd.DataFrame:
        """Per-time quantiles across paths, one column per level."""
        levels = np.asarray(levels, dtype=float)
        if levels.size == 0 or np.any((levels < 0) | (levels > 1)):
            raise ValueError(f"Quantile levels must lie in [0, 1], got {levels.tolist()}")

        values = np.quantile(self.paths, levels, axis=0)
        return pd.DataFrame(values.T, index=self.time_index, columns=levels.tolist())

    def to_dict(self) -> Dict[str, float]:
        """Summary of the batch.

        Returns
        -------
        dict
            - num_paths, num_points
            - terminal_mean, terminal_std, terminal_min, terminal_max
            - increment_mean, increment_variance
        """
        terminal = self.statistics_at(-1)

        return {
            "num_paths": self.num_paths,
            "num_points": self.num_points,
            "terminal_mean": terminal["mean"],
            "terminal_std": terminal["std"],
            "terminal_min": terminal["min"],
            "terminal_max": terminal["max"],
            "increment_mean": self.increment_mean(),
            "increment_variance": self.increment_variance(),
        }
