"""Pseudo-random noise sources driving the path simulator."""

from abc import ABC, abstractmethod
from typing import Optional, Tuple, Union
import numpy as np


class NoiseSource(ABC):
    """Source of independent standard normal draws."""

    @abstractmethod
    def standard_normal(self, shape: Union[int, Tuple[int, ...]]) -> np.ndarray:
        """Draw i.i.d. N(0, 1) samples with the given shape."""


class NormalNoise(NoiseSource):
    """Standard normal noise backed by its own NumPy ``Generator``.

    Parameters
    ----------
    seed : int, optional
        Seed for ``numpy.random.default_rng``. Equal seeds give equal draws.
    generator : np.random.Generator, optional
        Existing generator to draw from instead of creating one
    """

    def __init__(
        self,
        seed: Optional[int] = None,
        generator: Optional[np.random.Generator] = None,
    ):
        if seed is not None and generator is not None:
            raise ValueError("Pass either seed or generator, not both")
        self.seed = seed
        self.generator = generator if generator is not None else np.random.default_rng(seed)

    def standard_normal(self, shape: Union[int, Tuple[int, ...]]) -> np.ndarray:
        return self.generator.standard_normal(shape)

    def __repr__(self) -> str:
        return f"NormalNoise(seed={self.seed!r})"
