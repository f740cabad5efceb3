from __future__ import annotations

from typing import Callable, Optional, Protocol, Union

import numpy as np
from pydantic import BaseModel, ConfigDict, Field

MeanLevel = Union[float, Callable[[float], float]]


class RandomSource(Protocol):
    """Anything that hands out standard-normal draws (numpy Generator API)."""

    def standard_normal(self, size: Optional[int] = None) -> np.ndarray:
        ...


class HullWhiteConfig(BaseModel):
    """
    One-factor Hull-White short-rate model:

        dr_t = a (theta(t) - r_t) dt + sigma dW_t

    theta is either a constant level or a callable of time (years).
    The default of 0 keeps the rate reverting toward zero.
    """

    model_config = ConfigDict(frozen=True)

    a: float = Field(..., description="Mean-reversion speed.")
    sigma: float = Field(..., description="Short-rate volatility.")
    r0: float = Field(..., description="Initial short rate.")
    theta: MeanLevel = Field(default=0.0, description="Mean-reversion level.")

    def mean_level(self, t: float) -> float:
        if callable(self.theta):
            return float(self.theta(t))
        return float(self.theta)


class SimulationGrid(BaseModel):
    """
    Uniform time discretization shared by simulation and discounting.

    T: horizon in years
    steps: number of points on the path (path length == steps)
    """

    model_config = ConfigDict(frozen=True)

    T: float
    steps: int

    @property
    def dt(self) -> float:
        return self.T / self.steps

    @property
    def times(self) -> np.ndarray:
        return np.arange(self.steps, dtype=float) * self.dt
