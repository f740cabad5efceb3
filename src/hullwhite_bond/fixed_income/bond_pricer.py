from __future__ import annotations

import logging
from typing import Sequence

import numpy as np
import pandas as pd

from hullwhite_bond.errors import LengthMismatch
from hullwhite_bond.sde.processes.hull_white import simulate_rate_path
from hullwhite_bond.sde.schemas import HullWhiteConfig, RandomSource, SimulationGrid
from hullwhite_bond.sde.validation import validate_face_value, validate_grid

LOGGER = logging.getLogger(__name__)


def _as_path(path: Sequence[float] | np.ndarray, grid: SimulationGrid) -> np.ndarray:
    rates = np.asarray(path, dtype=float)
    if rates.ndim != 1:
        raise LengthMismatch(f"rate path must be 1D (got shape {rates.shape})")
    if rates.shape[0] != grid.steps:
        raise LengthMismatch(
            f"rate path has {rates.shape[0]} points but grid has {grid.steps} steps"
        )
    return rates


# ------------------------------------------------------------
# Running discount factor along a rate path.
# Element i is prod_{j<=i} exp(-r_j * dt); the last element is the
# unit zero-coupon price. Left-endpoint rule, no bias correction.
# ------------------------------------------------------------
def discount_curve(
    path: Sequence[float] | np.ndarray, grid: SimulationGrid
) -> np.ndarray:
    validate_grid(grid)
    rates = _as_path(path, grid)

    # extreme negative rates may overflow to inf, and inf followed by an
    # underflowed 0 gives nan; both are returned as-is
    with np.errstate(over="ignore", invalid="ignore"):
        factors = np.exp(-rates * grid.dt)
        return np.cumprod(factors)


def price_from_path(
    path: Sequence[float] | np.ndarray,
    grid: SimulationGrid,
    face_value: float = 1.0,
) -> float:
    """
    Present value of a zero-coupon bond paying face_value at grid.T,
    discounted along a single simulated short-rate path.

    This is one Monte-Carlo draw, not an expectation. Average over
    independent paths (see monte_carlo_price) for an unbiased estimate.
    """
    validate_face_value(face_value)
    df = discount_curve(path, grid)
    return float(face_value * df[-1])


def price_zero_coupon_bond(
    params: HullWhiteConfig,
    grid: SimulationGrid,
    rng: RandomSource,
    face_value: float = 1.0,
) -> float:
    """Simulate one short-rate path on grid and price the bond along it."""
    validate_face_value(face_value)
    path = simulate_rate_path(params, grid, rng)
    price = price_from_path(path, grid, face_value=face_value)
    LOGGER.debug("Single-path zero-coupon price: %.8f", price)
    return price


def path_frame(path: Sequence[float] | np.ndarray, grid: SimulationGrid) -> pd.DataFrame:
    """
    Tabulate a rate path for inspection.

    Columns: time (start of each sub-interval), short_rate,
    discount_factor (running discount after that sub-interval).
    """
    df = discount_curve(path, grid)
    return pd.DataFrame(
        {
            "time": grid.times,
            "short_rate": np.asarray(path, dtype=float),
            "discount_factor": df,
        }
    )
