from __future__ import annotations

import logging
import math

import numpy as np

from hullwhite_bond.sde.integrators import euler_maruyama_step
from hullwhite_bond.sde.schemas import HullWhiteConfig, RandomSource, SimulationGrid
from hullwhite_bond.sde.validation import validate_grid, validate_model

LOGGER = logging.getLogger(__name__)


def simulate_rate_path(
    params: HullWhiteConfig, grid: SimulationGrid, rng: RandomSource
) -> np.ndarray:
    """
    Euler-Maruyama discretization for the Hull-White short rate:
        r_i = r_{i-1} + a (theta(t_{i-1}) - r_{i-1}) dt + sigma sqrt(dt) z_i

    Returns a read-only array of length grid.steps with path[0] == r0.
    Draws exactly grid.steps - 1 standard normals from rng.
    """
    validate_model(params)
    validate_grid(grid)

    n_steps = grid.steps
    dt = grid.dt
    sqrt_dt = math.sqrt(dt)

    R = np.empty(n_steps, dtype=float)
    R[0] = params.r0

    if n_steps > 1:
        z = np.asarray(rng.standard_normal(n_steps - 1), dtype=float)
        for i in range(1, n_steps):
            drift = params.a * (params.mean_level((i - 1) * dt) - R[i - 1])
            R[i] = euler_maruyama_step(
                R[i - 1], drift, params.sigma, dt, z[i - 1] * sqrt_dt
            )

    LOGGER.debug(
        "Simulated Hull-White path: steps=%d dt=%.6g r_last=%.6g",
        n_steps,
        dt,
        R[-1],
    )
    R.flags.writeable = False
    return R
