from __future__ import annotations

import logging
import math

import numpy as np

from hullwhite_bond.fixed_income.bond_pricer import price_zero_coupon_bond
from hullwhite_bond.fixed_income.schemas import MonteCarloResult
from hullwhite_bond.sde.integrators import iter_generators
from hullwhite_bond.sde.schemas import HullWhiteConfig, SimulationGrid
from hullwhite_bond.sde.validation import (
    validate_face_value,
    validate_grid,
    validate_model,
    validate_path_count,
)

LOGGER = logging.getLogger(__name__)


def monte_carlo_price(
    params: HullWhiteConfig,
    grid: SimulationGrid,
    n_paths: int,
    seed: int | None = None,
    face_value: float = 1.0,
) -> MonteCarloResult:
    """
    Average the single-path price over n_paths independent paths.

    Every path owns a generator spawned from SeedSequence(seed), so the
    estimate is reproducible for a fixed seed and paths never share draws.
    """
    validate_path_count(n_paths)
    validate_model(params)
    validate_grid(grid)
    validate_face_value(face_value)

    LOGGER.info(
        "Running Monte-Carlo pricing: n_paths=%d steps=%d T=%.4g seed=%s",
        n_paths,
        grid.steps,
        grid.T,
        seed,
    )

    prices = np.array(
        [
            price_zero_coupon_bond(params, grid, rng, face_value=face_value)
            for rng in iter_generators(seed, n_paths)
        ],
        dtype=float,
    )

    mean = float(prices.mean())
    if n_paths > 1:
        std_error = float(prices.std(ddof=1) / math.sqrt(n_paths))
    else:
        std_error = 0.0

    LOGGER.info("Monte-Carlo price %.8f (std error %.3g)", mean, std_error)
    return MonteCarloResult(price=mean, std_error=std_error, n_paths=n_paths)
