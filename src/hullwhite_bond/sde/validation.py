import math
from numbers import Integral

from hullwhite_bond.errors import InvalidParameter
from hullwhite_bond.sde.schemas import HullWhiteConfig, SimulationGrid


def _require_finite(name: str, value: float) -> None:
    if not math.isfinite(value):
        raise InvalidParameter(f"{name} must be finite (got {value!r})")


def validate_model(params: HullWhiteConfig) -> None:
    """
    Reject parameters the Euler scheme cannot use.

    Only finiteness is enforced: negative rates, zero volatility and any
    sign of mean reversion are valid inputs for the recurrence.
    """
    _require_finite("a", params.a)
    _require_finite("sigma", params.sigma)
    _require_finite("r0", params.r0)
    if not callable(params.theta):
        _require_finite("theta", params.theta)


def validate_grid(grid: SimulationGrid) -> None:
    if isinstance(grid.steps, bool) or not isinstance(grid.steps, Integral):
        raise InvalidParameter(f"steps must be an integer (got {grid.steps!r})")
    if grid.steps < 1:
        raise InvalidParameter(f"steps must be >= 1 (got {grid.steps})")
    _require_finite("T", grid.T)
    if grid.T <= 0:
        raise InvalidParameter(f"T must be positive (got {grid.T})")


def validate_face_value(face_value: float) -> None:
    _require_finite("face_value", face_value)


def validate_path_count(n_paths: int) -> None:
    if isinstance(n_paths, bool) or not isinstance(n_paths, Integral):
        raise InvalidParameter(f"n_paths must be an integer (got {n_paths!r})")
    if n_paths < 1:
        raise InvalidParameter(f"n_paths must be >= 1 (got {n_paths})")
