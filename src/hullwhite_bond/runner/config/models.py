from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from hullwhite_bond.sde.schemas import HullWhiteConfig, SimulationGrid


# ============================================================
# Random seeds
# ============================================================


class RandomSeedConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    global_seed: Optional[int] = Field(
        default=None,
        description="Seed for the path generator; None draws fresh entropy.",
    )


# ============================================================
# Model + grid sections
# ============================================================


class HullWhiteSettings(BaseModel):
    """
    Short-rate model parameters as written in a config file.
    Only a constant mean level can be expressed here.
    """

    model_config = ConfigDict(extra="forbid")

    a: float = 0.1
    sigma: float = Field(default=0.02, ge=0.0)
    r0: float = 0.05
    theta: float = 0.0


class GridSettings(BaseModel):
    model_config = ConfigDict(extra="forbid")

    T: float = Field(default=5.0, gt=0.0, description="Horizon in years.")
    steps: int = Field(default=100, ge=1, description="Points on the rate path.")


# ============================================================
# Top-level PricingConfig
# ============================================================


class PricingConfig(BaseModel):
    """
    Global pricing run configuration.

    Defaults reproduce the demonstration run:
    a=0.1, sigma=0.02, r0=0.05, T=5, steps=100.
    """

    model_config = ConfigDict(extra="forbid")

    name: str = "default_run"

    hull_white: HullWhiteSettings = Field(default_factory=HullWhiteSettings)
    grid: GridSettings = Field(default_factory=GridSettings)
    seeds: RandomSeedConfig = Field(default_factory=RandomSeedConfig)

    face_value: float = Field(default=1.0, description="Bond notional.")
    n_paths: int = Field(default=1000, ge=1, description="Monte-Carlo paths.")

    def to_params(self) -> HullWhiteConfig:
        hw = self.hull_white
        return HullWhiteConfig(a=hw.a, sigma=hw.sigma, r0=hw.r0, theta=hw.theta)

    def to_grid(self) -> SimulationGrid:
        return SimulationGrid(T=self.grid.T, steps=self.grid.steps)
