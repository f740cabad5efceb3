from __future__ import annotations

from pydantic import BaseModel, Field


class MonteCarloResult(BaseModel):
    """
    Monte-Carlo estimate of a zero-coupon bond price.

    - price: mean of the single-path prices
    - std_error: standard error of that mean (0 for a single path)
    - n_paths: number of independent paths averaged
    """

    price: float = Field(..., description="Mean discounted payoff across paths.")
    std_error: float = Field(..., description="Standard error of the mean.")
    n_paths: int = Field(..., ge=1, description="Number of simulated paths.")
