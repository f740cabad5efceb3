import math

from hullwhite_bond.errors import InvalidParameter
from hullwhite_bond.sde.schemas import HullWhiteConfig
from hullwhite_bond.sde.validation import validate_face_value, validate_model


def analytic_zero_coupon_price(
    params: HullWhiteConfig, maturity: float, face_value: float = 1.0
) -> float:
    """
    Closed-form zero-coupon price for a constant mean level theta:

        B = (1 - e^{-a T}) / a
        ln A = (theta - sigma^2 / (2 a^2)) (B - T) - sigma^2 B^2 / (4 a)
        P = face * A * exp(-B r0)

    Reference value for the Monte-Carlo estimator; needs a > 0.
    """
    validate_model(params)
    validate_face_value(face_value)
    if callable(params.theta):
        raise InvalidParameter("closed-form price needs a constant theta")
    if params.a <= 0:
        raise InvalidParameter(f"a must be positive (got {params.a})")
    if not math.isfinite(maturity) or maturity <= 0:
        raise InvalidParameter(f"maturity must be positive (got {maturity})")

    a, sigma, theta = params.a, params.sigma, params.theta
    B = (1.0 - math.exp(-a * maturity)) / a
    log_A = (theta - sigma**2 / (2.0 * a**2)) * (B - maturity) - sigma**2 * B**2 / (
        4.0 * a
    )
    return face_value * math.exp(log_A - B * params.r0)
