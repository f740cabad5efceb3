"""Hull-White short-rate simulation and zero-coupon bond pricing."""

__version__ = "0.1.0"
