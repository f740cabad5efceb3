from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from hullwhite_bond import __version__
from hullwhite_bond.fixed_income.analytic import analytic_zero_coupon_price
from hullwhite_bond.fixed_income.bond_pricer import path_frame, price_zero_coupon_bond
from hullwhite_bond.fixed_income.monte_carlo import monte_carlo_price
from hullwhite_bond.runner.config.loader import load_config, make_rng
from hullwhite_bond.runner.config.models import PricingConfig
from hullwhite_bond.sde.processes.hull_white import simulate_rate_path

LOGGER = logging.getLogger(__name__)


# ============================================================
# Config resolution: file (or defaults) + command-line overrides
# ============================================================


def _resolve_config(args) -> PricingConfig:
    cfg = load_config(args.config) if args.config else PricingConfig()

    model_updates = {
        k: v
        for k, v in (
            ("a", args.a),
            ("sigma", args.sigma),
            ("r0", args.r0),
            ("theta", args.theta),
        )
        if v is not None
    }
    grid_updates = {
        k: v for k, v in (("T", args.T), ("steps", args.steps)) if v is not None
    }

    raw = cfg.model_dump()
    raw["hull_white"].update(model_updates)
    raw["grid"].update(grid_updates)
    if args.seed is not None:
        raw["seeds"]["global_seed"] = args.seed
    if args.face_value is not None:
        raw["face_value"] = args.face_value
    if getattr(args, "n_paths", None) is not None:
        raw["n_paths"] = args.n_paths

    # overrides go through the same field constraints as a config file
    try:
        return PricingConfig.model_validate(raw)
    except ValidationError as e:
        raise ValueError(f"Invalid PricingConfig: {e}") from e


# ============================================================
# Command: price
# ============================================================


def cmd_price(args):
    cfg = _resolve_config(args)
    LOGGER.info("Pricing zero-coupon bond on a single path (%s)", cfg.name)
    price = price_zero_coupon_bond(
        cfg.to_params(), cfg.to_grid(), make_rng(cfg), face_value=cfg.face_value
    )
    print(f"Zero-coupon bond price: {price:.6f}")


# ============================================================
# Command: mc
# ============================================================


def cmd_mc(args):
    cfg = _resolve_config(args)
    result = monte_carlo_price(
        cfg.to_params(),
        cfg.to_grid(),
        n_paths=cfg.n_paths,
        seed=cfg.seeds.global_seed,
        face_value=cfg.face_value,
    )
    print(f"Monte-Carlo price: {result.price:.6f}")
    print(f"Std error:         {result.std_error:.6f}")
    print(f"Paths:             {result.n_paths}")


# ============================================================
# Command: analytic
# ============================================================


def cmd_analytic(args):
    cfg = _resolve_config(args)
    price = analytic_zero_coupon_price(
        cfg.to_params(), cfg.grid.T, face_value=cfg.face_value
    )
    print(f"Closed-form price: {price:.6f}")


# ============================================================
# Command: simulate
# ============================================================


def cmd_simulate(args):
    cfg = _resolve_config(args)
    grid = cfg.to_grid()
    path = simulate_rate_path(cfg.to_params(), grid, make_rng(cfg))
    frame = path_frame(path, grid)

    if args.out:
        out = Path(args.out)
        out.parent.mkdir(parents=True, exist_ok=True)
        frame.to_csv(out, index=False)
        print(f"[hwbond] Rate path written to {out}")
    else:
        print(frame.to_string(index=False))


# ============================================================
# Command: version
# ============================================================


def cmd_version(args):
    print(__version__)


# ============================================================
# Main CLI
# ============================================================


def _add_model_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--config", default=None, help="Path to config JSON/YAML")
    p.add_argument("--a", type=float, default=None, help="Mean-reversion speed")
    p.add_argument("--sigma", type=float, default=None, help="Volatility")
    p.add_argument("--r0", type=float, default=None, help="Initial short rate")
    p.add_argument("--theta", type=float, default=None, help="Mean-reversion level")
    p.add_argument("--T", type=float, default=None, help="Horizon in years")
    p.add_argument("--steps", type=int, default=None, help="Points on the path")
    p.add_argument("--seed", type=int, default=None, help="Random seed")
    p.add_argument("--face-value", type=float, default=None, help="Bond notional")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hwbond", description="Hull-White zero-coupon bond pricer"
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    # ------------------------------------------------------------------
    # price
    # ------------------------------------------------------------------
    p_price = sub.add_parser("price", help="Price a bond along one simulated path")
    _add_model_args(p_price)
    p_price.set_defaults(func=cmd_price)

    # ------------------------------------------------------------------
    # mc
    # ------------------------------------------------------------------
    p_mc = sub.add_parser("mc", help="Average the price over many paths")
    _add_model_args(p_mc)
    p_mc.add_argument("--n-paths", type=int, default=None, help="Number of paths")
    p_mc.set_defaults(func=cmd_mc)

    # ------------------------------------------------------------------
    # analytic
    # ------------------------------------------------------------------
    p_an = sub.add_parser("analytic", help="Closed-form price for constant theta")
    _add_model_args(p_an)
    p_an.set_defaults(func=cmd_analytic)

    # ------------------------------------------------------------------
    # simulate
    # ------------------------------------------------------------------
    p_sim = sub.add_parser("simulate", help="Simulate and print one rate path")
    _add_model_args(p_sim)
    p_sim.add_argument("--out", default=None, help="Write the path to this CSV")
    p_sim.set_defaults(func=cmd_simulate)

    # ------------------------------------------------------------------
    # version
    # ------------------------------------------------------------------
    p_ver = sub.add_parser("version", help="Show version")
    p_ver.set_defaults(func=cmd_version)

    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        args.func(args)
    except (FileNotFoundError, ValueError) as e:
        print(f"[hwbond] error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
