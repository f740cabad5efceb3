from __future__ import annotations

import json
import logging
from pathlib import Path

import numpy as np
import yaml
from pydantic import ValidationError

from hullwhite_bond.runner.config.models import PricingConfig
from hullwhite_bond.sde.integrators import rng_with_seed

LOGGER = logging.getLogger(__name__)


def load_config(path: str | Path) -> PricingConfig:
    """
    Load a PricingConfig from YAML or JSON.

    Automatically validates using Pydantic v2.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file does not exist: {path}")

    text = path.read_text()

    if path.suffix.lower() not in {".yaml", ".yml", ".json"}:
        raise ValueError("Config path must be YAML or JSON.")

    try:
        if path.suffix.lower() == ".json":
            raw = json.loads(text)
        else:
            raw = yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise ValueError(f"Failed to parse config: {e}") from e

    try:
        cfg = PricingConfig.model_validate(raw or {})
    except ValidationError as e:
        raise ValueError(f"Invalid PricingConfig: {e}") from e

    LOGGER.info("Loaded config '%s' from %s", cfg.name, path)
    return cfg


def make_rng(cfg: PricingConfig) -> np.random.Generator:
    """Generator for a single-path run, seeded from cfg.seeds.global_seed."""
    return rng_with_seed(cfg.seeds.global_seed)
