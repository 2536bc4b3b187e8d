"""Content density resolver - maps a child's age to a tier and its style config."""

import logging
from functools import lru_cache
from pathlib import Path

from kidstory_ai.config import load_yaml_config
from kidstory_ai.models import DensityConfig, DensityTier

logger = logging.getLogger(__name__)

MIN_AGE = 3
MAX_AGE = 12
DEFAULT_TABLE_PATH = Path(__file__).parent / "density_tiers.yaml"


def clamp_age(age: int) -> int:
    """Clamp age into the supported [3, 12] range."""
    return max(MIN_AGE, min(MAX_AGE, int(age)))


@lru_cache
def load_density_table(table_path_str: str = "") -> dict[DensityTier, DensityConfig]:
    """
    Load tier -> config from YAML.
    Raises ValueError if a tier is missing or duplicated; that is a packaging bug.
    """
    path = Path(table_path_str) if table_path_str else DEFAULT_TABLE_PATH
    raw = load_yaml_config(path)
    table: dict[DensityTier, DensityConfig] = {}
    for entry in raw.get("tiers", []):
        config = DensityConfig.model_validate(entry)
        if config.tier in table:
            raise ValueError(f"Duplicate density tier {config.tier.value} in {path}")
        table[config.tier] = config

    missing = set(DensityTier) - set(table)
    if missing:
        raise ValueError(f"Density table {path} missing tiers: {sorted(t.value for t in missing)}")
    return table


def density_tier(age: int) -> DensityTier:
    """Tier for an age. Bands are inclusive on their upper bound."""
    age = clamp_age(age)
    if age <= 4:
        return DensityTier.VERY_SIMPLE
    if age <= 6:
        return DensityTier.SIMPLE
    if age <= 8:
        return DensityTier.MODERATE
    if age <= 10:
        return DensityTier.ADVANCED
    return DensityTier.PRETEEN


def density_config(tier: DensityTier) -> DensityConfig:
    """Static lookup; every tier has exactly one config."""
    return load_density_table()[tier]


def config_for_age(age: int) -> DensityConfig:
    return density_config(density_tier(age))
