"""Content rules - prompt safety and age-based content density."""

from kidstory_ai.rules.density import clamp_age, config_for_age, density_config, density_tier
from kidstory_ai.rules.sanitizer import SAFE_DEFAULT_PROMPT, sanitize

__all__ = [
    "SAFE_DEFAULT_PROMPT",
    "clamp_age",
    "config_for_age",
    "density_config",
    "density_tier",
    "sanitize",
]
