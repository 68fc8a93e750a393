"""
Utility Functions

Provides geometry helpers, filesystem output helpers and logging setup.

Input validation lives in utils.input_validation and is imported from there
directly (it depends on models, which in turn depend on utils.geometry).
"""

from .geometry import slope_intercept, dda_steps, round_half_away_from_zero
from .image_io import build_output_name, ensure_output_dir, save_image
from .logging_config import init_logging

__all__ = [
    "slope_intercept",
    "dda_steps",
    "round_half_away_from_zero",
    "build_output_name",
    "ensure_output_dir",
    "save_image",
    "init_logging",
]
