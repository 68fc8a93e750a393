"""
Filesystem utilities for the rasterization outputs.

This module provides:
    • build_output_name(mode, segment)
    • ensure_output_dir(path)
    • save_image(path, image)

Handles all filesystem interaction in a consistent, testable way.
"""

import logging
import os

import cv2
import numpy as np

logger = logging.getLogger(__name__)


# -------------------------------------------------------------------------
#  FILENAME HANDLING
# -------------------------------------------------------------------------

def build_output_name(mode, segment) -> str:
    """
    Stable base name for the files of one calculation.

    Example:
        Mode.DDA, (0, 0)→(4, 2.5) → 'dda_0_0_4_2.5'
    """
    coords = (segment.x1, segment.y1, segment.x2, segment.y2)
    return "_".join([mode.value] + [f"{c:g}" for c in coords])


# -------------------------------------------------------------------------
#  OUTPUT DIRECTORY HANDLING
# -------------------------------------------------------------------------

def ensure_output_dir(path: str):
    """
    Ensures that an output directory exists.
    """
    if path and not os.path.exists(path):
        os.makedirs(path, exist_ok=True)


# -------------------------------------------------------------------------
#  IMAGE SAVING
# -------------------------------------------------------------------------

def save_image(path: str, image: np.ndarray):
    """
    Save an image to disk, ensuring the directory exists.
    Raises OSError when OpenCV refuses to write the file.
    """
    ensure_output_dir(os.path.dirname(path))
    if not cv2.imwrite(path, image):
        raise OSError(f"Could not write image: {path}")
    logger.debug("Saved image %s (%dx%d)", path, image.shape[1], image.shape[0])
