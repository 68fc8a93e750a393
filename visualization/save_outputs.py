"""
Centralized output-saving utilities.

This module provides:
    • save_chart(...)
    • save_table(...)
    • save_all_outputs(...)

Uses the chart renderer for images and numpy for the CSV tables.
"""

import logging
import os
from typing import Dict

import numpy as np

from models.mode import Mode
from models.point import PointSequence
from utils.image_io import ensure_output_dir, save_image
from visualization.chart import LineChart
from visualization.display import ResultsDisplay

logger = logging.getLogger(__name__)


# -------------------------------------------------------------------------
#   Save individual components
# -------------------------------------------------------------------------

def save_chart(path: str, chart: LineChart):
    """
    Render the chart and write it as an image.
    """
    save_image(path, chart.render())


def save_table(path: str, mode: Mode, points: PointSequence):
    """
    Write the point table as CSV with an "x,y" header.
    DDA points are written as integers.
    """
    ensure_output_dir(os.path.dirname(path))
    fmt = "%d" if mode is Mode.DDA else "%.10g"
    np.savetxt(path, points.as_array(), fmt=fmt, delimiter=",", header="x,y", comments="")


# -------------------------------------------------------------------------
#   Master save function (used by main.py)
# -------------------------------------------------------------------------

def save_all_outputs(output_dir: str, run_id: str, display: ResultsDisplay) -> Dict[str, str]:
    """
    Saves every output artifact of the currently displayed result.

    Example output:
        <run_id>_chart.png
        <run_id>_points.csv

    Returns the written paths keyed by "chart" / "table"; nothing is written
    while the display is idle.
    """
    mode = display.visible_table
    if mode is None:
        logger.warning("Nothing displayed, no outputs saved")
        return {}

    ensure_output_dir(output_dir)

    paths = {
        "chart": os.path.join(output_dir, f"{run_id}_chart.png"),
        "table": os.path.join(output_dir, f"{run_id}_points.csv"),
    }

    # 1) Chart image
    save_chart(paths["chart"], display.chart)

    # 2) Point table
    save_table(paths["table"], mode, display.points)

    logger.info("Saved outputs for %s to %s", run_id, output_dir)
    return paths
