"""
Visualization Tools

Display collaborator for rasterization results:
- Line chart rendering (OpenCV on numpy canvases)
- Mode-keyed result tables
- Output saving (chart image + CSV)
"""

from .chart import LineChart
from .results_table import format_results_table, table_rows
from .display import ResultsDisplay
from .save_outputs import save_all_outputs, save_chart, save_table

__all__ = [
    "LineChart",
    "format_results_table",
    "table_rows",
    "ResultsDisplay",
    "save_all_outputs",
    "save_chart",
    "save_table",
]
