"""
Input validation for the four coordinate fields.

This module provides:
    • FIELD_NAMES
    • validate_inputs(fields)
    • missing_fields(fields)
    • parse_coordinate(name, raw)
    • parse_segment(fields)

Fields arrive as raw form/CLI text (or already-numeric values). Emptiness is
checked first (MissingInput), numeric validity second (NonFiniteInput).
"""

import logging
import math
from typing import List, Mapping

from models.errors import MissingInput, NonFiniteInput
from models.segment import Segment

logger = logging.getLogger(__name__)

FIELD_NAMES = ("x1", "y1", "x2", "y2")


# -------------------------------------------------------------------------
#  PRESENCE
# -------------------------------------------------------------------------

def _is_blank(raw) -> bool:
    if raw is None:
        return True
    if isinstance(raw, str):
        return raw.strip() == ""
    return False


def missing_fields(fields: Mapping) -> List[str]:
    """Names of the coordinate fields that are absent or blank, in form order."""
    return [name for name in FIELD_NAMES if _is_blank(fields.get(name))]


def validate_inputs(fields: Mapping) -> bool:
    """True when all four fields are filled in."""
    return not missing_fields(fields)


# -------------------------------------------------------------------------
#  PARSING
# -------------------------------------------------------------------------

def parse_coordinate(name: str, raw) -> float:
    """
    Convert one field to a finite float.

    Malformed text, NaN and ±infinity raise NonFiniteInput.
    """
    try:
        value = float(raw.strip() if isinstance(raw, str) else raw)
    except (TypeError, ValueError):
        raise NonFiniteInput(name, raw) from None

    if not math.isfinite(value):
        raise NonFiniteInput(name, raw)
    return value


def parse_segment(fields: Mapping) -> Segment:
    """
    Build a Segment from a mapping with keys x1, y1, x2, y2.

    Raises:
        MissingInput:   one or more fields empty (no parsing attempted)
        NonFiniteInput: a field is not a finite number
    """
    missing = missing_fields(fields)
    if missing:
        logger.info("Calculation rejected, missing fields: %s", ", ".join(missing))
        raise MissingInput(missing)

    values = [parse_coordinate(name, fields[name]) for name in FIELD_NAMES]
    return Segment(*values)
