"""
Coordinator and trigger surface.

    Coordinator        : picks the rasterizer for a Mode and forwards the
                         resulting points to the display collaborator.
    CalculatorSession  : the "Calculate" / "Clear" actions over four raw
                         input fields and a selected mode.

State (held by the display):

    IDLE ──calculate──▶ SHOWING_BASIC / SHOWING_DDA
      ▲                          │
      └──────────clear───────────┘

Editing an input does not clear what is shown; only clear() does.
"""

import logging
from typing import Dict, Optional

from config import get_active_params
from models.errors import DegenerateSegment, PrecisionLoss
from models.mode import DisplayState, Mode
from models.point import PointSequence
from models.segment import Segment
from rasterizers import get_rasterizer
from utils.input_validation import FIELD_NAMES, parse_segment
from visualization.display import ResultsDisplay

logger = logging.getLogger(__name__)


class Coordinator:

    def __init__(self, display: Optional[ResultsDisplay] = None):
        self.display = display if display is not None else ResultsDisplay()

    @property
    def state(self) -> DisplayState:
        return self.display.state

    def calculate(self, segment: Segment, mode: Mode) -> PointSequence:
        """
        Rasterize `segment` with `mode` and show the result.

        DegenerateSegment and PrecisionLoss propagate; the display keeps what
        it showed before and no partial sequence is produced.
        """
        rasterizer = get_rasterizer(mode)
        try:
            points = rasterizer.compute(segment)
        except (DegenerateSegment, PrecisionLoss) as e:
            logger.warning("Calculation aborted: %s", e)
            raise

        self.display.show(mode, points)
        return points

    def clear(self):
        self.display.clear()


class CalculatorSession:
    """
    Four raw coordinate fields plus the selected mode, and the two user
    actions that act on them.
    """

    def __init__(self, coordinator: Optional[Coordinator] = None, mode: Optional[Mode] = None):
        self.coordinator = coordinator if coordinator is not None else Coordinator()
        self.mode = mode if mode is not None else Mode.parse(get_active_params()["DEFAULT_MODE"])
        self.fields: Dict[str, str] = {name: "" for name in FIELD_NAMES}
        # segment behind the currently displayed result
        self.last_segment: Optional[Segment] = None

    def set_field(self, name: str, value):
        if name not in self.fields:
            raise KeyError(f"Unknown field {name!r}, expected one of {', '.join(FIELD_NAMES)}")
        self.fields[name] = value

    def set_fields(self, **values):
        for name, value in values.items():
            self.set_field(name, value)

    def set_mode(self, mode):
        self.mode = mode if isinstance(mode, Mode) else Mode.parse(mode)

    def calculate(self) -> PointSequence:
        """
        "Calculate" action: validate, parse and rasterize the current fields.

        Raises MissingInput / NonFiniteInput before any rasterization, or
        DegenerateSegment / PrecisionLoss from the rasterizer.
        """
        segment = parse_segment(self.fields)
        points = self.coordinator.calculate(segment, self.mode)
        self.last_segment = segment
        return points

    def clear(self):
        """The "Clear" action: empty every field and the display."""
        self.fields = {name: "" for name in FIELD_NAMES}
        self.last_segment = None
        self.coordinator.clear()

    @property
    def state(self) -> DisplayState:
        return self.coordinator.state
