"""
Tests for the coordinator and the Calculate / Clear trigger surface.

Verifies:
- Dispatch by mode and hand-off to the display
- Idle ⇄ Displaying transitions
- Errors abort without touching the display
- Clear empties fields, chart and hides both tables
"""
import pytest

from models.errors import DegenerateSegment, MissingInput, NonFiniteInput
from models.mode import DisplayState, Mode
from models.segment import Segment


# ══════════════════════════════════════════════════════════════════════════
# Coordinator
# ══════════════════════════════════════════════════════════════════════════

class TestCoordinator:

    def test_initial_state_is_idle(self, coordinator):
        assert coordinator.state is DisplayState.IDLE

    def test_basic_dispatch(self, coordinator, display, diagonal):
        points = coordinator.calculate(diagonal, Mode.BASIC)
        assert list(points) == [(0, 0), (1, 1), (2, 2), (3, 3), (4, 4)]
        assert coordinator.state is DisplayState.SHOWING_BASIC
        assert display.points is points
        assert display.chart.labels == [0, 1, 2, 3, 4]

    def test_dda_dispatch(self, coordinator, display, shallow):
        points = coordinator.calculate(shallow, Mode.DDA)
        assert list(points) == [(0, 0), (1, 1), (2, 1), (3, 2), (4, 2)]
        assert coordinator.state is DisplayState.SHOWING_DDA
        assert display.chart.data == [0, 1, 1, 2, 2]

    def test_switching_mode_switches_table(self, coordinator, display, diagonal):
        coordinator.calculate(diagonal, Mode.BASIC)
        coordinator.calculate(diagonal, Mode.DDA)
        assert display.is_table_visible(Mode.DDA)
        assert not display.is_table_visible(Mode.BASIC)

    def test_degenerate_leaves_display_untouched(self, coordinator, display, diagonal, vertical):
        shown = coordinator.calculate(diagonal, Mode.BASIC)

        with pytest.raises(DegenerateSegment):
            coordinator.calculate(vertical, Mode.BASIC)

        assert coordinator.state is DisplayState.SHOWING_BASIC
        assert display.points is shown

    def test_backwards_basic_still_displays(self, coordinator, backwards):
        points = coordinator.calculate(backwards, Mode.BASIC)
        assert len(points) == 0
        assert coordinator.state is DisplayState.SHOWING_BASIC

    @pytest.mark.parametrize("mode", list(Mode))
    def test_clear_after_calculation(self, coordinator, display, diagonal, mode):
        coordinator.calculate(diagonal, mode)
        coordinator.clear()

        assert coordinator.state is DisplayState.IDLE
        assert len(display.points) == 0
        assert display.chart.labels == []
        assert display.chart.data == []
        assert not display.is_table_visible(Mode.BASIC)
        assert not display.is_table_visible(Mode.DDA)


# ══════════════════════════════════════════════════════════════════════════
# CalculatorSession (trigger surface)
# ══════════════════════════════════════════════════════════════════════════

class TestSession:

    def test_default_mode_from_config(self, session):
        assert session.mode is Mode.BASIC

    def test_calculate_from_text_fields(self, session):
        session.set_fields(x1="0", y1="0", x2="4", y2="2")
        session.set_mode("dda")
        points = session.calculate()
        assert list(points) == [(0, 0), (1, 1), (2, 1), (3, 2), (4, 2)]
        assert session.state is DisplayState.SHOWING_DDA

    def test_missing_input_not_attempted(self, session):
        session.set_fields(x1="0", y1="0", x2="4")
        with pytest.raises(MissingInput):
            session.calculate()
        assert session.state is DisplayState.IDLE

    def test_non_finite_input(self, session):
        session.set_fields(x1="0", y1="nan", x2="4", y2="2")
        with pytest.raises(NonFiniteInput):
            session.calculate()
        assert session.state is DisplayState.IDLE

    def test_unknown_field(self, session):
        with pytest.raises(KeyError):
            session.set_field("z1", "3")

    def test_editing_does_not_clear(self, session):
        session.set_fields(x1="0", y1="0", x2="4", y2="4")
        session.calculate()
        session.set_field("x2", "10")
        assert session.state is DisplayState.SHOWING_BASIC
        assert len(session.coordinator.display.points) == 5

    def test_clear_resets_fields_and_display(self, session):
        session.set_fields(x1="0", y1="0", x2="4", y2="4")
        session.calculate()
        session.clear()
        assert session.fields == {"x1": "", "y1": "", "x2": "", "y2": ""}
        assert session.state is DisplayState.IDLE

    def test_clear_when_idle_is_harmless(self, session):
        session.clear()
        assert session.state is DisplayState.IDLE

    def test_calculations_do_not_share_state(self, session):
        session.set_fields(x1="0", y1="0", x2="2", y2="2")
        first = session.calculate()
        session.set_fields(x2="3", y2="3")
        second = session.calculate()
        assert len(first) == 3
        assert len(second) == 4

    def test_last_segment_tracks_displayed_result(self, session):
        assert session.last_segment is None
        session.set_fields(x1="0", y1="0", x2="4", y2="2")
        session.calculate()
        assert session.last_segment == Segment(0, 0, 4, 2)

        session.set_fields(x1="2", y1="3", x2="2", y2="8")
        with pytest.raises(DegenerateSegment):
            session.calculate()
        assert session.last_segment == Segment(0, 0, 4, 2)

        session.clear()
        assert session.last_segment is None
