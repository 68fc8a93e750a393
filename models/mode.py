from enum import Enum
from typing import Optional

from config import TABLE_TITLES


class Mode(Enum):
    """Rasterization strategy selected for one calculation."""

    BASIC = "basic"
    DDA = "dda"

    @property
    def label(self) -> str:
        return TABLE_TITLES[self.value]

    @classmethod
    def parse(cls, text: str) -> "Mode":
        """
        Case-insensitive lookup by value ("basic" / "dda").
        Raises ValueError for anything else.
        """
        key = str(text).strip().lower()
        for mode in cls:
            if mode.value == key:
                return mode
        raise ValueError(f"Unknown mode: {text!r} (expected 'basic' or 'dda')")


class DisplayState(Enum):
    """
    What the display currently shows. A single value instead of two
    independent "show table" flags, so both tables can never be visible
    at once.
    """

    IDLE = "idle"
    SHOWING_BASIC = "showing_basic"
    SHOWING_DDA = "showing_dda"

    @classmethod
    def for_mode(cls, mode: Mode) -> "DisplayState":
        if mode is Mode.BASIC:
            return cls.SHOWING_BASIC
        return cls.SHOWING_DDA

    @property
    def mode(self) -> Optional[Mode]:
        match self:
            case DisplayState.SHOWING_BASIC:
                return Mode.BASIC
            case DisplayState.SHOWING_DDA:
                return Mode.DDA
            case _:
                return None

    @property
    def is_displaying(self) -> bool:
        return self is not DisplayState.IDLE
