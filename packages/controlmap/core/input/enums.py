"""Input channel enums - control kinds and movement interpretation."""

from enum import Enum


class InputChannelType(str, Enum):
    """Kind of physical control bound to an input channel.

    Values are the tokens written to profile files and must never change.

    Attributes:
        BUTTON: Momentary or toggle button.
        KNOB: Rotary potentiometer with end stops.
        ENCODER: Endless rotary encoder reporting deltas.
        SLIDER: Linear fader.
        NEXT_PAGE: Switches the surface to its next page.
        PREV_PAGE: Switches the surface to its previous page.
        PAGE_SET: Selects a page directly.
        NO_TYPE: Unknown or unset type.
    """

    BUTTON = "Button"
    KNOB = "Knob"
    ENCODER = "Encoder"
    SLIDER = "Slider"
    NEXT_PAGE = "Next Page"
    PREV_PAGE = "Previous Page"
    PAGE_SET = "Page Set"
    NO_TYPE = "None"


class MovementType(str, Enum):
    """How a continuous control reports its position."""

    ABSOLUTE = "Absolute"
    RELATIVE = "Relative"
