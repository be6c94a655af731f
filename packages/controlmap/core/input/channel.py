"""Input channel model - configuration of one physical control.

An ``InputChannel`` describes how a button, knob, encoder, slider or page
control of an input device behaves inside an input profile. The owning profile
keys channels by number; the record itself carries no number.
"""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from controlmap.core.formats.qlc import channel_codec
from controlmap.core.input.enums import InputChannelType, MovementType
from controlmap.core.input.taxonomy import icon_resource
from controlmap.core.parsers.cursor import XMLReader, XMLWriter
from controlmap.core.utils.parsing import UINT8_MAX

DEFAULT_MOVEMENT_SENSITIVITY = 20
ENCODER_MOVEMENT_SENSITIVITY = 1

FeedbackValue = Annotated[int, Field(ge=0, le=UINT8_MAX)]
_feedback_value = TypeAdapter(FeedbackValue)


def default_sensitivity(channel_type: InputChannelType | str) -> int:
    """Sensitivity a channel gets when its type is assigned."""
    if channel_type == InputChannelType.ENCODER:
        return ENCODER_MOVEMENT_SENSITIVITY
    return DEFAULT_MOVEMENT_SENSITIVITY


class InputChannel(BaseModel):
    """Configuration of a single input channel.

    Assigning ``type`` (directly or through ``set_type``) resets
    ``movement_sensitivity`` to that type's default: 1 for encoders, 20 for
    everything else. Assigning ``movement_sensitivity`` afterwards overrides it.

    The feedback range is stored for every type but only written to profile
    files for buttons. ``lower_value <= upper_value`` is not enforced.

    Example:
        >>> channel = InputChannel(name="Jog")
        >>> channel.type = InputChannelType.ENCODER
        >>> channel.movement_sensitivity
        1
    """

    model_config = ConfigDict(validate_assignment=True)

    name: str = Field(default="", description="Display name")
    type: InputChannelType = Field(default=InputChannelType.BUTTON, description="Control kind")
    movement_type: MovementType = Field(
        default=MovementType.ABSOLUTE, description="Absolute position or relative delta"
    )
    movement_sensitivity: int = Field(
        default=DEFAULT_MOVEMENT_SENSITIVITY, description="Scale applied to relative deltas"
    )
    send_extra_press: bool = Field(
        default=False, description="Emit an additional synthetic press event"
    )
    lower_value: FeedbackValue = Field(default=0, description="Lower feedback value")
    upper_value: FeedbackValue = Field(default=UINT8_MAX, description="Upper feedback value")

    def __init__(self, **data: Any) -> None:
        # A type given without a sensitivity gets the type's default
        if "type" in data and "movement_sensitivity" not in data:
            data["movement_sensitivity"] = default_sensitivity(data["type"])
        super().__init__(**data)

    def __setattr__(self, name: str, value: Any) -> None:
        super().__setattr__(name, value)
        if name == "type":
            super().__setattr__("movement_sensitivity", default_sensitivity(self.type))

    # ------------------------------------------------------------------
    # Mutators
    # ------------------------------------------------------------------

    def set_type(self, channel_type: InputChannelType) -> None:
        """Set the channel type and reset sensitivity to the type's default."""
        self.type = channel_type

    def set_range(self, lower: int, upper: int) -> None:
        """Set both feedback bounds.

        Both values are validated before either is stored.

        Raises:
            pydantic.ValidationError: If a bound is outside 0..255
        """
        lower = _feedback_value.validate_python(lower)
        upper = _feedback_value.validate_python(upper)
        self.lower_value = lower
        self.upper_value = upper

    def create_copy(self) -> InputChannel:
        """Return an independent copy of this channel."""
        return self.model_copy(deep=True)

    def icon_resource(self, svg: bool = True) -> str:
        """Icon resource identifier for this channel's type."""
        return icon_resource(self.type, svg=svg)

    # ------------------------------------------------------------------
    # Load & save
    # ------------------------------------------------------------------

    def load_xml(self, reader: XMLReader) -> None:
        """Update this channel from a ``<Channel>`` element.

        Raises:
            ChannelTagMismatchError: If the reader is on another element
        """
        channel_codec.load_channel(self, reader)

    def save_xml(self, writer: XMLWriter | None, channel_number: int) -> None:
        """Write this channel as ``<Channel Number="channel_number">``.

        Raises:
            UnwritableDestinationError: If the writer is missing or closed
        """
        channel_codec.save_channel(self, writer, channel_number)
