"""Input channel and input profile models."""

from controlmap.core.input.channel import (
    DEFAULT_MOVEMENT_SENSITIVITY,
    ENCODER_MOVEMENT_SENSITIVITY,
    InputChannel,
)
from controlmap.core.input.enums import InputChannelType, MovementType
from controlmap.core.input.errors import (
    ChannelTagMismatchError,
    InputChannelError,
    UnwritableDestinationError,
)
from controlmap.core.input.profile import InputProfile, InputProfileType
from controlmap.core.input.taxonomy import (
    icon_resource,
    string_to_icon_resource,
    string_to_type,
    type_to_string,
    types,
)

__all__ = [
    "DEFAULT_MOVEMENT_SENSITIVITY",
    "ENCODER_MOVEMENT_SENSITIVITY",
    "ChannelTagMismatchError",
    "InputChannel",
    "InputChannelError",
    "InputChannelType",
    "InputProfile",
    "InputProfileType",
    "MovementType",
    "UnwritableDestinationError",
    "icon_resource",
    "string_to_icon_resource",
    "string_to_type",
    "type_to_string",
    "types",
]
