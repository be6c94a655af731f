"""Channel codec - read and write ``<Channel>`` elements of input profiles.

Loading is lenient: unknown children are skipped, unknown type tokens become
``NO_TYPE`` and malformed numbers fall back to the parsing defaults. The only
load failure is a reader positioned on the wrong element.

Saving keeps the common case compact. An absolute button with the full
feedback range and no extra press is written as ``Name`` and ``Type`` only;
every other setting adds at most one ``Movement`` or ``Feedbacks`` child.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from controlmap.core.formats.qlc.tags import (
    CHANNEL_NAME_TAG,
    CHANNEL_NUMBER_ATTR,
    CHANNEL_TAG,
    CHANNEL_TYPE_TAG,
    EXTRA_PRESS_MARKER,
    EXTRA_PRESS_TAG,
    FEEDBACKS_TAG,
    LOWER_VALUE_ATTR,
    MOVEMENT_TAG,
    RELATIVE_MARKER,
    SENSITIVITY_ATTR,
    UPPER_VALUE_ATTR,
)
from controlmap.core.input.enums import InputChannelType, MovementType
from controlmap.core.input.errors import ChannelTagMismatchError, UnwritableDestinationError
from controlmap.core.input.taxonomy import string_to_type, type_to_string
from controlmap.core.parsers.cursor import XMLNode, XMLReader, XMLWriter
from controlmap.core.utils.logging import get_logger
from controlmap.core.utils.parsing import UINT8_MAX, parse_int, parse_uint8

if TYPE_CHECKING:
    from controlmap.core.input.channel import InputChannel

logger = get_logger(__name__)


def load_channel(channel: InputChannel, reader: XMLReader) -> None:
    """Populate ``channel`` from the element ``reader`` is positioned on.

    Args:
        channel: Record to update in place
        reader: Reader positioned on a ``<Channel>`` element

    Raises:
        ChannelTagMismatchError: If the reader is on any other element. The
            record is left untouched.
    """
    if reader.tag != CHANNEL_TAG:
        logger.warning(f"Channel node not found, got <{reader.tag}>")
        raise ChannelTagMismatchError(reader.tag, CHANNEL_TAG)

    for node in reader:
        if node.tag == CHANNEL_NAME_TAG:
            channel.name = node.text
        elif node.tag == CHANNEL_TYPE_TAG:
            channel.set_type(string_to_type(node.text))
        elif node.tag == EXTRA_PRESS_TAG:
            channel.send_extra_press = True
        elif node.tag == MOVEMENT_TAG:
            _load_movement(channel, node)
        elif node.tag == FEEDBACKS_TAG:
            _load_feedbacks(channel, node)
        else:
            logger.warning(f"Unknown input channel tag: {node.tag}")


def _load_movement(channel: InputChannel, node: XMLNode) -> None:
    if SENSITIVITY_ATTR in node.attributes:
        channel.movement_sensitivity = parse_int(node.attributes[SENSITIVITY_ATTR])

    if node.text == RELATIVE_MARKER:
        channel.movement_type = MovementType.RELATIVE


def _load_feedbacks(channel: InputChannel, node: XMLNode) -> None:
    lower = 0
    upper = UINT8_MAX

    if LOWER_VALUE_ATTR in node.attributes:
        lower = parse_uint8(node.attributes[LOWER_VALUE_ATTR])
    if UPPER_VALUE_ATTR in node.attributes:
        upper = parse_uint8(node.attributes[UPPER_VALUE_ATTR])

    channel.set_range(lower, upper)


def save_channel(channel: InputChannel, writer: XMLWriter | None, channel_number: int) -> None:
    """Write ``channel`` as a ``<Channel>`` element.

    Args:
        channel: Record to write
        writer: Destination writer
        channel_number: Index of the channel in its profile, written as the
            ``Number`` attribute

    Raises:
        UnwritableDestinationError: If ``writer`` is None or closed
    """
    if writer is None or writer.closed:
        raise UnwritableDestinationError(f"Cannot write channel {channel_number}: writer unusable")

    with writer.element(CHANNEL_TAG, {CHANNEL_NUMBER_ATTR: str(channel_number)}):
        writer.write_element(CHANNEL_NAME_TAG, text=channel.name)
        writer.write_element(CHANNEL_TYPE_TAG, text=type_to_string(channel.type))

        if channel.send_extra_press:
            writer.write_element(EXTRA_PRESS_TAG, text=EXTRA_PRESS_MARKER)

        sensitivity = {SENSITIVITY_ATTR: str(channel.movement_sensitivity)}

        if (
            channel.type in (InputChannelType.SLIDER, InputChannelType.KNOB)
            and channel.movement_type is MovementType.RELATIVE
        ):
            writer.write_element(MOVEMENT_TAG, sensitivity, text=RELATIVE_MARKER)
        elif channel.type is InputChannelType.ENCODER:
            # Encoders are relative by nature, so no marker
            writer.write_element(MOVEMENT_TAG, sensitivity)
        elif channel.type is InputChannelType.BUTTON and (
            channel.lower_value != 0 or channel.upper_value != UINT8_MAX
        ):
            feedbacks: dict[str, str] = {}
            if channel.lower_value != 0:
                feedbacks[LOWER_VALUE_ATTR] = str(channel.lower_value)
            if channel.upper_value != UINT8_MAX:
                feedbacks[UPPER_VALUE_ATTR] = str(channel.upper_value)
            writer.write_element(FEEDBACKS_TAG, feedbacks)
