"""Token and icon tables for input channel types.

Token lookups in both directions are derived from ``InputChannelType`` values,
which are the only place the file-format vocabulary is spelled out.
"""

from __future__ import annotations

from controlmap.core.input.enums import InputChannelType

_TYPES_BY_TOKEN: dict[str, InputChannelType] = {
    channel_type.value: channel_type
    for channel_type in InputChannelType
    if channel_type is not InputChannelType.NO_TYPE
}

# Menu order shown to users; unrelated to declaration order
_DISPLAY_ORDER: tuple[InputChannelType, ...] = (
    InputChannelType.SLIDER,
    InputChannelType.KNOB,
    InputChannelType.ENCODER,
    InputChannelType.BUTTON,
    InputChannelType.NEXT_PAGE,
    InputChannelType.PREV_PAGE,
    InputChannelType.PAGE_SET,
)

# Encoders share the knob artwork. Page arrows are named after the artwork, not the direction.
_ICON_BASE_NAMES: dict[InputChannelType, str] = {
    InputChannelType.BUTTON: "button",
    InputChannelType.KNOB: "knob",
    InputChannelType.ENCODER: "knob",
    InputChannelType.SLIDER: "slider",
    InputChannelType.PREV_PAGE: "forward",
    InputChannelType.NEXT_PAGE: "back",
    InputChannelType.PAGE_SET: "star",
}


def type_to_string(channel_type: InputChannelType) -> str:
    """Return the file token for a channel type.

    Example:
        >>> type_to_string(InputChannelType.NEXT_PAGE)
        'Next Page'
    """
    if isinstance(channel_type, InputChannelType):
        return channel_type.value
    return InputChannelType.NO_TYPE.value


def string_to_type(token: str) -> InputChannelType:
    """Return the channel type for a file token.

    Matching is exact and case-sensitive. Unknown tokens, including ``"None"``,
    map to ``InputChannelType.NO_TYPE``.

    Example:
        >>> string_to_type("Encoder")
        <InputChannelType.ENCODER: 'Encoder'>
        >>> string_to_type("encoder")
        <InputChannelType.NO_TYPE: 'None'>
    """
    return _TYPES_BY_TOKEN.get(token, InputChannelType.NO_TYPE)


def types() -> list[str]:
    """Return the selectable type tokens in menu order."""
    return [channel_type.value for channel_type in _DISPLAY_ORDER]


def icon_resource(channel_type: InputChannelType, svg: bool = True) -> str:
    """Return the resource identifier of the icon for a channel type.

    Args:
        channel_type: Channel type to look up
        svg: Vector variant (``qrc:/<name>.svg``) when True,
             raster variant (``:/<name>.png``) otherwise

    Returns:
        Resource identifier, or an empty string for types without an icon
    """
    base_name = _ICON_BASE_NAMES.get(channel_type)
    if base_name is None:
        return ""

    prefix = "qrc" if svg else ""
    ext = "svg" if svg else "png"
    return f"{prefix}:/{base_name}.{ext}"


def string_to_icon_resource(token: str, svg: bool = True) -> str:
    """Return the icon resource identifier for a type token."""
    return icon_resource(string_to_type(token), svg=svg)
