"""Input profile model - the channels of one input device.

A profile owns its channels exclusively, keyed by channel number.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field

from controlmap.core.input.channel import InputChannel


class InputProfileType(str, Enum):
    """Transport a profile's device is reached through."""

    MIDI = "MIDI"
    OS2L = "OS2L"
    OSC = "OSC"
    HID = "HID"
    DMX = "DMX"
    ENTTEC = "Enttec"


class InputProfile(BaseModel):
    """Input profile: device identity plus channel mappings.

    Example:
        >>> profile = InputProfile(manufacturer="Korg", model="nanoKONTROL2")
        >>> profile.insert_channel(0, InputChannel(name="Slider 1"))
        True
        >>> profile.name
        'Korg nanoKONTROL2'
    """

    manufacturer: str = Field(default="", description="Device manufacturer")
    model: str = Field(default="", description="Device model")
    type: InputProfileType = Field(default=InputProfileType.MIDI, description="Device transport")
    channels: dict[int, InputChannel] = Field(
        default_factory=dict, description="Channels keyed by channel number"
    )

    @property
    def name(self) -> str:
        return f"{self.manufacturer} {self.model}"

    def insert_channel(self, number: int, channel: InputChannel) -> bool:
        """Add ``channel`` under ``number``.

        Returns:
            False if ``number`` is already taken, True otherwise
        """
        if number in self.channels:
            return False
        self.channels[number] = channel
        return True

    def remove_channel(self, number: int) -> bool:
        """Drop the channel stored under ``number``.

        Returns:
            True if a channel was removed
        """
        return self.channels.pop(number, None) is not None

    def remap_channel(self, channel: InputChannel, number: int) -> bool:
        """Move ``channel`` (matched by identity) to ``number``.

        Returns:
            False if ``channel`` is not in this profile or ``number`` is taken
            by another channel
        """
        old_number = self.channel_number(channel)
        if old_number is None:
            return False
        if old_number == number:
            return True
        if number in self.channels:
            return False

        del self.channels[old_number]
        self.channels[number] = channel
        return True

    def channel(self, number: int) -> InputChannel | None:
        return self.channels.get(number)

    def channel_number(self, channel: InputChannel) -> int | None:
        """Number under which ``channel`` (matched by identity) is stored."""
        for number, candidate in self.channels.items():
            if candidate is channel:
                return number
        return None

    def create_copy(self) -> InputProfile:
        """Return an independent copy of this profile and all its channels."""
        return self.model_copy(deep=True)
