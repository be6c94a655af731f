"""Shared pytest fixtures for controlmap tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from controlmap.core.input import (
    InputChannel,
    InputChannelType,
    InputProfile,
    InputProfileType,
    MovementType,
)

# ============================================================================
# Path Fixtures
# ============================================================================


@pytest.fixture
def fixtures_dir() -> Path:
    """Get test fixtures directory."""
    return Path(__file__).parent / "fixtures"


# ============================================================================
# Model Fixtures
# ============================================================================


@pytest.fixture
def relative_slider() -> InputChannel:
    """Slider reporting relative movement with sensitivity 5."""
    channel = InputChannel(name="Fader 1", type=InputChannelType.SLIDER)
    channel.movement_type = MovementType.RELATIVE
    channel.movement_sensitivity = 5
    return channel


@pytest.fixture
def sample_profile() -> InputProfile:
    """Profile with one channel of each common kind."""
    profile = InputProfile(manufacturer="Korg", model="nanoKONTROL2", type=InputProfileType.MIDI)

    fader = InputChannel(name="Slider 1", type=InputChannelType.SLIDER)
    knob = InputChannel(name="Knob 1", type=InputChannelType.KNOB)
    knob.movement_type = MovementType.RELATIVE
    knob.movement_sensitivity = 8
    jog = InputChannel(name="Jog", type=InputChannelType.ENCODER)
    play = InputChannel(name="Play", type=InputChannelType.BUTTON, send_extra_press=True)
    play.set_range(10, 127)
    next_page = InputChannel(name="Track >", type=InputChannelType.NEXT_PAGE)

    profile.insert_channel(0, fader)
    profile.insert_channel(16, knob)
    profile.insert_channel(41, play)
    profile.insert_channel(59, next_page)
    profile.insert_channel(100, jog)
    return profile
