"""Input profile parser - read QLC+ ``.qxi`` files into InputProfile models."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from pathlib import Path

from controlmap.core.formats.qlc.tags import (
    CHANNEL_NUMBER_ATTR,
    CHANNEL_TAG,
    CREATOR_TAG,
    MANUFACTURER_TAG,
    MODEL_TAG,
    PROFILE_TAG,
    PROFILE_TYPE_TAG,
)
from controlmap.core.input.channel import InputChannel
from controlmap.core.input.errors import ChannelTagMismatchError
from controlmap.core.input.profile import InputProfile, InputProfileType
from controlmap.core.parsers.cursor import ElementReader, XMLNode
from controlmap.core.parsers.xml import XMLParser
from controlmap.core.utils.logging import get_logger
from controlmap.core.utils.parsing import parse_int

logger = get_logger(__name__)


class InputProfileParser:
    """Parser for input profile documents.

    Unknown elements are skipped so files written by newer releases or other
    tools still load. A channel that fails to load is dropped and the
    remaining channels are kept.

    Example:
        >>> parser = InputProfileParser()
        >>> profile = parser.parse("Korg-nanoKONTROL2.qxi")
        >>> print(f"{profile.name}: {len(profile.channels)} channels")
    """

    def __init__(self):
        """Initialize input profile parser."""
        self._xml_parser = XMLParser()

    def parse(self, file_path: Path | str) -> InputProfile:
        """Parse input profile file from disk.

        Args:
            file_path: Path to .qxi file

        Returns:
            Parsed InputProfile model

        Raises:
            FileNotFoundError: If file doesn't exist
            ValueError: If XML is invalid or the root is not an input profile
        """
        file_path = Path(file_path)

        logger.debug(f"Parsing input profile: {file_path}")
        tree = self._xml_parser.parse(file_path)
        return self._parse_root(tree.getroot())

    def parse_string(self, xml_content: str) -> InputProfile:
        """Parse input profile from XML string.

        Raises:
            ValueError: If XML is invalid or the root is not an input profile
        """
        logger.debug("Parsing input profile from string")
        return self._parse_root(self._xml_parser.parse_string(xml_content))

    def _parse_root(self, root: ET.Element | None) -> InputProfile:
        if root is None:
            raise ValueError("XML tree has no root element")

        reader = ElementReader(root)
        if reader.tag != PROFILE_TAG:
            raise ValueError(f"Input profile node not found, got <{reader.tag}>")

        profile = InputProfile()
        for node in reader:
            if node.tag == CREATOR_TAG:
                # Creator describes the writing tool, not the device
                continue
            elif node.tag == MANUFACTURER_TAG:
                profile.manufacturer = node.text
            elif node.tag == MODEL_TAG:
                profile.model = node.text
            elif node.tag == PROFILE_TYPE_TAG:
                profile.type = self._parse_profile_type(node.text)
            elif node.tag == CHANNEL_TAG:
                self._parse_channel(profile, node)
            else:
                logger.debug(f"Skipping unknown input profile tag: {node.tag}")

        logger.debug(f"Loaded input profile {profile.name!r} with {len(profile.channels)} channels")
        return profile

    def _parse_profile_type(self, text: str) -> InputProfileType:
        try:
            return InputProfileType(text)
        except ValueError:
            logger.warning(f"Unknown input profile type {text!r}, assuming MIDI")
            return InputProfileType.MIDI

    def _parse_channel(self, profile: InputProfile, node: XMLNode) -> None:
        number = parse_int(node.attributes.get(CHANNEL_NUMBER_ATTR), default=-1)
        if number < 0:
            logger.warning(f"Skipping channel without a valid number: {dict(node.attributes)}")
            return

        channel = InputChannel()
        try:
            channel.load_xml(node.reader())
        except ChannelTagMismatchError as e:
            logger.warning(f"Skipping channel {number}: {e}")
            return

        if not profile.insert_channel(number, channel):
            logger.warning(f"Duplicate channel number {number}, keeping the first definition")
