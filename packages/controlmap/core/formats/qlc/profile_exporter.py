"""Input profile exporter - write InputProfile models to QLC+ ``.qxi`` files."""

from __future__ import annotations

from pathlib import Path

from controlmap.core.config.models import CreatorConfig, XMLOutputConfig
from controlmap.core.formats.qlc.tags import (
    CREATOR_AUTHOR_TAG,
    CREATOR_NAME_TAG,
    CREATOR_TAG,
    CREATOR_VERSION_TAG,
    MANUFACTURER_TAG,
    MODEL_TAG,
    PROFILE_DOCTYPE,
    PROFILE_NAMESPACE,
    PROFILE_TAG,
    PROFILE_TYPE_TAG,
)
from controlmap.core.input.profile import InputProfile
from controlmap.core.parsers.cursor import ElementTreeWriter
from controlmap.core.utils.logging import get_logger

logger = get_logger(__name__)


class InputProfileExporter:
    """Exporter for input profile documents.

    Channels are written in ascending channel number order.

    Example:
        >>> exporter = InputProfileExporter()
        >>> exporter.export(profile, "Korg-nanoKONTROL2.qxi")
    """

    def __init__(
        self,
        output_config: XMLOutputConfig | None = None,
        creator: CreatorConfig | None = None,
    ):
        self._output_config = output_config or XMLOutputConfig()
        self._creator = creator or CreatorConfig()

    def export(self, profile: InputProfile, file_path: Path | str) -> None:
        """Export profile to file.

        Args:
            profile: InputProfile model to export
            file_path: Path to output .qxi file
        """
        file_path = Path(file_path)

        # Create parent directories if needed
        file_path.parent.mkdir(parents=True, exist_ok=True)

        logger.debug(f"Exporting input profile to: {file_path}")

        document = self.to_string(profile)
        file_path.write_text(document, encoding=self._output_config.encoding)

        logger.debug(f"Successfully exported input profile to {file_path}")

    def to_string(self, profile: InputProfile) -> str:
        """Serialize profile to a complete XML document."""
        writer = ElementTreeWriter()
        self._write_profile(profile, writer)
        writer.close()

        body = writer.to_string(
            pretty=self._output_config.pretty, indent=self._output_config.indent
        )
        header = (
            f'<?xml version="1.0" encoding="{self._output_config.encoding}"?>\n'
            f"<!DOCTYPE {PROFILE_DOCTYPE}>\n"
        )
        return header + body + "\n"

    def _write_profile(self, profile: InputProfile, writer: ElementTreeWriter) -> None:
        with writer.element(PROFILE_TAG, {"xmlns": PROFILE_NAMESPACE}):
            with writer.element(CREATOR_TAG):
                writer.write_element(CREATOR_NAME_TAG, text=self._creator.name)
                writer.write_element(CREATOR_VERSION_TAG, text=self._creator.version)
                writer.write_element(CREATOR_AUTHOR_TAG, text=self._creator.author)

            writer.write_element(MANUFACTURER_TAG, text=profile.manufacturer)
            writer.write_element(MODEL_TAG, text=profile.model)
            writer.write_element(PROFILE_TYPE_TAG, text=profile.type.value)

            for number in sorted(profile.channels):
                profile.channels[number].save_xml(writer, number)
