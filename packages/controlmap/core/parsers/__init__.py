"""XML parsing helpers."""

from controlmap.core.parsers.xml import XMLParser, local_name

__all__ = ["XMLParser", "local_name"]
