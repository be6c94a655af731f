"""Cursor-style XML reader and writer.

Codecs see XML through two small capability interfaces:

- ``XMLReader``: the element the reader is positioned on, plus its direct
  children visited one at a time (``next_child()`` or iteration).
- ``XMLWriter``: ``write_element()`` for leaf elements and the scoped
  ``element()`` context manager for elements with attributes or children.

``ElementReader`` and ``ElementTreeWriter`` implement them on top of ElementTree.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from collections.abc import Iterator, Mapping
from contextlib import AbstractContextManager, contextmanager
from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable

from controlmap.core.parsers.xml import local_name


@dataclass(frozen=True)
class XMLNode:
    """One child element as seen by a reader.

    Attributes:
        tag: Tag name without namespace
        attributes: Attribute names (without namespace) to values
        text: Leading text of the element, empty when absent
        element: Underlying element, for descending into nested content
    """

    tag: str
    attributes: Mapping[str, str] = field(default_factory=dict)
    text: str = ""
    element: ET.Element | None = field(default=None, compare=False, repr=False)

    def reader(self) -> ElementReader:
        """Open a reader positioned on this node."""
        if self.element is None:
            raise ValueError(f"<{self.tag}> has no backing element")
        return ElementReader(self.element)


@runtime_checkable
class XMLReader(Protocol):
    """Reader positioned on the start of an element."""

    @property
    def tag(self) -> str: ...

    @property
    def attributes(self) -> Mapping[str, str]: ...

    def next_child(self) -> XMLNode | None: ...

    def __iter__(self) -> Iterator[XMLNode]: ...


@runtime_checkable
class XMLWriter(Protocol):
    """Writer appending elements at the current position."""

    @property
    def closed(self) -> bool: ...

    def write_element(
        self, tag: str, attributes: Mapping[str, str] | None = None, text: str | None = None
    ) -> None: ...

    def write_text(self, text: str) -> None: ...

    def element(
        self, tag: str, attributes: Mapping[str, str] | None = None
    ) -> AbstractContextManager[object]: ...


def _strip_attributes(attrib: Mapping[str, str]) -> dict[str, str]:
    return {local_name(key): value for key, value in attrib.items()}


class ElementReader:
    """``XMLReader`` over an ElementTree element.

    Each direct child is returned exactly once, in document order.

    Example:
        >>> root = ET.fromstring('<Channel Number="3"><Name>Fader 1</Name></Channel>')
        >>> reader = ElementReader(root)
        >>> reader.tag, reader.attributes["Number"]
        ('Channel', '3')
        >>> [node.text for node in reader]
        ['Fader 1']
    """

    def __init__(self, element: ET.Element):
        self._element = element
        self._children = iter(list(element))

    @property
    def tag(self) -> str:
        return local_name(self._element.tag)

    @property
    def attributes(self) -> dict[str, str]:
        return _strip_attributes(self._element.attrib)

    @property
    def text(self) -> str:
        return self._element.text or ""

    @property
    def element(self) -> ET.Element:
        return self._element

    def next_child(self) -> XMLNode | None:
        """Advance to the next direct child, or return None when exhausted."""
        child = next(self._children, None)
        if child is None:
            return None
        return XMLNode(
            tag=local_name(child.tag),
            attributes=_strip_attributes(child.attrib),
            text=child.text or "",
            element=child,
        )

    def __iter__(self) -> Iterator[XMLNode]:
        while (node := self.next_child()) is not None:
            yield node


class ElementTreeWriter:
    """``XMLWriter`` that builds an ElementTree in memory.

    Without a parent, the first element written becomes the document root.
    With a parent, elements are appended to it.

    Example:
        >>> writer = ElementTreeWriter()
        >>> with writer.element("Channel", {"Number": "0"}):
        ...     writer.write_element("Name", text="Play")
        >>> writer.to_string(pretty=False)
        '<Channel Number="0"><Name>Play</Name></Channel>'
    """

    def __init__(self, parent: ET.Element | None = None):
        self._root = parent
        self._stack: list[ET.Element] = [parent] if parent is not None else []
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def root(self) -> ET.Element | None:
        return self._root

    def close(self) -> None:
        """Stop accepting writes."""
        self._closed = True

    def _open(self, tag: str, attributes: Mapping[str, str] | None) -> ET.Element:
        if self._closed:
            raise ValueError("Write to closed XML writer")

        attrib = dict(attributes or {})
        if self._stack:
            return ET.SubElement(self._stack[-1], tag, attrib)

        if self._root is not None:
            raise ValueError(f"Document already has a root element <{self._root.tag}>")
        self._root = ET.Element(tag, attrib)
        return self._root

    def write_element(
        self, tag: str, attributes: Mapping[str, str] | None = None, text: str | None = None
    ) -> None:
        """Write a complete element with optional attributes and text."""
        element = self._open(tag, attributes)
        if text is not None:
            element.text = text

    def write_text(self, text: str) -> None:
        """Set the text of the innermost open element."""
        if self._closed:
            raise ValueError("Write to closed XML writer")
        if not self._stack:
            raise ValueError("No open element to write text into")
        self._stack[-1].text = text

    @contextmanager
    def element(
        self, tag: str, attributes: Mapping[str, str] | None = None
    ) -> Iterator[ET.Element]:
        """Open an element; children written inside the block nest under it."""
        element = self._open(tag, attributes)
        self._stack.append(element)
        try:
            yield element
        finally:
            self._stack.pop()

    def to_string(self, pretty: bool = True, indent: str = "  ") -> str:
        """Serialize the document built so far.

        Raises:
            ValueError: If nothing has been written
        """
        if self._root is None:
            raise ValueError("Nothing written")
        if pretty:
            ET.indent(self._root, space=indent, level=0)
        return ET.tostring(self._root, encoding="unicode")
