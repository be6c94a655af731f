"""Tests for the cursor-style XML reader and writer."""

from __future__ import annotations

import xml.etree.ElementTree as ET

import pytest

from controlmap.core.parsers.cursor import (
    ElementReader,
    ElementTreeWriter,
    XMLNode,
    XMLReader,
    XMLWriter,
)


class TestElementReader:
    """Test ElementReader."""

    def test_root_tag_and_attributes(self):
        reader = ElementReader(ET.fromstring('<Channel Number="12"/>'))

        assert reader.tag == "Channel"
        assert reader.attributes == {"Number": "12"}

    def test_children_visited_once_in_order(self):
        reader = ElementReader(ET.fromstring("<a><b>1</b><c x='y'/><d>3</d></a>"))

        first = reader.next_child()
        rest = list(reader)

        assert first == XMLNode(tag="b", attributes={}, text="1")
        assert [node.tag for node in rest] == ["c", "d"]
        assert rest[0].attributes == {"x": "y"}
        assert rest[0].text == ""
        assert reader.next_child() is None
        assert list(reader) == []

    def test_grandchildren_not_visited(self):
        reader = ElementReader(ET.fromstring("<a><b><c/></b></a>"))
        assert [node.tag for node in reader] == ["b"]

    def test_namespace_stripped(self):
        reader = ElementReader(ET.fromstring('<p xmlns="urn:x"><q>v</q></p>'))

        assert reader.tag == "p"
        assert reader.next_child().tag == "q"

    def test_node_reader_descends(self):
        reader = ElementReader(ET.fromstring("<a><b><c>deep</c></b></a>"))
        node = reader.next_child()

        inner = node.reader()

        assert inner.tag == "b"
        assert inner.next_child().text == "deep"

    def test_detached_node_has_no_reader(self):
        with pytest.raises(ValueError):
            XMLNode(tag="x").reader()

    def test_satisfies_protocol(self):
        assert isinstance(ElementReader(ET.Element("x")), XMLReader)


class TestElementTreeWriter:
    """Test ElementTreeWriter."""

    def test_first_element_becomes_root(self):
        writer = ElementTreeWriter()
        writer.write_element("Name", text="x")

        assert writer.root.tag == "Name"

    def test_second_root_rejected(self):
        writer = ElementTreeWriter()
        writer.write_element("a")

        with pytest.raises(ValueError):
            writer.write_element("b")

    def test_scoped_element_nests_children(self):
        writer = ElementTreeWriter()
        with writer.element("Channel", {"Number": "1"}):
            writer.write_element("Name", text="Jog")
            with writer.element("Movement", {"Sensitivity": "2"}):
                writer.write_text("Relative")

        assert writer.to_string(pretty=False) == (
            '<Channel Number="1"><Name>Jog</Name>'
            '<Movement Sensitivity="2">Relative</Movement></Channel>'
        )

    def test_writes_into_parent(self):
        parent = ET.Element("InputProfile")
        writer = ElementTreeWriter(parent)

        writer.write_element("Model", text="X")
        writer.write_element("Type", text="MIDI")

        assert writer.root is parent
        assert [child.tag for child in parent] == ["Model", "Type"]

    def test_pretty_output_indents(self):
        writer = ElementTreeWriter()
        with writer.element("a"):
            writer.write_element("b", text="1")

        assert writer.to_string(indent="  ") == "<a>\n  <b>1</b>\n</a>"

    def test_closed_writer_rejects_writes(self):
        writer = ElementTreeWriter()
        writer.close()

        assert writer.closed
        with pytest.raises(ValueError):
            writer.write_element("a")

    def test_write_text_needs_open_element(self):
        with pytest.raises(ValueError):
            ElementTreeWriter().write_text("x")

    def test_to_string_without_content(self):
        with pytest.raises(ValueError):
            ElementTreeWriter().to_string()

    def test_satisfies_protocol(self):
        assert isinstance(ElementTreeWriter(), XMLWriter)
