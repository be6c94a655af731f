"""Test suite for controlmap.

Test Structure:
- unit/: Unit tests mirroring packages/controlmap/core
  - input/: InputChannel, InputProfile and type taxonomy
  - formats/qlc/: Channel codec, XML cursors, profile parser and exporter
  - config/: Configuration models and loader
  - utils/: Logging, lenient parsing and XML parser helpers
- fixtures/: Sample input profile files
- xml_helpers.py: Shared save/load helpers for codec tests
- conftest.py: Shared fixtures
"""
