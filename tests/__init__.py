"""
Test Suite for monval

Test Structure:
- unit/: Unit tests mirroring src/ package structure
- integration/: End-to-end command-line workflows

Test Categories:
- Core codec (parsing, formatting, conversions, overflow)
- Money value type
- Configuration
- pandas helpers and the command-line interface
"""
