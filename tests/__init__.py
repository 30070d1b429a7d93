"""
Test suite for streamline

Contains:
- tests/unit/          : Unit tests for individual modules (no network)
"""
