"""
Test suite for utility_library

Contains:
- tests/unit/          : Unit tests for individual modules
"""
