"""
Test suite for palindromeda

Contains:
- tests/unit/          : Unit tests for individual modules
"""
