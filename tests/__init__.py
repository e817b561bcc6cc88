"""
Test suite for bigradix

Contains:
- tests/unit/          : Unit tests for individual modules
"""
