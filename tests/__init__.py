"""
Test suite for quintile-distribution

Contains:
- tests/unit/          : Unit tests for individual modules
"""
