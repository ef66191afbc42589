"""
Test suite for the Lorentz transform library

Contains:
- tests/unit/          : Unit tests for individual modules
"""
