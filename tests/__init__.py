"""
Test suite for epskit

Contains:
- tests/unit/          : Unit tests for individual modules
"""
