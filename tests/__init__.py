"""
Test suite for rng utilities

Contains:
- tests/unit/          : Unit tests for engine, scalar, decimal, selection and delay modules
"""
