"""
Test suite for the Diophantine lattice solver

Contains:
- tests/unit/          : Unit tests for individual modules
"""
