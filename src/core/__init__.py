"""
Core domain models, mathematical primitives, and contracts.

This module contains the foundational building blocks of the lattice solver:
exact integer arithmetic, extended GCD, immutable value types and JSON
Schema contracts for serialized queries and results.
"""
