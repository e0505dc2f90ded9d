"""
Test suite for lars

Contains:
- tests/unit/          : Unit tests for the scalar layer, vectors, matrices and contracts
"""
