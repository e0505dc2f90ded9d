"""
Core scalar primitives, errors, configuration and contracts.

Everything here is independent of the concrete vector and matrix types.
"""
