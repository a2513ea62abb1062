"""
Core value types, digit-level algorithms, and number theory.

Self-contained: no I/O beyond textual construction/rendering.
"""
