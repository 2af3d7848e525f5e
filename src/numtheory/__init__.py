"""
Integer number theory primitives: divisibility, GCD/LCM, extended Euclid.

This package is a pure computation library over fixed-width signed integers.
It has no I/O and no shared state.
"""
