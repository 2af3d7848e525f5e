"""
Test suite for dma-numtheory

Contains:
- tests/unit/          : Unit tests for individual modules
"""
