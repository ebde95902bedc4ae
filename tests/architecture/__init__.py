"""Architecture validation tests.

These tests verify that the codebase follows architectural constraints
like clean layering, dependency direction, and immutable guards.
"""
