"""Core gameplay primitives (moves, round resolution, and match events).

Kept free of console concerns so it can be reused by the match loop, CLI, and tests.
"""
