"""Unit tests for core domain logic.

These tests exercise the core without touching the file system. Extension
behaviour is supplied by the in-memory fakes from tests/fakes/.
"""
