"""Integration tests for adapter implementations.

Workspace adapters are exercised against real temporary directories.
"""
