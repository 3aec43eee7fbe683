"""Test suite for the simulated host.

Organized into three categories:

1. core/: Unit tests for value types, event channels, the test tree and
   test controllers
   - No file system access, fast execution

2. adapters/: Tests for the workspace adapters (real temporary
   directories) and the editor capability stubs

3. fakes/: Extension-side test doubles
   - Recording listeners and scripted resolve handlers
"""
