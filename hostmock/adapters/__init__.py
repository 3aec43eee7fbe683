"""Adapters for the simulated host API.

Adapter Organization:

- workspace/: Workspace folders, file search and file-system watchers,
  backed by the real file system
- editor/: Window, debug, commands and languages stubs that record
  registrations and let test code fire host-side events
"""
