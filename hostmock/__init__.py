"""In-process simulation of an editor's extension-facing API.

Lets extension code that drives test controllers and reacts to file
changes run without a real editor process.
"""

__version__ = "0.1.0"
