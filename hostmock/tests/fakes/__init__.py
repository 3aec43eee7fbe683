"""Extension-side test doubles.

These in-memory implementations stand in for the extension code that the
simulated host normally serves:

- RecordingListener: Captures event payloads for assertion
- FakeResolveHandler: Scripted test discovery with call recording
"""

from .listener import RecordingListener
from .resolve import FakeResolveHandler

__all__ = [
    "FakeResolveHandler",
    "RecordingListener",
]
