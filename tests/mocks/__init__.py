"""
Mock data package
"""

from .writer_mock import RecordingWriter, failing_primitive, silent_primitive

__all__ = [
    "RecordingWriter",
    "failing_primitive",
    "silent_primitive",
]
