"""Domain exception hierarchy.

Synthesis itself never fails: inner layers raise these only where an outer
layer is expected to recover (transient I/O) or to reject the request
(malformed input at the HTTP boundary).
"""

from __future__ import annotations


class CodePresenceError(Exception):
    """Base exception for the entire application."""


# ── Transient I/O ───────────────────────────────────────────────────────────


class FileSizeUnavailableError(CodePresenceError):
    """The on-disk size of a document could not be determined."""


# ── Input validation ────────────────────────────────────────────────────────


class InvalidSnapshotError(CodePresenceError):
    """A host snapshot is internally inconsistent.

    Raised for a cursor without a document, or a cursor past the last line.
    """
