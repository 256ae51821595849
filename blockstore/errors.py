"""Exceptions raised by the block store.

Filesystem failures are not wrapped: they surface as the builtin ``OSError``
subclasses (``FileNotFoundError``, ``PermissionError``, ...).
"""

from __future__ import annotations

from multiformats import CID


class BlockstoreError(Exception):
    """Base class for block store errors that are not plain I/O errors."""


class BlockEncodingError(BlockstoreError, ValueError):
    """Raised when bytes or text cannot be turned into a content identifier."""


class BlockIntegrityError(BlockstoreError):
    """Raised when bytes read for a CID re-address to a different CID."""

    def __init__(self, expected: CID, actual: CID):
        self.expected = expected
        self.actual = actual
        super().__init__(f"Block integrity mismatch: expected {expected}, got {actual}")
