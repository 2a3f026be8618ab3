"""Error types raised by storage backends.

I/O failures from the disk are not wrapped: they surface as
the underlying `OSError` subclass so callers can tell "missing" (a
`NotFoundError`) from "broken disk" (an `OSError`) from "corrupt file"
(an `EncodingError`).
"""
from __future__ import annotations


class StorageError(Exception):
    """Base class for all backend errors."""


class NotFoundError(StorageError, KeyError):
    """A bucket or object does not exist.

    Subclasses `KeyError` so callers that only know the generic storage
    convention (missing key raises `KeyError`) keep working.
    """

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return Exception.__str__(self)


class BucketNotFoundError(NotFoundError):
    def __init__(self, bucket_name: str) -> None:
        super().__init__(f"bucket not found: {bucket_name!r}")
        self.bucket_name = bucket_name


class ObjectNotFoundError(NotFoundError):
    def __init__(self, bucket_name: str, name: str) -> None:
        super().__init__(f"object not found: {bucket_name!r}/{name!r}")
        self.bucket_name = bucket_name
        self.name = name


class InvalidArgumentError(StorageError, ValueError):
    """The request is structurally invalid (e.g. empty object name on delete)."""


class ObjectConflictError(InvalidArgumentError):
    """An object name collides with the directory structure of another object.

    Raised by the filesystem backend when `a` and `a/b` would both need to
    exist, since one path cannot be a file and a directory at once.
    """


class EncodingError(StorageError, ValueError):
    """A stored document or physical path could not be decoded."""
