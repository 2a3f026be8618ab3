"""Storage backend interface definitions.

Defines the `StorageBackend` abstract class every storage implementation
satisfies. Callers (bootstrap code, request adapters, the CLI) only ever
talk to a backend through these seven methods.
"""
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import List

from .errors import InvalidArgumentError
from .object import Object


class StorageBackend(ABC):
    """Abstract storage backend.

    Implementations must be thread-safe: every method may be called from
    many request threads at once.
    """

    @abstractmethod
    def create_bucket(self, name: str) -> None:
        """Ensure bucket `name` exists. Creating an existing bucket is a no-op."""

    @abstractmethod
    def list_buckets(self) -> List[str]:
        """Return the names of all known buckets."""

    @abstractmethod
    def get_bucket(self, name: str) -> None:
        """Return None if the bucket exists, raise `BucketNotFoundError` otherwise."""

    @abstractmethod
    def create_object(self, obj: Object) -> None:
        """Store `obj`, overwriting any object with the same bucket and name.

        The owning bucket is created if it does not exist yet.
        """

    @abstractmethod
    def list_objects(self, bucket_name: str) -> List[Object]:
        """Return every object stored in `bucket_name`.

        A bucket that does not exist holds no objects, so this returns an
        empty list rather than raising.
        """

    @abstractmethod
    def get_object(self, bucket_name: str, name: str) -> Object:
        """Return the stored object. Raise `ObjectNotFoundError` if absent."""

    @abstractmethod
    def delete_object(self, bucket_name: str, name: str) -> None:
        """Delete the stored object.

        Raise `InvalidArgumentError` if `name` is empty and
        `ObjectNotFoundError` if the object does not exist.
        """


def _is_utf8(text: str) -> bool:
    try:
        text.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


def validate_bucket_name(name: str) -> None:
    if not isinstance(name, str) or not name or not _is_utf8(name):
        raise InvalidArgumentError(f"invalid bucket name: {name!r}")


def validate_object(obj: Object) -> None:
    validate_bucket_name(obj.bucket_name)
    if not isinstance(obj.name, str) or not _is_utf8(obj.name):
        raise InvalidArgumentError(f"invalid object name: {obj.name!r}")
    if not isinstance(obj.content, (bytes, bytearray)):
        raise InvalidArgumentError(
            f"object content must be bytes, got {type(obj.content).__name__}"
        )
