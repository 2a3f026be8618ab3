"""Storage abstraction package for fakestore."""
from __future__ import annotations
from pathlib import Path
from typing import Iterable, Optional

from .base import StorageBackend
from .errors import (
    BucketNotFoundError,
    EncodingError,
    InvalidArgumentError,
    NotFoundError,
    ObjectConflictError,
    ObjectNotFoundError,
    StorageError,
)
from .file_backend import FileSystemStorage
from .memory_backend import MemoryStorage
from .object import Object

BACKENDS = ("filesystem", "memory")


def create_storage(
    backend: str = "filesystem",
    root_dir: Optional[str | Path] = None,
    objects: Iterable[Object] = (),
) -> StorageBackend:
    """Build a storage backend by name and seed it with `objects`.

    `root_dir` is required for the filesystem backend and ignored by the
    memory backend.
    """
    if backend == "memory":
        return MemoryStorage(objects)
    if backend == "filesystem":
        if root_dir is None:
            raise ValueError("filesystem backend requires root_dir")
        return FileSystemStorage(root_dir, objects)
    raise ValueError(f"unknown storage backend {backend!r}; expected one of {BACKENDS}")


__all__ = [
    "BACKENDS",
    "BucketNotFoundError",
    "EncodingError",
    "FileSystemStorage",
    "InvalidArgumentError",
    "MemoryStorage",
    "NotFoundError",
    "Object",
    "ObjectConflictError",
    "ObjectNotFoundError",
    "StorageBackend",
    "StorageError",
    "create_storage",
]
