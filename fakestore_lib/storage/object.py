"""Value type for a stored object."""
from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True)
class Object:
    """A named blob of bytes inside exactly one bucket.

    The pair (`bucket_name`, `name`) identifies the object within a
    backend. `name` may contain `/` and is never normalized.
    """

    bucket_name: str
    name: str
    content: bytes = b""
