"""Simple memory-backed storage backend

This backend keeps objects in memory as a data structure `[<bucket>][<name>]`.
"""
import logging
from threading import RLock
from typing import Dict, Iterable, List

from .base import StorageBackend, validate_bucket_name, validate_object
from .errors import BucketNotFoundError, InvalidArgumentError, ObjectNotFoundError
from .object import Object

logger = logging.getLogger(__name__)


class MemoryStorage(StorageBackend):
    def __init__(self, objects: Iterable[Object] = ()):
        self._lock = RLock()
        self._buckets: Dict[str, Dict[str, Object]] = {}
        for obj in objects:
            self.create_object(obj)

    def create_bucket(self, name: str) -> None:
        validate_bucket_name(name)
        with self._lock:
            self._create_bucket(name)

    def _create_bucket(self, name: str) -> Dict[str, Object]:
        if name not in self._buckets:
            self._buckets[name] = {}
            logger.info("Created bucket %r", name)
        return self._buckets[name]

    def list_buckets(self) -> List[str]:
        with self._lock:
            return sorted(self._buckets)

    def get_bucket(self, name: str) -> None:
        with self._lock:
            if name not in self._buckets:
                raise BucketNotFoundError(name)

    def create_object(self, obj: Object) -> None:
        validate_object(obj)
        # Objects are frozen; only bytearray content needs copying
        if not isinstance(obj.content, bytes):
            obj = Object(obj.bucket_name, obj.name, bytes(obj.content))
        with self._lock:
            self._create_bucket(obj.bucket_name)[obj.name] = obj

    def list_objects(self, bucket_name: str) -> List[Object]:
        with self._lock:
            bucket = self._buckets.get(bucket_name, {})
            return [bucket[name] for name in sorted(bucket)]

    def get_object(self, bucket_name: str, name: str) -> Object:
        with self._lock:
            try:
                return self._buckets[bucket_name][name]
            except KeyError:
                raise ObjectNotFoundError(bucket_name, name) from None

    def delete_object(self, bucket_name: str, name: str) -> None:
        if not name:
            raise InvalidArgumentError("can't delete object with empty name")
        with self._lock:
            try:
                del self._buckets[bucket_name][name]
            except KeyError:
                raise ObjectNotFoundError(bucket_name, name) from None
