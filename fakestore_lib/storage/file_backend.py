"""Filesystem-backed storage backend.

Stores one JSON document per object under `<root>/<bucket>/<name...>`,
laid out as described in `fakestore_lib.storage.paths`. Writes go to a
temporary sibling file which is then renamed into place, and every
operation runs under a single reader/writer lock owned by the instance.
"""
from __future__ import annotations
import dataclasses
import logging
import os
import stat
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Tuple

from . import paths
from .base import StorageBackend, validate_bucket_name, validate_object
from .errors import (
    BucketNotFoundError,
    InvalidArgumentError,
    ObjectConflictError,
    ObjectNotFoundError,
)
from .object import Object
from .rwlock import ReadWriteLock
from .serializer import JSONSerializer, Serializer

logger = logging.getLogger(__name__)

DIR_MODE = 0o700
FILE_MODE = 0o664

# Errors meaning "there is no object file at this path"
_MISSING = (FileNotFoundError, NotADirectoryError, IsADirectoryError)


class FileSystemStorage(StorageBackend):
    """Backend persisting objects as files below `root_dir`.

    Parameters
    - root_dir: directory owned by this backend; created if missing.
    - objects: optional initial objects, stored with `create_object`.
    - serializer: codec for the per-object documents (JSON by default).
    """

    def __init__(
        self,
        root_dir: str | Path,
        objects: Iterable[Object] = (),
        serializer: Optional[Serializer] = None,
    ) -> None:
        self.root_dir = Path(root_dir)
        self.root_dir.mkdir(mode=DIR_MODE, parents=True, exist_ok=True)
        self.serializer = serializer or JSONSerializer()
        self._lock = ReadWriteLock()
        for obj in objects:
            self.create_object(obj)

    def create_bucket(self, name: str) -> None:
        validate_bucket_name(name)
        with self._lock.write_locked():
            self._create_bucket(name)

    def _create_bucket(self, name: str) -> Path:
        path = paths.bucket_path(self.root_dir, name)
        if not path.is_dir():
            path.mkdir(mode=DIR_MODE)
            logger.info("Created bucket %r at %s", name, path)
        return path

    def list_buckets(self) -> List[str]:
        with self._lock.read_locked():
            with os.scandir(self.root_dir) as it:
                names = [paths.unescape_segment(e.name) for e in it if e.is_dir()]
        return sorted(names)

    def get_bucket(self, name: str) -> None:
        with self._lock.read_locked():
            try:
                st = os.stat(paths.bucket_path(self.root_dir, name))
            except OSError as e:
                raise BucketNotFoundError(name) from e
            if not stat.S_ISDIR(st.st_mode):
                raise BucketNotFoundError(name)

    def create_object(self, obj: Object) -> None:
        validate_object(obj)
        with self._lock.write_locked():
            bucket_dir = self._create_bucket(obj.bucket_name)
            dir_path, file_path = paths.object_path(self.root_dir, obj.bucket_name, obj.name)
            self._make_dirs(bucket_dir, dir_path, obj)
            if file_path.is_dir():
                self._remove_stale_dirs(file_path, obj)
            data = self.serializer.dump(obj)
            self._write_atomic(file_path, data)
            logger.debug("Stored %s/%s (%d bytes) at %s", obj.bucket_name, obj.name, len(obj.content), file_path)

    def _make_dirs(self, bucket_dir: Path, dir_path: Path, obj: Object) -> None:
        cur = bucket_dir
        for part in dir_path.relative_to(bucket_dir).parts:
            cur = cur / part
            if cur.is_dir():
                continue
            if cur.exists():
                raise ObjectConflictError(
                    f"object {obj.name!r} in bucket {obj.bucket_name!r} "
                    f"needs existing object {cur.relative_to(bucket_dir)} as a directory"
                )
            cur.mkdir(mode=DIR_MODE)

    def _remove_stale_dirs(self, path: Path, obj: Object) -> None:
        """Remove a directory tree at `path` that holds no objects.

        Deletes leave empty directories behind, so a directory at an object's
        file path only conflicts when some object still lives below it.
        """
        for dirpath, _, filenames in os.walk(path):
            if any(not paths.is_temporary(f) for f in filenames):
                raise ObjectConflictError(
                    f"object {obj.name!r} in bucket {obj.bucket_name!r} "
                    "is a prefix of existing objects"
                )
        for dirpath, _, filenames in os.walk(path, topdown=False):
            for f in filenames:
                os.unlink(os.path.join(dirpath, f))
            os.rmdir(dirpath)
        logger.debug("Removed empty directories at %s", path)

    def _write_atomic(self, path: Path, data: bytes) -> None:
        tmp = paths.temporary_path(path)
        try:
            fd = os.open(tmp, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, FILE_MODE)
            with os.fdopen(fd, "wb") as f:
                f.write(data)
                f.flush()
                os.fsync(f.fileno())
            tmp.replace(path)
        except OSError:
            tmp.unlink(missing_ok=True)
            raise

    def list_objects(self, bucket_name: str) -> List[Object]:
        with self._lock.read_locked():
            bucket_dir = paths.bucket_path(self.root_dir, bucket_name)
            if not bucket_dir.is_dir():
                return []
            return list(self._walk(bucket_name, bucket_dir, ()))

    def _walk(self, bucket_name: str, directory: Path, segments: Tuple[str, ...]) -> Iterator[Object]:
        with os.scandir(directory) as it:
            entries = sorted(it, key=lambda e: e.name)
        for entry in entries:
            if entry.is_dir(follow_symlinks=False):
                yield from self._walk(bucket_name, Path(entry.path), segments + (entry.name,))
            elif not paths.is_temporary(entry.name):
                name = paths.object_name(segments + (entry.name,))
                yield self._get_object(bucket_name, name)

    def get_object(self, bucket_name: str, name: str) -> Object:
        with self._lock.read_locked():
            return self._get_object(bucket_name, name)

    def _get_object(self, bucket_name: str, name: str) -> Object:
        _, file_path = paths.object_path(self.root_dir, bucket_name, name)
        try:
            data = file_path.read_bytes()
        except _MISSING:
            raise ObjectNotFoundError(bucket_name, name) from None
        obj = self.serializer.load(data)
        # The location is authoritative, not what the document claims
        return dataclasses.replace(obj, bucket_name=bucket_name, name=name)

    def delete_object(self, bucket_name: str, name: str) -> None:
        if not name:
            raise InvalidArgumentError("can't delete object with empty name")
        with self._lock.write_locked():
            _, file_path = paths.object_path(self.root_dir, bucket_name, name)
            if file_path.is_dir():
                raise ObjectNotFoundError(bucket_name, name)
            try:
                file_path.unlink()
            except _MISSING:
                raise ObjectNotFoundError(bucket_name, name) from None
            # Parent directories are left in place even when now empty
            logger.debug("Deleted %s/%s", bucket_name, name)
