"""Bootstrap helpers for fakestore startup.

Turns a mounted directory tree into a list of `Object`s used to seed a
backend. The first level of directories are buckets; every file below a
bucket, at any depth, is an object whose name is its `/`-joined path
relative to the bucket directory and whose content is the raw file.

Unlike the backend's own layout, these trees are written by hand, so
names are unescaped leniently: `my%20bucket` becomes `my bucket` and
anything that is not a valid escape is kept as-is.
"""
from __future__ import annotations
import logging
from pathlib import Path
from typing import Iterable, List
from urllib.parse import unquote

from fakestore_lib.storage import Object, StorageBackend

logger = logging.getLogger(__name__)


def load_objects_from_path(root: str | Path) -> List[Object]:
    """Return every file under `root` as an Object, or [] if `root` is missing."""
    root = Path(root)
    if not root.exists():
        logger.info("No seed directory at %s; starting empty", root)
        return []

    objects: List[Object] = []
    for bucket_dir in sorted(root.iterdir()):
        if not bucket_dir.is_dir():
            continue
        bucket_name = unquote(bucket_dir.name)
        found = _objects_from_dir(bucket_name, bucket_dir, "")
        logger.info("Found bucket %r", bucket_name)
        logger.info("Add %d file(s) in %r", len(found), bucket_name)
        objects.extend(found)
    return objects


def _objects_from_dir(bucket_name: str, directory: Path, prefix: str) -> List[Object]:
    objects: List[Object] = []
    for entry in sorted(directory.iterdir()):
        name = unquote(entry.name)
        object_name = f"{prefix}/{name}" if prefix else name
        if entry.is_dir():
            objects.extend(_objects_from_dir(bucket_name, entry, object_name))
        elif entry.is_file():
            objects.append(Object(bucket_name=bucket_name, name=object_name, content=entry.read_bytes()))
    return objects


def seed_storage(storage: StorageBackend, objects: Iterable[Object]) -> int:
    """Store `objects` in `storage` and return how many were written."""
    count = 0
    for obj in objects:
        storage.create_object(obj)
        count += 1
    logger.info("Seeded %d object(s)", count)
    return count
