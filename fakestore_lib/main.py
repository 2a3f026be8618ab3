"""Backend factory for the fakestore emulator.

`create_backend(config)` performs all startup work: it builds the
configured backend and, when `seed_dir` is set, preloads it from the
mounted tree. Nothing happens at import time so tests can build isolated
backends.

    from fakestore_lib.config import load_config
    from fakestore_lib.main import create_backend
    storage = create_backend(load_config())
"""
from __future__ import annotations
import logging
from pathlib import Path

from fakestore_lib.bootstrap import load_objects_from_path, seed_storage
from fakestore_lib.config import Config
from fakestore_lib.storage import StorageBackend, create_storage

logger = logging.getLogger(__name__)


def create_backend(config: Config) -> StorageBackend:
    if (
        config.seed_dir
        and config.storage_backend == "filesystem"
        and Path(config.seed_dir).resolve() == Path(config.storage_root).resolve()
    ):
        # Seed files are raw content; the backend stores JSON documents
        raise ValueError("seed_dir must differ from storage_root for the filesystem backend")

    storage = create_storage(backend=config.storage_backend, root_dir=config.storage_root)
    logger.info("Using %s storage backend", config.storage_backend)

    if config.seed_dir:
        seed_storage(storage, load_objects_from_path(config.seed_dir))
    return storage
