"""Command-line front end for a fakestore storage root.

Examples:

    fakestore.py --storage-root ./data buckets
    fakestore.py --storage-root ./data put photos 2023/trip/img1.jpg ./img1.jpg
    fakestore.py --storage-root ./data ls photos
    fakestore.py --storage-root ./data --seed-dir ./seed seed
"""
from __future__ import annotations
import argparse
import logging
import sys
from typing import Iterable, Optional

from fakestore_lib.config import load_config
from fakestore_lib.logging_config import configure_logging
from fakestore_lib.main import create_backend
from fakestore_lib.storage import BACKENDS, NotFoundError, Object, StorageBackend, StorageError

logger = logging.getLogger("fakestore")

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_NOT_FOUND = 2


def get_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="fakestore", description="Inspect and edit a fakestore storage root")
    p.add_argument("--config", help="YAML configuration file")
    p.add_argument("--backend", choices=BACKENDS, help="Storage backend (overrides config)")
    p.add_argument("--storage-root", help="Root directory of the filesystem backend")
    p.add_argument("--seed-dir", help="Directory tree of raw files to preload")
    p.add_argument("--log-level", help="Logging level name, e.g. INFO")

    sub = p.add_subparsers(dest="command", required=True)
    sub.add_parser("buckets", help="List buckets")
    mb = sub.add_parser("mb", help="Create a bucket")
    mb.add_argument("bucket")
    ls = sub.add_parser("ls", help="List objects in a bucket")
    ls.add_argument("bucket")
    cat = sub.add_parser("cat", help="Write an object's content to stdout")
    cat.add_argument("bucket")
    cat.add_argument("name")
    put = sub.add_parser("put", help="Store a local file (or '-' for stdin) as an object")
    put.add_argument("bucket")
    put.add_argument("name")
    put.add_argument("file")
    rm = sub.add_parser("rm", help="Delete an object")
    rm.add_argument("bucket")
    rm.add_argument("name")
    sub.add_parser("seed", help="Load --seed-dir into the backend and report the result")
    return p


def run_command(args: argparse.Namespace, storage: StorageBackend) -> int:
    if args.command == "buckets":
        for name in storage.list_buckets():
            print(name)
    elif args.command == "mb":
        storage.create_bucket(args.bucket)
    elif args.command == "ls":
        for obj in storage.list_objects(args.bucket):
            print(f"{len(obj.content):>10}  {obj.name}")
    elif args.command == "cat":
        obj = storage.get_object(args.bucket, args.name)
        sys.stdout.buffer.write(obj.content)
        sys.stdout.buffer.flush()
    elif args.command == "put":
        if args.file == "-":
            content = sys.stdin.buffer.read()
        else:
            with open(args.file, "rb") as f:
                content = f.read()
        storage.create_object(Object(bucket_name=args.bucket, name=args.name, content=content))
    elif args.command == "rm":
        storage.delete_object(args.bucket, args.name)
    elif args.command == "seed":
        buckets = storage.list_buckets()
        total = sum(len(storage.list_objects(b)) for b in buckets)
        print(f"{len(buckets)} bucket(s), {total} object(s)")
    return EXIT_OK


def main(argv: Optional[Iterable[str]] = None) -> int:
    args = get_parser().parse_args(None if argv is None else list(argv))

    config = load_config(args.config)
    if args.backend:
        config.storage_backend = args.backend
    if args.storage_root:
        config.storage_root = args.storage_root
    if args.seed_dir:
        config.seed_dir = args.seed_dir
    if args.log_level:
        config.log_level = args.log_level
    configure_logging(config.log_level)

    # A broken seed load means there is nothing meaningful to serve
    try:
        storage = create_backend(config)
    except (StorageError, OSError, ValueError):
        logger.exception("Failed to initialise %s storage", config.storage_backend)
        return EXIT_ERROR

    try:
        return run_command(args, storage)
    except NotFoundError as e:
        print(f"fakestore: {e}", file=sys.stderr)
        return EXIT_NOT_FOUND
    except (StorageError, OSError) as e:
        print(f"fakestore: {e}", file=sys.stderr)
        return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())
