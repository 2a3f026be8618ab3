"""Mapping between logical (bucket, object name) pairs and filesystem paths.

Each bucket is a directory directly under the storage root and each
object is a file below its bucket directory. The object name is split on
`/` and every component becomes one directory level, the last one being
the file itself:

    bucket="photos", name="2023/trip/img 1.jpg"
    -> <root>/photos/2023/trip/img%201.jpg

Every physical segment is the percent-escaped form of exactly one logical
segment, so separators inside segments can never be confused with the
separators of the physical tree. Two physical names are reserved and can
never be produced by escaping a non-empty segment:

- `%` stands for the empty segment (`"a//b"`, `"a/"` or `""`).
- names ending in `%tmp` are in-flight writes and are not objects.

No path cleaning is done: `"a/./b"` and `"a/b"` are different objects.
"""
from __future__ import annotations
from pathlib import Path
from typing import Iterable, Tuple
from urllib.parse import quote, unquote

from .errors import EncodingError, InvalidArgumentError

SEPARATOR = "/"
EMPTY_SEGMENT = "%"
TEMP_SUFFIX = "%tmp"

# Same literal set as a URL path segment (RFC 3986 pchar minus `,` and `;`)
_SAFE = "$&+:=@"


def escape_segment(segment: str) -> str:
    """Percent-escape a single logical path segment."""
    if segment == "":
        return EMPTY_SEGMENT
    if segment.strip(".") == "":
        # `.` and `..` would be interpreted by the filesystem
        return "%2E" * len(segment)
    try:
        return quote(segment, safe=_SAFE)
    except UnicodeEncodeError as e:
        raise InvalidArgumentError(f"path segment {segment!r} is not valid text: {e}") from None


def unescape_segment(segment: str) -> str:
    """Inverse of `escape_segment`.

    Only canonical escapes are accepted; anything else (a foreign file
    dropped into the tree, lowercase hex, a literal space) raises
    `EncodingError` instead of decoding to a name that would not map
    back to the same file.
    """
    if segment == EMPTY_SEGMENT:
        return ""
    try:
        decoded = unquote(segment, errors="strict")
    except UnicodeDecodeError as e:
        raise EncodingError(f"invalid escaped path segment {segment!r}: {e}") from e
    if decoded == "" or escape_segment(decoded) != segment:
        raise EncodingError(f"invalid escaped path segment {segment!r}")
    return decoded


def is_temporary(filename: str) -> bool:
    return filename.endswith(TEMP_SUFFIX)


def temporary_path(path: Path) -> Path:
    return path.with_name(path.name + TEMP_SUFFIX)


def bucket_path(root: Path, bucket_name: str) -> Path:
    return root / escape_segment(bucket_name)


def object_path(root: Path, bucket_name: str, name: str) -> Tuple[Path, Path]:
    """Return `(dir_path, file_path)` for an object.

    `dir_path` is the directory holding the object file, i.e. the bucket
    directory plus one level per leading name component.
    """
    segments = [escape_segment(s) for s in name.split(SEPARATOR)]
    dir_path = bucket_path(root, bucket_name).joinpath(*segments[:-1])
    return dir_path, dir_path / segments[-1]


def object_name(segments: Iterable[str]) -> str:
    """Rebuild a logical object name from physical segments below the bucket dir."""
    return SEPARATOR.join(unescape_segment(s) for s in segments)
