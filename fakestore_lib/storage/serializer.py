from typing import Protocol
import base64
import binascii
import json

from .errors import EncodingError
from .object import Object


class Serializer(Protocol):
    """Serialize/deserialize objects for backends that store bytes.

    Implementations should be symmetric: `dump` -> bytes, `load` <- bytes.
    """

    def dump(self, obj: Object) -> bytes: ...

    def load(self, data: bytes) -> Object: ...


class JSONSerializer:
    """Serializer using a JSON document per object.

    Content is stored base64-encoded under `content` so arbitrary bytes
    survive the text format:

        {"bucket": "photos", "name": "a/b.jpg", "content": "aGVsbG8="}
    """

    def dump(self, obj: Object) -> bytes:
        doc = {
            "bucket": obj.bucket_name,
            "name": obj.name,
            "content": base64.b64encode(bytes(obj.content)).decode("ascii"),
        }
        return json.dumps(doc).encode("utf-8")

    def load(self, data: bytes) -> Object:
        try:
            doc = json.loads(data.decode("utf-8"))
            content = doc.get("content") or ""
            return Object(
                bucket_name=doc.get("bucket", ""),
                name=doc.get("name", ""),
                content=base64.b64decode(content.encode("ascii"), validate=True),
            )
        except (UnicodeError, ValueError, AttributeError, binascii.Error) as e:
            raise EncodingError(f"cannot decode stored object: {e}") from e
