import json

import pytest

from fakestore_lib.storage.errors import EncodingError
from fakestore_lib.storage.object import Object
from fakestore_lib.storage.serializer import JSONSerializer


def test_json_document_layout():
    s = JSONSerializer()
    data = s.dump(Object("photos", "a/b.jpg", b"hello"))
    assert json.loads(data) == {"bucket": "photos", "name": "a/b.jpg", "content": "aGVsbG8="}


def test_binary_and_empty_content_survive():
    s = JSONSerializer()
    blob = bytes(range(256))
    assert s.load(s.dump(Object("b", "n", blob))).content == blob
    assert s.load(s.dump(Object("b", "n", b""))).content == b""


def test_bytearray_content_is_accepted():
    s = JSONSerializer()
    assert s.load(s.dump(Object("b", "n", bytearray(b"xy")))).content == b"xy"


@pytest.mark.parametrize("data", [
    b"not json",
    b"\xff\xfe",
    b"[1, 2, 3]",
    b'{"bucket": "b", "name": "n", "content": "***"}',
    b'{"bucket": "b", "name": "n", "content": 5}',
])
def test_corrupt_documents_raise_encoding_error(data):
    with pytest.raises(EncodingError):
        JSONSerializer().load(data)
