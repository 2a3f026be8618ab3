import pytest

from fakestore_lib.storage import InvalidArgumentError, MemoryStorage, Object, ObjectNotFoundError
from fakestore_lib.storage.interfaces import StorageProtocol


def test_memory_basic_operations():
    m = MemoryStorage()

    m.create_bucket('b')
    m.create_bucket('b')
    assert m.list_buckets() == ['b']
    assert m.get_bucket('b') is None

    m.create_object(Object('b', 'x/y', b'1'))
    assert m.get_object('b', 'x/y') == Object('b', 'x/y', b'1')
    assert [o.name for o in m.list_objects('b')] == ['x/y']

    m.delete_object('b', 'x/y')
    with pytest.raises(ObjectNotFoundError):
        m.get_object('b', 'x/y')


def test_memory_seed_objects():
    m = MemoryStorage([Object('a', '1', b'x'), Object('b', '2', b'y')])
    assert m.list_buckets() == ['a', 'b']
    assert m.get_object('b', '2').content == b'y'


def test_memory_copies_mutable_content():
    buf = bytearray(b'abc')
    m = MemoryStorage()
    m.create_object(Object('b', 'n', buf))
    buf[0] = ord('z')
    assert m.get_object('b', 'n').content == b'abc'


def test_memory_allows_object_and_prefix_to_coexist():
    m = MemoryStorage()
    m.create_object(Object('b', 'a', b'1'))
    m.create_object(Object('b', 'a/b', b'2'))
    assert [o.name for o in m.list_objects('b')] == ['a', 'a/b']


def test_memory_delete_empty_name():
    with pytest.raises(InvalidArgumentError):
        MemoryStorage().delete_object('b', '')


def test_memory_satisfies_protocol():
    assert isinstance(MemoryStorage(), StorageProtocol)
