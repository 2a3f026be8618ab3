import logging

import pytest

from fakestore_lib.bootstrap import load_objects_from_path, seed_storage
from fakestore_lib.config import Config
from fakestore_lib.main import create_backend
from fakestore_lib.storage import MemoryStorage, Object


@pytest.fixture
def seed_dir(tmp_path):
    root = tmp_path / "seed"
    (root / "photos" / "2023" / "trip").mkdir(parents=True)
    (root / "photos" / "2023" / "trip" / "img1.jpg").write_bytes(b"jpeg")
    (root / "photos" / "cover.png").write_bytes(b"png")
    (root / "my%20docs").mkdir()
    (root / "my%20docs" / "readme%2Etxt").write_bytes(b"")
    (root / "stray-file").write_bytes(b"ignored")
    return root


def test_missing_root_gives_no_objects(tmp_path):
    assert load_objects_from_path(tmp_path / "absent") == []


def test_load_objects_from_path(seed_dir, caplog):
    with caplog.at_level(logging.INFO, logger="fakestore_lib.bootstrap"):
        objects = load_objects_from_path(seed_dir)
    assert sorted(objects, key=lambda o: (o.bucket_name, o.name)) == [
        Object("my docs", "readme.txt", b""),
        Object("photos", "2023/trip/img1.jpg", b"jpeg"),
        Object("photos", "cover.png", b"png"),
    ]
    assert "Found bucket 'photos'" in caplog.text


def test_seed_storage(seed_dir):
    storage = MemoryStorage()
    assert seed_storage(storage, load_objects_from_path(seed_dir)) == 3
    assert storage.list_buckets() == ["my docs", "photos"]


def test_create_backend_seeds_filesystem(seed_dir, tmp_path):
    cfg = Config(storage_backend="filesystem", storage_root=str(tmp_path / "store"), seed_dir=str(seed_dir))
    storage = create_backend(cfg)
    assert storage.get_object("photos", "2023/trip/img1.jpg").content == b"jpeg"
    assert (tmp_path / "store" / "my%20docs" / "readme.txt").is_file()


def test_create_backend_memory(seed_dir):
    storage = create_backend(Config(storage_backend="memory", seed_dir=str(seed_dir)))
    assert isinstance(storage, MemoryStorage)
    assert len(storage.list_objects("photos")) == 2


def test_seed_dir_cannot_be_storage_root(seed_dir):
    with pytest.raises(ValueError):
        create_backend(Config(storage_root=str(seed_dir), seed_dir=str(seed_dir)))


def test_unknown_backend(tmp_path):
    with pytest.raises(ValueError):
        create_backend(Config(storage_backend="tape", storage_root=str(tmp_path)))
