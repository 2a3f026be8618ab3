import pytest

from fakestore_lib.config import Config, load_config


def test_defaults_without_file_or_env():
    cfg = load_config(environ={})
    assert cfg == Config()
    assert cfg.storage_root == '/storage'
    assert cfg.storage_backend == 'filesystem'
    assert cfg.seed_dir is None


def test_yaml_file_is_loaded(tmp_path):
    p = tmp_path / 'fakestore.yml'
    p.write_text('storage_backend: memory\nseed_dir: /seed\nlog_level: INFO\nbogus: 1\n', encoding='utf-8')
    cfg = load_config(p, environ={})
    assert cfg.storage_backend == 'memory'
    assert cfg.seed_dir == '/seed'
    assert cfg.log_level == 'INFO'


def test_empty_yaml_file_gives_defaults(tmp_path):
    p = tmp_path / 'empty.yml'
    p.write_text('', encoding='utf-8')
    assert load_config(p, environ={}) == Config()


def test_non_mapping_yaml_is_rejected(tmp_path):
    p = tmp_path / 'list.yml'
    p.write_text('- a\n- b\n', encoding='utf-8')
    with pytest.raises(ValueError):
        load_config(p, environ={})


def test_environment_overrides_file(tmp_path):
    p = tmp_path / 'fakestore.yml'
    p.write_text('storage_root: /from/file\nstorage_backend: memory\n', encoding='utf-8')
    cfg = load_config(p, environ={'STORAGE_ROOT': 'data', 'STORAGE_BACKEND': 'filesystem', 'LOG_LEVEL': 'DEBUG'})
    # STORAGE_ROOT is anchored at / like the container layout expects
    assert cfg.storage_root == '/data'
    assert cfg.storage_backend == 'filesystem'
    assert cfg.log_level == 'DEBUG'


def test_absolute_storage_root_from_env():
    assert load_config(environ={'STORAGE_ROOT': '/mnt/objects'}).storage_root == '/mnt/objects'
