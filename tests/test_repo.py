import json

import pytest

from zwagit.errors import NotARepository, StorageUnavailable, UnsupportedRepository
from zwagit.repo import Repo


def test_init_layout_and_config(tmp_path):
    repo = Repo(tmp_path)
    assert not repo.is_initialized()
    assert repo.init() is True
    assert repo.is_initialized()
    assert (tmp_path / '.zwagit' / 'refs').is_dir()
    assert repo.get_config() == {'core': {'repositoryformatversion': 0}}

def test_init_twice_is_noop(tmp_path):
    repo = Repo(tmp_path)
    repo.init()
    oid = repo.hash_object(b'keep me')
    assert Repo(tmp_path).init() is False
    assert repo.objects.get(oid) == b'blob 7\x00keep me'

def test_objects_requires_init(tmp_path):
    with pytest.raises(NotARepository):
        Repo(tmp_path).objects

def test_unsupported_format_version(tmp_path):
    repo = Repo(tmp_path)
    repo.init()
    repo.set_config('core', 'repositoryformatversion', 1)
    with pytest.raises(UnsupportedRepository):
        Repo(tmp_path).objects

def test_unreadable_config(tmp_path):
    repo = Repo(tmp_path)
    repo.init()
    repo.config_file.write_text('{not json')
    with pytest.raises(UnsupportedRepository):
        repo.get_config()

def test_set_config_keeps_other_keys(tmp_path):
    repo = Repo(tmp_path)
    repo.init()
    repo.set_config('user', 'name', 'someone')
    cfg = json.loads(repo.config_file.read_text())
    assert cfg == {'core': {'repositoryformatversion': 0}, 'user': {'name': 'someone'}}

def test_hash_file(tmp_path):
    repo = Repo(tmp_path)
    repo.init()
    f = tmp_path / 'hello.txt'
    f.write_bytes(b'hello\n')
    assert repo.hash_file(f, write=False) == 'ce013625030ba8dba906f756967f9e9ca394464a'
    assert not repo.objects.exists('ce013625030ba8dba906f756967f9e9ca394464a')
    oid = repo.hash_file(f)
    assert repo.objects.read(oid) == ('blob', b'hello\n')

def test_hash_without_write_needs_no_repository(tmp_path):
    assert Repo(tmp_path).hash_object(b'', write=False) == 'e69de29bb2d1d6434b8b29ae775ad8c2e48c5391'

def test_hash_file_missing_input(tmp_path):
    repo = Repo(tmp_path)
    repo.init()
    with pytest.raises(StorageUnavailable) as exc:
        repo.hash_file(tmp_path / 'nope')
    assert exc.value.path == tmp_path / 'nope'

@pytest.mark.parametrize('text', ['[]', '"core"', '{"core": 5}', '{"core": []}'])
def test_config_with_wrong_shape(tmp_path, text):
    repo = Repo(tmp_path)
    repo.init()
    repo.config_file.write_text(text)
    with pytest.raises(UnsupportedRepository):
        Repo(tmp_path).objects
