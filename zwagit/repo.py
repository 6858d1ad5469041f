"""Repository bootstrap and high-level object operations."""
from pathlib import Path
import json, logging
from typing import Any, Dict, Optional

from .codec import BLOB, encode
from .errors import NotARepository, StorageUnavailable, UnsupportedRepository
from .objects import ObjectStore, identifier_for

logger = logging.getLogger(__name__)

ZWAGIT_DIR = '.zwagit'
FORMAT_VERSION = 0


class Repo:
    def __init__(self, path: str = '.'):
        self.workdir = Path(path).resolve()
        self.git_dir = self.workdir / ZWAGIT_DIR
        self.config_file = self.git_dir / 'config'
        self._objects: Optional[ObjectStore] = None

    def is_initialized(self) -> bool:
        return (self.git_dir / 'objects').is_dir()

    def init(self) -> bool:
        """Create objects/, refs/ and the config file.

        Returns False without touching anything when the repository directory
        already exists.
        """
        if self.git_dir.exists():
            logger.debug('repository already present at %s', self.git_dir)
            return False
        try:
            (self.git_dir / 'objects').mkdir(parents=True)
            (self.git_dir / 'refs').mkdir()
            self.config_file.write_text(json.dumps({'core': {'repositoryformatversion': FORMAT_VERSION}}, indent=2))
        except OSError as e:
            raise StorageUnavailable(self.git_dir, e.strerror or str(e)) from e
        logger.debug('initialized repository at %s', self.git_dir)
        return True

    def get_config(self) -> Dict[str, Any]:
        if not self.config_file.exists():
            return {}
        try:
            cfg = json.loads(self.config_file.read_text())
        except OSError as e:
            raise StorageUnavailable(self.config_file, e.strerror or str(e)) from e
        except ValueError as e:
            raise UnsupportedRepository(self.config_file, f'unreadable config: {e}') from e
        if not isinstance(cfg, dict):
            raise UnsupportedRepository(self.config_file, 'config is not a JSON object')
        return cfg

    def set_config(self, section: str, key: str, value: Any):
        cfg = self.get_config()
        cfg.setdefault(section, {})[key] = value
        try:
            self.config_file.write_text(json.dumps(cfg, indent=2))
        except OSError as e:
            raise StorageUnavailable(self.config_file, e.strerror or str(e)) from e

    @property
    def objects(self) -> ObjectStore:
        if self._objects is None:
            if not self.is_initialized():
                raise NotARepository(self.workdir)
            core = self.get_config().get('core', {})
            if not isinstance(core, dict):
                raise UnsupportedRepository(self.config_file, 'core section is not a JSON object')
            version = core.get('repositoryformatversion', FORMAT_VERSION)
            if version != FORMAT_VERSION:
                raise UnsupportedRepository(self.config_file, f'format version {version!r}')
            self._objects = ObjectStore(self.git_dir / 'objects')
        return self._objects

    def hash_object(self, data: bytes, kind: str = BLOB, write: bool = True) -> str:
        if write:
            return self.objects.put(kind, data)
        return identifier_for(encode(kind, data))

    def hash_file(self, path, kind: str = BLOB, write: bool = True) -> str:
        p = Path(path)
        try:
            data = p.read_bytes()
        except OSError as e:
            raise StorageUnavailable(p, e.strerror or str(e)) from e
        return self.hash_object(data, kind=kind, write=write)
