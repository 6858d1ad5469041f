"""Object storage: envelopes sharded under objects/<2 hex>/<38 hex>"""
import hashlib, logging, os, re, tempfile
from pathlib import Path

from .codec import Envelope, decode, encode
from .errors import InvalidIdentifier, ObjectNotFound, StorageUnavailable

logger = logging.getLogger(__name__)

OID_RE = re.compile(r'[0-9a-f]{40}')
OBJECT_MODE = 0o444


def identifier_for(envelope: bytes) -> str:
    return hashlib.sha1(envelope).hexdigest()


def check_oid(oid: str) -> str:
    if not isinstance(oid, str) or not OID_RE.fullmatch(oid):
        raise InvalidIdentifier(oid)
    return oid


class ObjectStore:
    """Content-addressed store rooted at an objects directory.

    The objects directory itself is created by the repository bootstrap;
    shard directories are created here on first write.
    """

    identifier_for = staticmethod(identifier_for)

    def __init__(self, objects_dir: Path):
        self.objects_dir = Path(objects_dir)

    def path_for(self, oid: str) -> Path:
        check_oid(oid)
        return self.objects_dir / oid[:2] / oid[2:]

    def exists(self, oid: str) -> bool:
        return self._is_stored(self.path_for(oid))

    def _is_stored(self, p: Path) -> bool:
        try:
            return p.is_file()
        except OSError as e:
            raise StorageUnavailable(p, e.strerror or str(e)) from e

    def put(self, kind: str, content: bytes) -> str:
        envelope = encode(kind, content)
        oid = identifier_for(envelope)
        p = self.path_for(oid)
        if self._is_stored(p):
            logger.debug('object %s already stored, skipped', oid)
            return oid
        try:
            p.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StorageUnavailable(p.parent, e.strerror or str(e)) from e
        self._write_atomic(p, envelope)
        logger.debug('stored %s object %s (%d bytes)', kind, oid, len(envelope))
        return oid

    def _write_atomic(self, p: Path, data: bytes):
        # readers must never see a partial object: write a temp file in the shard, then rename
        try:
            fd, tmp = tempfile.mkstemp(dir=p.parent, prefix='.tmp-')
        except OSError as e:
            raise StorageUnavailable(p.parent, e.strerror or str(e)) from e
        try:
            with os.fdopen(fd, 'wb') as out:
                out.write(data)
                out.flush()
                os.fsync(out.fileno())
            # mkstemp creates 0600; stored objects are read-only for everyone
            os.chmod(tmp, OBJECT_MODE)
            os.replace(tmp, p)
        except OSError as e:
            try:
                os.unlink(tmp)
            except FileNotFoundError:
                pass
            raise StorageUnavailable(p, e.strerror or str(e)) from e

    def get(self, oid: str) -> bytes:
        p = self.path_for(oid)
        try:
            return p.read_bytes()
        except FileNotFoundError:
            logger.debug('object %s not found in %s', oid, self.objects_dir)
            raise ObjectNotFound(oid) from None
        except OSError as e:
            raise StorageUnavailable(p, e.strerror or str(e)) from e

    def read(self, oid: str) -> Envelope:
        return decode(self.get(oid))
