"""Object envelope codec: b'<kind> <length>\\0<content>'
"""
from typing import NamedTuple

from .errors import InvalidKind, MalformedObject

BLOB = 'blob'
SEPARATOR = b'\x00'


class Envelope(NamedTuple):
    kind: str
    content: bytes

    @property
    def length(self) -> int:
        return len(self.content)


def check_kind(kind: str) -> str:
    if not kind or ' ' in kind or '\x00' in kind:
        raise InvalidKind(kind)
    try:
        kind.encode()
    except UnicodeEncodeError:
        # lone surrogates, e.g. from undecodable argv bytes
        raise InvalidKind(kind) from None
    return kind


def encode(kind: str, content: bytes) -> bytes:
    check_kind(kind)
    header = f'{kind} {len(content)}'.encode()
    return header + SEPARATOR + bytes(content)


def _split_frame(data: bytes):
    # only the first NUL separates; content may hold more of them
    header, sep, content = data.partition(SEPARATOR)
    if not sep:
        raise MalformedObject('missing header separator')
    return header, content


def _parse_header(header: bytes):
    parts = header.split(b' ')
    if len(parts) != 2 or not all(parts):
        raise MalformedObject(f'bad header {header[:64]!r}')
    kind_raw, length_raw = parts
    try:
        kind = kind_raw.decode()
    except UnicodeDecodeError:
        raise MalformedObject(f'kind is not valid UTF-8: {kind_raw[:64]!r}') from None
    # bytes.isdigit() is ASCII-only, so signs and underscores int() would accept are rejected
    if not length_raw.isdigit():
        raise MalformedObject(f'bad length {length_raw[:64]!r}')
    return kind, int(length_raw)


def decode(data: bytes) -> Envelope:
    header, content = _split_frame(data)
    kind, length = _parse_header(header)
    if length != len(content):
        raise MalformedObject(f'length {length} does not match {len(content)} content bytes')
    return Envelope(kind, content)
