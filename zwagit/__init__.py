"""zwagit: a mini Git-like version control system."""
from .codec import BLOB, Envelope, decode, encode
from .errors import (
    InvalidIdentifier, InvalidKind, MalformedObject, NotARepository, ObjectNotFound,
    StorageUnavailable, UnsupportedRepository, ZwagitError,
)
from .objects import ObjectStore, identifier_for
from .repo import Repo

__version__ = '0.1.0'
