"""Typed errors for zwagit. Every error carries the exit code the CLI reports."""


class ZwagitError(Exception):
    """Base exception for all zwagit errors."""

    exit_code = 1


class InvalidKind(ZwagitError):
    """Raised when an object kind tag is empty or contains a space or NUL."""

    exit_code = 3

    def __init__(self, kind: str):
        self.kind = kind
        super().__init__(f'invalid object kind: {kind!r}')


class MalformedObject(ZwagitError):
    """Raised when envelope bytes cannot be decoded."""

    exit_code = 4

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f'malformed object: {reason}')


class InvalidIdentifier(ZwagitError):
    """Raised for identifiers that are not 40 lowercase hex characters."""

    exit_code = 5

    def __init__(self, oid: str):
        self.oid = oid
        super().__init__(f'invalid object identifier: {oid!r}')


class ObjectNotFound(ZwagitError):
    exit_code = 6

    def __init__(self, oid: str):
        self.oid = oid
        super().__init__(f'object not found: {oid}')


class StorageUnavailable(ZwagitError):
    """Raised when the store cannot be read or written for a reason other than absence."""

    exit_code = 7

    def __init__(self, path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f'storage unavailable at {path}: {reason}')


class NotARepository(ZwagitError):
    exit_code = 8

    def __init__(self, path):
        self.path = path
        super().__init__(f'not a zwagit repository: {path}')


class UnsupportedRepository(ZwagitError):
    exit_code = 9

    def __init__(self, path, detail: str):
        self.path = path
        self.detail = detail
        super().__init__(f'unsupported repository at {path}: {detail}')
