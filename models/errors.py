from __future__ import annotations


class LyraError(Exception):
    """Base class for errors raised while talking to the media server."""
    pass


class TransportError(LyraError):
    """Raised when a request cannot be delivered or answered (network, timeout, HTTP)."""
    pass


class ResponseDecodeError(LyraError):
    """Raised when a response does not have the shape we expect."""
    pass


class FieldMissing(ResponseDecodeError):
    """Raised when a field is absent from a response."""

    def __init__(self, key: str):
        super().__init__(f"'{key}' does not exist")
        self.key = key


class FieldTypeMismatch(ResponseDecodeError):
    """Raised when a field holds a value of the wrong kind."""

    def __init__(self, key: str, kind: str, value: object = None):
        super().__init__(f"'{key}' is not a {kind} (got {value!r})")
        self.key = key
        self.kind = kind
        self.value = value


class EnumDecodeError(ResponseDecodeError):
    """Raised when a server code has no counterpart in a closed enum."""

    def __init__(self, enum_name: str, value: object):
        super().__init__(f"{value!r} is not a valid {enum_name}")
        self.enum_name = enum_name
        self.value = value


class InvalidStatus(ResponseDecodeError):
    """Raised when decoded status fields contradict each other."""
    pass
