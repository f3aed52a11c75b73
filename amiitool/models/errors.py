"""Error types raised by amiitool."""


class AmiitoolError(Exception):
    """Base class for amiitool errors."""


class KeyFileError(AmiitoolError):
    """The master key file could not be used."""


class KeyFileUnreadableError(KeyFileError):
    """The key file is missing, unreadable or too short."""


class KeyFileCorruptError(KeyFileError):
    """A key record declares more than 16 magic bytes."""


class BufferTooSmallError(AmiitoolError, ValueError):
    """An input dump is shorter than the fixed record size."""

    def __init__(self, name: str, size: int, required: int):
        super().__init__(f"{name} is {size} bytes, at least {required} required")
        self.size = size
        self.required = required
