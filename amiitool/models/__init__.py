"""Data models for amiitool."""

from .master_keys import MasterKeyRecord, MasterKeySet, DerivedKeys
from .tag_info import TagInfo
from .errors import (
    AmiitoolError,
    KeyFileError,
    KeyFileUnreadableError,
    KeyFileCorruptError,
    BufferTooSmallError,
)
from .constants import *

__all__ = [
    "MasterKeyRecord",
    "MasterKeySet",
    "DerivedKeys",
    "TagInfo",
    "AmiitoolError",
    "KeyFileError",
    "KeyFileUnreadableError",
    "KeyFileCorruptError",
    "BufferTooSmallError",
    "AMIIBO_SIZE",
    "NTAG_SIZE",
    "MASTER_KEY_FILE_SIZE",
    "HMAC_POS_DATA",
    "HMAC_POS_TAG",
]
