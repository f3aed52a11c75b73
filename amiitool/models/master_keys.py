"""Master and derived key data models."""

import struct
from dataclasses import dataclass

from .constants import (
    DERIVED_KEY_SIZE,
    MASTER_KEY_RECORD_SIZE,
    MAX_MAGIC_BYTES_SIZE,
)
from .errors import KeyFileCorruptError, KeyFileUnreadableError

# hmac_key, type_string, rfu, magic_bytes_size, magic_bytes, xor_pad
_RECORD_FORMAT = struct.Struct("<16s14sBB16s32s")


@dataclass(frozen=True)
class MasterKeyRecord:
    """One master key record as stored in the key file."""

    hmac_key: bytes  # Key of the derivation generator
    type_string: bytes  # NUL-terminated domain identifier
    rfu: int  # Reserved
    magic_bytes_size: int  # Number of meaningful bytes in magic_bytes
    magic_bytes: bytes
    xor_pad: bytes  # Mixed into the seed salt

    @classmethod
    def unpack(cls, data: bytes) -> "MasterKeyRecord":
        """Parse a record from exactly 80 bytes.

        Raises:
            KeyFileUnreadableError: if data has the wrong length
            KeyFileCorruptError: if magic_bytes_size is out of range
        """
        if len(data) != MASTER_KEY_RECORD_SIZE:
            raise KeyFileUnreadableError(
                f"key record is {len(data)} bytes, expected {MASTER_KEY_RECORD_SIZE}"
            )
        record = cls(*_RECORD_FORMAT.unpack(data))
        if record.magic_bytes_size > MAX_MAGIC_BYTES_SIZE:
            raise KeyFileCorruptError(
                f"magic bytes size {record.magic_bytes_size} exceeds {MAX_MAGIC_BYTES_SIZE}"
            )
        return record

    def pack(self) -> bytes:
        """Serialize the record back to its 80-byte form."""
        return _RECORD_FORMAT.pack(
            self.hmac_key,
            self.type_string,
            self.rfu,
            self.magic_bytes_size,
            self.magic_bytes,
            self.xor_pad,
        )

    @property
    def type_name(self) -> str:
        """Printable type string without the terminator."""
        return self.type_string.split(b"\0", 1)[0].decode("ascii", "replace")


@dataclass(frozen=True)
class MasterKeySet:
    """The data and tag master key records, loaded once and shared read-only."""

    data: MasterKeyRecord  # Authenticates and encrypts user data
    tag: MasterKeyRecord  # Authenticates static hardware fields

    def pack(self) -> bytes:
        return self.data.pack() + self.tag.pack()


@dataclass(frozen=True)
class DerivedKeys:
    """Per-tag keys derived from one master record and seed."""

    aes_key: bytes
    aes_iv: bytes
    hmac_key: bytes

    @classmethod
    def from_bytes(cls, data: bytes) -> "DerivedKeys":
        k = DERIVED_KEY_SIZE
        return cls(aes_key=data[:k], aes_iv=data[k : 2 * k], hmac_key=data[2 * k : 3 * k])
