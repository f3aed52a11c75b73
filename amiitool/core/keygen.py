"""Per-tag seed extraction and key derivation."""

from Cryptodome.Hash import HMAC, SHA256

from ..models import (
    DerivedKeys,
    MasterKeyRecord,
    DERIVED_KEY_SIZE,
    KEYGEN_SEED_SIZE,
    SEED_COUNTER_POS,
    SEED_COUNTER_SIZE,
    SEED_UID_POS,
    SEED_UID_SIZE,
    SEED_SALT_POS,
    SEED_SALT_SIZE,
    TYPE_STRING_SIZE,
)


def calc_seed(dump: bytes) -> bytes:
    """Build the 64-byte keygen seed from an internal-layout buffer.

    Layout: write counter at 0x00 (zero padded to 0x10), the 8-byte UID
    block twice at 0x10 and 0x18, and the 32-byte salt at 0x20.
    """
    seed = bytearray(KEYGEN_SEED_SIZE)
    seed[0x00:0x02] = dump[SEED_COUNTER_POS : SEED_COUNTER_POS + SEED_COUNTER_SIZE]
    seed[0x10:0x18] = dump[SEED_UID_POS : SEED_UID_POS + SEED_UID_SIZE]
    seed[0x18:0x20] = dump[SEED_UID_POS : SEED_UID_POS + SEED_UID_SIZE]
    seed[0x20:0x40] = dump[SEED_SALT_POS : SEED_SALT_POS + SEED_SALT_SIZE]
    return bytes(seed)


def prepare_seed(record: MasterKeyRecord, seed: bytes) -> bytes:
    """Mix a master record into a seed, producing the generator input."""
    # Type string up to and including its terminator
    terminator = record.type_string.find(b"\0")
    if terminator < 0:
        type_part = record.type_string[:TYPE_STRING_SIZE]
    else:
        type_part = record.type_string[: terminator + 1]

    magic_size = record.magic_bytes_size
    salt = bytes(s ^ p for s, p in zip(seed[0x20:0x40], record.xor_pad))

    return b"".join(
        [
            type_part,
            seed[: 16 - magic_size],
            record.magic_bytes[:magic_size],
            seed[0x10:0x20],
            salt,
        ]
    )


def generate_bytes(key: bytes, seed: bytes, size: int) -> bytes:
    """Counter-mode HMAC-SHA256 generator.

    Block i is HMAC(key, i as 16-bit big endian || seed); the output is the
    concatenation of blocks truncated to size.
    """
    output = bytearray()
    iteration = 0
    while len(output) < size:
        mac = HMAC.new(key, digestmod=SHA256)
        mac.update(iteration.to_bytes(2, "big"))
        mac.update(seed)
        output += mac.digest()
        iteration += 1
    return bytes(output[:size])


def generate_key(record: MasterKeyRecord, seed: bytes) -> DerivedKeys:
    """Derive the AES key, AES IV and HMAC key for one record and seed."""
    prepared = prepare_seed(record, seed)
    return DerivedKeys.from_bytes(
        generate_bytes(record.hmac_key, prepared, 3 * DERIVED_KEY_SIZE)
    )
