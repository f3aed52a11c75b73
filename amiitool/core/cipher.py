"""Payload encryption for internal-layout buffers."""

from Cryptodome.Cipher import AES

from ..models import (
    DerivedKeys,
    AMIIBO_SIZE,
    CIPHER_PASSTHROUGH,
    PAYLOAD_START,
    PAYLOAD_SIZE,
)


def cipher(keys: DerivedKeys, src: bytes) -> bytearray:
    """Encrypt or decrypt the payload region of src.

    AES-128-CTR is its own inverse, so the same call serves both ways.
    Header, settings and static bytes are copied through; the HMAC slots
    are left zeroed for the caller to fill.
    """
    out = bytearray(AMIIBO_SIZE)

    aes = AES.new(keys.aes_key, AES.MODE_CTR, nonce=b"", initial_value=keys.aes_iv)
    end = PAYLOAD_START + PAYLOAD_SIZE
    out[PAYLOAD_START:end] = aes.encrypt(bytes(src[PAYLOAD_START:end]))

    for offset, length in CIPHER_PASSTHROUGH:
        out[offset : offset + length] = src[offset : offset + length]

    return out
