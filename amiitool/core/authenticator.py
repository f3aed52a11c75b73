"""Signing, verification and encryption of amiibo dumps."""

from Cryptodome.Hash import HMAC, SHA256

from ..models import (
    BufferTooSmallError,
    MasterKeySet,
    AMIIBO_SIZE,
    DATA_HMAC_START,
    HMAC_POS_DATA,
    HMAC_POS_TAG,
    HMAC_SIZE,
    STATIC_START,
    STATIC_SIZE,
)
from .cipher import cipher
from .keygen import calc_seed, generate_key
from .layout import internal_to_tag, tag_to_internal

STATIC_END = STATIC_START + STATIC_SIZE


def _hmac_sha256(key: bytes, *parts: bytes) -> HMAC.HMAC:
    mac = HMAC.new(key, digestmod=SHA256)
    for part in parts:
        mac.update(bytes(part))
    return mac


def _require_size(name: str, buffer: bytes) -> None:
    if len(buffer) < AMIIBO_SIZE:
        raise BufferTooSmallError(name, len(buffer), AMIIBO_SIZE)


class TagAuthenticator:
    """Packs and unpacks dumps with one loaded master key set."""

    def __init__(self, master_keys: MasterKeySet):
        self.master_keys = master_keys

    def unpack(self, tag: bytes) -> tuple[bytes, bool]:
        """Decrypt a wire-layout dump and check both signatures.

        Args:
            tag: Wire-layout dump, at least 520 bytes

        Returns:
            Tuple of (internal plaintext, verified). The plaintext is always
            fully populated, even when verification fails.

        Raises:
            BufferTooSmallError: if tag is shorter than 520 bytes
        """
        _require_size("tag", tag)
        internal = tag_to_internal(tag)

        seed = calc_seed(internal)
        data_keys = generate_key(self.master_keys.data, seed)
        tag_keys = generate_key(self.master_keys.tag, seed)

        plain = cipher(data_keys, internal)

        # Data HMAC covers the tag HMAC slot, so the tag HMAC must be written first
        tag_mac = _hmac_sha256(tag_keys.hmac_key, plain[STATIC_START:STATIC_END])
        plain[HMAC_POS_TAG : HMAC_POS_TAG + HMAC_SIZE] = tag_mac.digest()

        data_mac = _hmac_sha256(data_keys.hmac_key, plain[DATA_HMAC_START:AMIIBO_SIZE])
        plain[HMAC_POS_DATA : HMAC_POS_DATA + HMAC_SIZE] = data_mac.digest()

        verified = self._verify(data_mac, internal, HMAC_POS_DATA) and self._verify(
            tag_mac, internal, HMAC_POS_TAG
        )
        return bytes(plain), verified

    def pack(self, plain: bytes) -> bytes:
        """Sign and encrypt an internal-layout plaintext.

        Returns:
            Internal-layout ciphertext (520 bytes)

        Raises:
            BufferTooSmallError: if plain is shorter than 520 bytes
        """
        _require_size("plain", plain)

        seed = calc_seed(plain)
        tag_keys = generate_key(self.master_keys.tag, seed)
        data_keys = generate_key(self.master_keys.data, seed)

        tag_hmac = _hmac_sha256(
            tag_keys.hmac_key, plain[STATIC_START:STATIC_END]
        ).digest()
        data_hmac = _hmac_sha256(
            data_keys.hmac_key,
            plain[DATA_HMAC_START:HMAC_POS_TAG],
            tag_hmac,
            plain[STATIC_START:STATIC_END],
        ).digest()

        encrypted = cipher(data_keys, plain)
        encrypted[HMAC_POS_TAG : HMAC_POS_TAG + HMAC_SIZE] = tag_hmac
        encrypted[HMAC_POS_DATA : HMAC_POS_DATA + HMAC_SIZE] = data_hmac
        return bytes(encrypted)

    def pack_tag(self, plain: bytes, base: bytes | None = None) -> bytes:
        """Sign and encrypt a plaintext and convert it to the wire layout.

        Args:
            plain: Internal-layout plaintext
            base: Optional wire dump whose unmapped bytes are kept

        Returns:
            Wire-layout bytes
        """
        return internal_to_tag(self.pack(plain), base)

    def is_signed_plaintext(self, plain: bytes) -> bool:
        """Check whether an internal-layout buffer carries its own valid signatures.

        This is true for the output of unpack on a genuine dump, and lets
        callers detect a dump that was decrypted already.
        """
        _require_size("plain", plain)
        packed = self.pack(plain)
        return all(
            packed[pos : pos + HMAC_SIZE] == plain[pos : pos + HMAC_SIZE]
            for pos in (HMAC_POS_DATA, HMAC_POS_TAG)
        )

    @staticmethod
    def _verify(mac: HMAC.HMAC, original: bytes, pos: int) -> bool:
        """Compare a recomputed HMAC with the slot stored in the dump."""
        try:
            mac.verify(bytes(original[pos : pos + HMAC_SIZE]))
        except ValueError:
            return False
        return True
