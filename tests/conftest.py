from pathlib import Path

import pytest

from amiitool.core import TagAuthenticator
from amiitool.models import MasterKeyRecord, MasterKeySet


def make_record(type_string: bytes, magic_size: int, fill: int) -> MasterKeyRecord:
    return MasterKeyRecord(
        hmac_key=bytes((fill + i) & 0xFF for i in range(16)),
        type_string=type_string.ljust(14, b"\0"),
        rfu=0,
        magic_bytes_size=magic_size,
        magic_bytes=bytes((fill * 3 + i) & 0xFF for i in range(16)),
        xor_pad=bytes((fill * 5 + 7 * i) & 0xFF for i in range(32)),
    )


@pytest.fixture
def master_keys() -> MasterKeySet:
    return MasterKeySet(
        data=make_record(b"unfixed infos", 14, 0x10),
        tag=make_record(b"locked secret", 16, 0x80),
    )


@pytest.fixture
def other_master_keys() -> MasterKeySet:
    return MasterKeySet(
        data=make_record(b"unfixed infos", 14, 0x11),
        tag=make_record(b"locked secret", 16, 0x81),
    )


@pytest.fixture
def key_file(tmp_path: Path, master_keys: MasterKeySet) -> Path:
    path = tmp_path / "key_retail.bin"
    path.write_bytes(master_keys.pack())
    return path


@pytest.fixture
def authenticator(master_keys: MasterKeySet) -> TagAuthenticator:
    return TagAuthenticator(master_keys)


@pytest.fixture
def plain() -> bytes:
    """An internal-layout plaintext with every byte populated."""
    buf = bytearray((i * 7 + 3) & 0xFF for i in range(520))
    buf[0x1D4:0x1DC] = bytes.fromhex("04A1B29FC3D4E5F6")  # UID block
    buf[0x1DC:0x1E4] = bytes.fromhex("0100000000040002")  # Figure id
    return bytes(buf)
