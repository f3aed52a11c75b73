import pytest

from amiitool.core import KeyManager, load_keys, parse_master_keys
from amiitool.models import (
    KeyFileCorruptError,
    KeyFileUnreadableError,
    MasterKeyRecord,
    MasterKeySet,
    MASTER_KEY_RECORD_SIZE,
)
from amiitool.models.master_keys import _RECORD_FORMAT


def test_load_keys(key_file, master_keys):
    loaded = load_keys(key_file)

    assert isinstance(loaded, MasterKeySet)
    assert loaded == master_keys
    assert loaded.data.type_name == "unfixed infos"
    assert loaded.tag.type_name == "locked secret"


def test_key_manager_accepts_string_path(key_file, master_keys):
    assert KeyManager(str(key_file)).load_keys() == master_keys


def test_load_keys_ignores_trailing_bytes(tmp_path, master_keys):
    path = tmp_path / "keys.bin"
    path.write_bytes(master_keys.pack() + b"extra")

    assert load_keys(path) == master_keys


def test_load_keys_missing_file(tmp_path):
    assert load_keys(tmp_path / "missing.bin") is None


def test_load_keys_short_file(tmp_path, master_keys):
    path = tmp_path / "short.bin"
    path.write_bytes(master_keys.pack()[:159])

    assert load_keys(path) is None


@pytest.mark.parametrize("record_offset", [0, 80])
def test_load_keys_rejects_oversized_magic(tmp_path, master_keys, record_offset):
    data = bytearray(master_keys.pack())
    data[record_offset + 0x1F] = 17
    path = tmp_path / "corrupt.bin"
    path.write_bytes(bytes(data))

    assert load_keys(path) is None


def test_load_keys_directory_is_unreadable(tmp_path):
    assert load_keys(tmp_path) is None


def test_parse_master_keys_errors(master_keys):
    with pytest.raises(KeyFileUnreadableError):
        parse_master_keys(master_keys.pack()[:100])

    data = bytearray(master_keys.pack())
    data[0x1F] = 0xFF
    with pytest.raises(KeyFileCorruptError):
        parse_master_keys(bytes(data))


def test_record_layout(master_keys):
    raw = master_keys.data.pack()

    assert len(raw) == 80 == MASTER_KEY_RECORD_SIZE
    assert _RECORD_FORMAT.size == MASTER_KEY_RECORD_SIZE
    assert raw[0x00:0x10] == master_keys.data.hmac_key
    assert raw[0x10:0x1E] == master_keys.data.type_string
    assert raw[0x1F] == 14
    assert raw[0x20:0x30] == master_keys.data.magic_bytes
    assert raw[0x30:0x50] == master_keys.data.xor_pad
    assert MasterKeyRecord.unpack(raw) == master_keys.data


def test_master_key_set_is_immutable(master_keys):
    with pytest.raises(AttributeError):
        master_keys.data = master_keys.tag
