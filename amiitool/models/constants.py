"""Constants used throughout amiitool."""

# Buffer sizes
AMIIBO_SIZE = 0x208  # Internal (canonical) layout
NTAG_SIZE = 540  # Full NTAG215 dump

# Master key file
DEFAULT_KEY_FILE = "key_retail.bin"
MASTER_KEY_RECORD_SIZE = 80
MASTER_KEY_FILE_SIZE = 2 * MASTER_KEY_RECORD_SIZE
MAX_MAGIC_BYTES_SIZE = 16
TYPE_STRING_SIZE = 14

# Key derivation
KEYGEN_SEED_SIZE = 0x40
DERIVED_KEY_SIZE = 16

# Signature slots (internal layout)
HMAC_SIZE = 32
HMAC_POS_DATA = 0x008
HMAC_POS_TAG = 0x1B4

# Signed regions (internal layout)
DATA_HMAC_START = 0x029
STATIC_START = 0x1D4
STATIC_SIZE = 0x034

# Seed sources (internal layout)
SEED_COUNTER_POS = 0x029
SEED_COUNTER_SIZE = 0x02
SEED_UID_POS = 0x1D4
SEED_UID_SIZE = 0x08
SEED_SALT_POS = 0x1E8
SEED_SALT_SIZE = 0x20

# Encrypted payload (internal layout)
PAYLOAD_START = 0x02C
PAYLOAD_SIZE = 0x188

# Bytes copied through the cipher unchanged: (offset, length)
CIPHER_PASSTHROUGH = [
    (0x000, 0x008),
    (0x028, 0x004),
    (STATIC_START, STATIC_SIZE),
]

# Wire <-> internal mapping: (internal offset, wire offset, length)
TAG_LAYOUT = [
    (0x000, 0x008, 0x008),
    (0x008, 0x080, 0x020),
    (0x028, 0x010, 0x024),
    (0x04C, 0x0A0, 0x168),
    (0x1B4, 0x034, 0x020),
    (0x1D4, 0x000, 0x008),
    (0x1DC, 0x054, 0x02C),
]

# Tag summary fields (internal layout)
UID_POS = 0x1D4
FIGURE_ID_POS = 0x1DC
FIGURE_ID_SIZE = 8
