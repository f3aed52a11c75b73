"""Conversion between the wire (tag) layout and the internal layout."""

from ..models import AMIIBO_SIZE, TAG_LAYOUT


def tag_to_internal(tag: bytes) -> bytes:
    """Rearrange a wire-layout dump into the internal layout."""
    internal = bytearray(AMIIBO_SIZE)
    for internal_pos, tag_pos, length in TAG_LAYOUT:
        internal[internal_pos : internal_pos + length] = tag[tag_pos : tag_pos + length]
    return bytes(internal)


def internal_to_tag(internal: bytes, base: bytes | None = None) -> bytes:
    """Rearrange an internal-layout buffer into the wire layout.

    Args:
        internal: Internal-layout buffer
        base: Optional wire dump whose unmapped bytes are kept

    Returns:
        Wire-layout bytes, 520 long or as long as base
    """
    tag = bytearray(base) if base is not None else bytearray(AMIIBO_SIZE)
    for internal_pos, tag_pos, length in TAG_LAYOUT:
        tag[tag_pos : tag_pos + length] = internal[internal_pos : internal_pos + length]
    return bytes(tag)
