"""Core functionality for amiitool."""

from .key_manager import KeyManager, load_keys, parse_master_keys
from .keygen import calc_seed, generate_key
from .cipher import cipher
from .layout import tag_to_internal, internal_to_tag
from .authenticator import TagAuthenticator

__all__ = [
    "KeyManager",
    "load_keys",
    "parse_master_keys",
    "calc_seed",
    "generate_key",
    "cipher",
    "tag_to_internal",
    "internal_to_tag",
    "TagAuthenticator",
]
