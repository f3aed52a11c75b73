"""amiitool - encrypt, decrypt and verify amiibo dumps."""

__version__ = "1.0.0"
