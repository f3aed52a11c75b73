"""Decoded tag summary data model."""

from dataclasses import dataclass

from .constants import (
    FIGURE_ID_POS,
    FIGURE_ID_SIZE,
    SEED_COUNTER_POS,
    UID_POS,
)


@dataclass
class TagInfo:
    """Data class to store the readable fields of an internal-layout dump"""

    uid: bytes  # 7-byte NFC UID
    figure_id: bytes  # 8-byte figure identification block
    write_counter: int  # Incremented by the console on every write
    verified: bool | None = None  # Signature status, None when unknown

    @classmethod
    def from_internal(cls, buffer: bytes, verified: bool | None = None) -> "TagInfo":
        """Decode the summary fields from an internal-layout buffer."""
        uid_block = buffer[UID_POS : UID_POS + 8]
        return cls(
            uid=bytes(uid_block[0:3] + uid_block[4:8]),  # skip BCC0
            figure_id=bytes(buffer[FIGURE_ID_POS : FIGURE_ID_POS + FIGURE_ID_SIZE]),
            write_counter=int.from_bytes(
                buffer[SEED_COUNTER_POS : SEED_COUNTER_POS + 2], "big"
            ),
            verified=verified,
        )

    @property
    def character_id(self) -> int:
        return int.from_bytes(self.figure_id[0:2], "big")

    @property
    def variant(self) -> int:
        return self.figure_id[2]

    @property
    def figure_type(self) -> int:
        return self.figure_id[3]

    @property
    def model_number(self) -> int:
        return int.from_bytes(self.figure_id[4:6], "big")

    @property
    def series(self) -> int:
        return self.figure_id[6]

    def __str__(self) -> str:
        return f"Tag {self.uid.hex().upper()} (figure {self.figure_id.hex().upper()})"
