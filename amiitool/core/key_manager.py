"""Master key file loading."""

from pathlib import Path

from rich.console import Console

from ..models import (
    KeyFileError,
    KeyFileUnreadableError,
    MasterKeyRecord,
    MasterKeySet,
    DEFAULT_KEY_FILE,
    MASTER_KEY_FILE_SIZE,
    MASTER_KEY_RECORD_SIZE,
)

console = Console(stderr=True)


def parse_master_keys(data: bytes) -> MasterKeySet:
    """Parse the data and tag records from the key file contents.

    Args:
        data: Key file contents; bytes past the two records are ignored

    Returns:
        MasterKeySet with both records

    Raises:
        KeyFileUnreadableError: if data is too short
        KeyFileCorruptError: if a record has more than 16 magic bytes
    """
    if len(data) < MASTER_KEY_FILE_SIZE:
        raise KeyFileUnreadableError(
            f"key file is {len(data)} bytes, expected {MASTER_KEY_FILE_SIZE}"
        )
    size = MASTER_KEY_RECORD_SIZE
    return MasterKeySet(
        data=MasterKeyRecord.unpack(data[:size]),
        tag=MasterKeyRecord.unpack(data[size : 2 * size]),
    )


class KeyManager:
    """Manages master key loading from a key file."""

    def __init__(self, key_file: str | Path = DEFAULT_KEY_FILE):
        self.key_file = Path(key_file)

    def load_keys(self) -> MasterKeySet | None:
        """Load the master key set from the key file.

        Returns:
            MasterKeySet, or None if the file is missing, short or corrupt
        """
        try:
            with open(self.key_file, "rb") as file:
                data = file.read(MASTER_KEY_FILE_SIZE)
            return parse_master_keys(data)
        except FileNotFoundError:
            console.print(f"[yellow]⚠️  Warning: {self.key_file} not found.[/yellow]")
        except OSError as e:
            console.print(f"[red]❌ Error reading {self.key_file}: {e}[/red]")
        except KeyFileError as e:
            console.print(f"[red]❌ Invalid key file {self.key_file}: {e}[/red]")
        return None


def load_keys(path: str | Path) -> MasterKeySet | None:
    """Load a master key set, returning None on any failure."""
    return KeyManager(path).load_keys()
