"""Formatting utilities for UI display."""

from ..models import TagInfo


class TagInfoFormatter:
    """Formats decoded tag fields for display."""

    @staticmethod
    def format_uid(uid: bytes) -> str:
        """Format a UID as colon-separated uppercase hex."""
        return ":".join(f"{b:02X}" for b in uid)

    @staticmethod
    def format_figure_id(info: TagInfo) -> str:
        """Format the figure id with its decoded fields.

        Args:
            info: Decoded tag summary

        Returns:
            Formatted string for display
        """
        return (
            f"{info.figure_id.hex().upper()} "
            f"[dim](character 0x{info.character_id:04X}, variant 0x{info.variant:02X}, "
            f"type 0x{info.figure_type:02X}, model 0x{info.model_number:04X}, "
            f"series 0x{info.series:02X})[/dim]"
        )

    @staticmethod
    def format_signature(verified: bool | None) -> str:
        if verified is None:
            return "[dim]not checked[/dim]"
        elif verified:
            return "[green]valid[/green]"
        else:
            return "[red]INVALID[/red]"
