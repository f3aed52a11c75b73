"""Display management for amiitool UI."""

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from ..models import TagInfo
from .formatters import TagInfoFormatter


class DisplayManager:
    """Manages all UI display operations."""

    def __init__(self, console: Console | None = None):
        self.console = console or Console(stderr=True)
        self.formatter = TagInfoFormatter()

    def create_tag_panel(self, info: TagInfo, title: str = "Tag") -> Panel:
        """Create a panel summarizing a decoded tag."""
        table = Table.grid(padding=(0, 1))
        table.add_column(style="cyan", justify="right", no_wrap=True)
        table.add_column(style="white")
        table.add_row("UID", self.formatter.format_uid(info.uid))
        table.add_row("Figure", self.formatter.format_figure_id(info))
        table.add_row("Write counter", str(info.write_counter))
        table.add_row("Signature", self.formatter.format_signature(info.verified))

        if info.verified is False:
            border_style = "bright_red"
        else:
            border_style = "bright_green"

        return Panel(table, title=title, border_style=border_style, box=box.ROUNDED)

    def show_tag(self, info: TagInfo, title: str = "Tag") -> None:
        self.console.print(self.create_tag_panel(info, title))

    def warning(self, message: str) -> None:
        self.console.print(f"[yellow]⚠️  {escape(message)}[/yellow]")

    def error(self, message: str) -> None:
        self.console.print(f"[red]❌ {escape(message)}[/red]")
