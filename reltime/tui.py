from __future__ import annotations

from typing import ClassVar

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.widgets import Footer, Header

from .config import FormatterConfig, load_config
from .ui import RelativeTimeLabel
from .utils.time import Clock


class WatchApp(App):
    """Textual app that shows a live "time ago" for a single timestamp."""

    CSS = """
    #relative-time { padding: 1 2; text-style: bold; }
    """

    BINDINGS: ClassVar[list[Binding]] = [
        Binding("q", "quit", "Quit"),
        Binding("a", "toggle_abbreviation", "Short/Long units"),
    ]

    def __init__(
        self,
        timestamp_ms: int,
        cfg: FormatterConfig | None = None,
        clock: Clock | None = None,
    ) -> None:
        """Initialize application state and the label widget.

        Args:
            timestamp_ms: Epoch milliseconds to display relative to now.
            cfg: Formatter settings; loaded from the config file when omitted.
            clock: Optional time source for the label, mainly for tests.
        """
        super().__init__()
        self.cfg: FormatterConfig = cfg if cfg is not None else load_config()
        self.timestamp_ms = timestamp_ms
        self.time_label = RelativeTimeLabel(
            timestamp_ms,
            abbreviate_unit=self.cfg.abbreviate_unit,
            clock=clock,
            refresh_interval=self.cfg.refresh_interval,
            id="relative-time",
        )

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        with Vertical():
            yield self.time_label
        yield Footer()

    def action_toggle_abbreviation(self) -> None:
        self.cfg.abbreviate_unit = not self.cfg.abbreviate_unit
        self.time_label.set_abbreviate_unit(self.cfg.abbreviate_unit)
