from __future__ import annotations

from textual.widgets import Static

from ..config import DEFAULT_REFRESH_INTERVAL
from ..formatter import format_time
from ..utils.time import Clock


class RelativeTimeLabel(Static):
    """Widget that shows how long ago a timestamp was and keeps it current."""

    def __init__(
        self,
        timestamp_ms: int,
        *,
        abbreviate_unit: bool = False,
        clock: Clock | None = None,
        refresh_interval: float = DEFAULT_REFRESH_INTERVAL,
        prefix: str = "",
        id: str | None = None,
    ) -> None:
        super().__init__(id=id)
        self.timestamp_ms = timestamp_ms
        self.abbreviate_unit = abbreviate_unit
        self.time_source = clock
        self.refresh_interval = refresh_interval
        self.prefix = prefix

    def label_text(self) -> str:
        return f"{self.prefix}{format_time(self.timestamp_ms, self.abbreviate_unit, self.time_source)}"

    def on_mount(self) -> None:  # type: ignore[override]
        self.refresh_label()
        self.set_interval(self.refresh_interval, self.refresh_label)

    def refresh_label(self) -> None:
        self.update(self.label_text())

    def set_timestamp(self, timestamp_ms: int) -> None:
        """Show a different timestamp and re-render immediately."""
        self.timestamp_ms = timestamp_ms
        self.refresh_label()

    def set_abbreviate_unit(self, abbreviate_unit: bool) -> None:
        """Switch between short and full unit words and re-render immediately."""
        self.abbreviate_unit = abbreviate_unit
        self.refresh_label()
