from __future__ import annotations

from .formatter import format_time

__version__ = "0.1.0"

__all__ = ["__version__", "format_time"]
