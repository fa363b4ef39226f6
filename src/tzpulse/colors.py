"""Colour assignment: one stable colour per timezone identifier."""

import hashlib

from tzpulse.catalog import BoundaryCatalog

# Tailwind 500 shades, matching the canonical boundary colours
PALETTE: tuple[str, ...] = (
    "#ef4444",  # red
    "#f97316",  # orange
    "#f59e0b",  # amber
    "#eab308",  # yellow
    "#84cc16",  # lime
    "#22c55e",  # green
    "#10b981",  # emerald
    "#14b8a6",  # teal
    "#06b6d4",  # cyan
    "#0ea5e9",  # sky
    "#3b82f6",  # blue
    "#6366f1",  # indigo
    "#8b5cf6",  # violet
    "#a855f7",  # purple
    "#d946ef",  # fuchsia
    "#ec4899",  # pink
)

UNKNOWN_COLOR = "#6b7280"  # gray


def hashed_color(region_id: str) -> str:
    """Palette colour picked by a SHA-1 of the identifier.

    The builtin hash() is salted per process, so it cannot give stable colours.
    """
    if not region_id:
        return UNKNOWN_COLOR
    digest = hashlib.sha1(region_id.encode("utf-8")).digest()
    return PALETTE[int.from_bytes(digest[:4], "big") % len(PALETTE)]


class ColorAssigner:
    """Catalog regions and their related members share the canonical colour; anything else hashes."""

    def __init__(self, catalog: BoundaryCatalog) -> None:
        self.catalog = catalog

    def color_for(self, region_id: str) -> str:
        region = self.catalog.get(region_id) if region_id else None
        if region is not None:
            return region.color
        return hashed_color(region_id)


def time_of_day_color(hour: int) -> str:
    """Background tint for a local hour: night, morning, afternoon, evening."""
    if hour >= 22 or hour < 6:
        return "#1e293b"  # slate-800
    if hour < 12:
        return "#3b82f6"  # blue-500
    if hour < 17:
        return "#f97316"  # orange-500
    return "#7c3aed"  # violet-600
