# core/formatters.py

# all pure utilities & date/time helpers
# must never import from models!

import datetime
from typing import Any

# === generic text formatters ===


def format_banner_text(title: str, width: int = 40) -> str:
    line = "=" * width
    centered_title = f"{title:^{width}}"

    return f"{line}\n{centered_title}\n{line}"


def format_sorted_set(items: Any) -> str:
    return "[" + ", ".join(sorted(str(item) for item in items)) + "]"


def format_bullet(label: str, value: Any) -> str:
    return f"\n  • {label}: {value}"


# === number formatters ===


def format_score(score: float) -> str:
    return f"{score:g}"


# === date formatters ===


def format_consultation_slot(
    slot_date: datetime.date, start: datetime.time, end: datetime.time
) -> str:
    return f"{slot_date.isoformat()} {start.strftime('%H:%M')}-{end.strftime('%H:%M')}"
