"""Fixed-width text listings for parameter and result objects."""

from datetime import datetime
from enum import Enum
from typing import Any

MAX_FIELD_LEN = 70
MAX_LABEL_LEN = 36


def format_value(value: Any) -> str:
    """Render a single field value for a listing.

    Character buffers are shown as their quoted text, enums by label.
    """
    if value is None:
        return "None"
    if hasattr(value, "get_character_string"):
        return f"'{value.get_character_string()}'"
    if isinstance(value, Enum):
        return getattr(value, "label", str(value.value))
    if isinstance(value, str):
        return value if value else "(empty)"
    return str(value)


def format_parameter_listing(
    title: str,
    rows: list[tuple[str, Any]],
    subtitle: str = "",
) -> str:
    """Build a framed two-column listing.

    Args:
        title: Type name shown centered in the header
        rows: (label, value) pairs in display order
        subtitle: Optional instance name shown under the title

    Returns:
        The listing, terminated by a newline
    """
    rule = " " + "=" * (MAX_FIELD_LEN - 2)
    lines = ["", rule, title.center(MAX_FIELD_LEN)]
    if subtitle:
        lines.append(subtitle.center(MAX_FIELD_LEN))
    lines.append(datetime.now().strftime("%A %Y-%m-%d %H:%M:%S").center(MAX_FIELD_LEN))
    lines.append(rule)
    for label, value in rows:
        lines.append(f"{label:>{MAX_LABEL_LEN}}  {format_value(value)}")
    lines.append(rule)
    return "\n".join(lines) + "\n"


def format_time(seconds: float) -> str:
    """Format time in seconds to human-readable string.

    Args:
        seconds: Time in seconds

    Returns:
        Formatted time string
    """
    if seconds < 1:
        return f"{seconds * 1000:.1f}ms"
    if seconds < 60:
        return f"{seconds:.2f}s"
    minutes = int(seconds // 60)
    secs = seconds % 60
    return f"{minutes}m {secs:.2f}s"
