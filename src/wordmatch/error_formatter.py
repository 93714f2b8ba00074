"""Error formatting for structured error log blocks."""

from __future__ import annotations
import json
from datetime import datetime, timezone
from typing import Any, Dict


def format_error_block(
    title: str,
    error_type: str,
    details: Dict[str, Any],
) -> str:
    """Format a boxed, timestamped error block for the log file."""
    timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%f")[:-3] + "Z"

    lines = [
        "",
        "=" * 64,
        f" {title}",
        "=" * 64,
        f" Timestamp:    {timestamp}",
        f" Error Type:   {error_type}",
        "",
        " ── DETAILS " + "─" * 52,
        indent_json(details),
        "",
        "=" * 64,
        "",
    ]
    return "\n".join(lines)


def indent_json(data: Dict[str, Any], indent: int = 2) -> str:
    """Format JSON with indentation for error logs."""
    try:
        formatted = json.dumps(data, indent=indent, default=str)
        return "\n".join(" " + line for line in formatted.split("\n"))
    except (TypeError, ValueError):
        return f" {repr(data)}"
