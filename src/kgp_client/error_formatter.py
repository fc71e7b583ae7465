# Area: Shared
"""Error formatting for structured session error logs."""

from __future__ import annotations
from typing import Optional


def format_error_block(
    error_type: str,
    phase: Optional[str],
    detail: str,
    line: Optional[str] = None,
    agent_name: Optional[str] = None,
) -> str:
    """Format a structured error block for the terminal and log file."""
    from datetime import datetime, timezone

    timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%f")[:-3] + "Z"

    lines = [
        "",
        "=" * 64,
        " KGP CLIENT ERROR — SESSION TERMINATED",
        "=" * 64,
        f" Timestamp:    {timestamp}",
        f" Error Type:   {error_type}",
    ]

    if phase is not None:
        lines.append(f" Phase:        {phase}")
    if agent_name:
        lines.append(f" Agent:        {agent_name}")

    lines.append("")
    lines.append(" ── DETAIL " + "─" * 53)
    lines.append(indent_text(detail))

    if line is not None:
        lines.append("")
        lines.append(" ── OFFENDING LINE " + "─" * 45)
        lines.append(indent_text(repr(line)))

    lines.append("")
    lines.append("=" * 64)
    lines.append("")

    return "\n".join(lines)


def indent_text(text: str) -> str:
    """Indent every line of ``text`` by one space."""
    return "\n".join(" " + part for part in str(text).split("\n"))
