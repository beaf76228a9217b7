"""HTML fragments returned to HTMX for in-place swaps."""
from __future__ import annotations

from datetime import datetime
from typing import Optional


NO_ECHO_TEXT_FRAGMENT = """
      <div style="color: #f44336;">
        ❌ No text provided to echo
      </div>
    """


def format_server_time(now: datetime) -> str:
    """Format a local time the way an en-US browser locale string reads.

    ``datetime(2024, 1, 5, 15, 4, 5)`` becomes ``1/5/2024, 3:04:05 PM``.
    """

    hour = now.hour % 12 or 12
    meridiem = "AM" if now.hour < 12 else "PM"
    return f"{now.month}/{now.day}/{now.year}, {hour}:{now.minute:02d}:{now.second:02d} {meridiem}"


def time_fragment(now: Optional[datetime] = None) -> str:
    time_string = format_server_time(now or datetime.now())
    return f"""
    <div style="color: #4caf50; font-weight: bold;">
      🕒 Server Time: {time_string}
      <br><small>Loaded via HTMX GET request</small>
    </div>
  """


def echo_fragment(text: Optional[str]) -> str:
    """Wrap ``text`` for display.

    The text is inserted as-is, without HTML escaping.
    """

    if not text:
        return NO_ECHO_TEXT_FRAGMENT

    return f"""
    <div style="color: #2196f3; font-weight: bold;">
      🔊 Echo: "{text}"
      <br><small>Processed via HTMX POST request</small>
    </div>
  """
