"""Builds acknowledgements for results reported by the browser-side WASM module."""
from __future__ import annotations

import math
from datetime import datetime, timezone
from decimal import Decimal
from typing import Any, Optional

from ..schemas.wasm import WasmResultAck, WasmResultPayload

UNDEFINED = "undefined"


def _format_js_float(value: float) -> str:
    """Shortest round-trip digits with JavaScript's exponent rules.

    Positional notation down to 1e-6, otherwise ``1e-7`` / ``1.5e+22``
    with no zero padding in the exponent.
    """

    text = repr(value)
    if "e" not in text:
        return text
    if abs(value) >= 1e-6 and abs(value) < 1e21:
        return format(Decimal(text), "f")
    mantissa, exponent = text.split("e")
    sign = "-" if exponent.startswith("-") else "+"
    return f"{mantissa}e{sign}{exponent.lstrip('+-').lstrip('0') or '0'}"


def format_js_value(value: Any) -> str:
    """Render a decoded JSON value the way a browser would interpolate it.

    Integral floats lose their ``.0``, booleans and null are lower-case, and
    arrays are comma-joined with empty slots for null entries.
    """

    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        if value.is_integer() and abs(value) < 1e21:
            return str(int(value))
        return _format_js_float(value)
    if isinstance(value, str):
        return value
    if isinstance(value, (list, tuple)):
        return ",".join("" if item is None else format_js_value(item) for item in value)
    if isinstance(value, dict):
        return "[object Object]"
    return str(value)


def iso_timestamp(now: Optional[datetime] = None) -> str:
    """UTC timestamp with millisecond precision and a ``Z`` suffix."""

    moment = (now or datetime.now(timezone.utc)).astimezone(timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _field(payload: WasmResultPayload, name: str) -> str:
    if name not in payload.model_fields_set:
        return UNDEFINED
    return format_js_value(getattr(payload, name))


def build_ack(payload: WasmResultPayload, now: Optional[datetime] = None) -> WasmResultAck:
    result = _field(payload, "result")
    num1 = _field(payload, "num1")
    num2 = _field(payload, "num2")

    return WasmResultAck(
        success=True,
        message=f"Received WASM result: {result}",
        calculation=f"{num1} + {num2} = {result}",
        timestamp=iso_timestamp(now),
    )
