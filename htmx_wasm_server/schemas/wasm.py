"""Schema definitions for the WASM computation-result endpoint."""
from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class WasmResultPayload(BaseModel):
    """Result reported by the browser after running the WASM module.

    Values are kept as whatever JSON the client sent; only the JSON parser
    constrains them.
    """

    result: Any = Field(default=None, description="Value computed client-side.")
    num1: Any = Field(default=None, description="First operand.")
    num2: Any = Field(default=None, description="Second operand.")

    model_config = ConfigDict(extra="allow")


class WasmResultAck(BaseModel):
    """Confirmation returned once a result has been received."""

    success: bool = True
    message: str
    calculation: str
    timestamp: str


class WasmResultError(BaseModel):
    success: bool = False
    error: str
