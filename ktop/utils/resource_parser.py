"""Resource parsing utilities for Kubernetes quantities.

Provides functions to parse Kubernetes resource strings into standardized formats:
- CPU: parsed to cores (float) or millicores (int)
- Memory / storage: parsed to bytes (int)

Quantities are evaluated exactly and rounded up to whole units, matching the
API server's ``MilliValue()`` / ``Value()`` behaviour.
"""

from __future__ import annotations

import math
from decimal import Decimal, InvalidOperation
from typing import Any

# Suffix multipliers, binary first so "Mi" is not read as "M" + "i".
_BINARY_MULTIPLIERS: tuple[tuple[str, int], ...] = (
    ("Ki", 1024),
    ("Mi", 1024**2),
    ("Gi", 1024**3),
    ("Ti", 1024**4),
    ("Pi", 1024**5),
    ("Ei", 1024**6),
)
_DECIMAL_MULTIPLIERS: dict[str, Decimal] = {
    "n": Decimal("1e-9"),
    "u": Decimal("1e-6"),
    "m": Decimal("1e-3"),
    "k": Decimal("1e3"),
    "M": Decimal("1e6"),
    "G": Decimal("1e9"),
    "T": Decimal("1e12"),
    "P": Decimal("1e15"),
    "E": Decimal("1e18"),
}


def parse_quantity(quantity: Any) -> Decimal:
    """Parse a Kubernetes quantity string to an exact Decimal.

    Handles binary suffixes (Ki..Ei), decimal suffixes (n, u, m, k..E),
    exponent notation ("1e3") and plain numbers.

    Args:
        quantity: Quantity as string (e.g. "100m", "1.5", "512Mi") or number.

    Returns:
        The value in base units. Returns Decimal(0) on parse error or empty input.
    """
    if quantity is None:
        return Decimal(0)

    text = str(quantity).strip()
    if not text:
        return Decimal(0)

    multiplier: Decimal | int = 1
    for suffix, mult in _BINARY_MULTIPLIERS:
        if text.endswith(suffix):
            text, multiplier = text[: -len(suffix)], mult
            break
    else:
        # exponent notation ("1e3", "1E3") always ends in a digit
        if text[-1] in _DECIMAL_MULTIPLIERS:
            text, multiplier = text[:-1], _DECIMAL_MULTIPLIERS[text[-1]]

    try:
        value = Decimal(text)
    except InvalidOperation:
        return Decimal(0)
    if not value.is_finite():
        return Decimal(0)
    return value * multiplier


def parse_cpu(cpu_str: Any) -> float:
    """Parse CPU string to cores (float).

    - Nanocores: "500000000n" -> 0.5 cores
    - Microcores: "500000u" -> 0.5 cores
    - Millicores: "100m" -> 0.1 cores
    - Decimal: "1.5" -> 1.5 cores

    Returns:
        CPU value in cores as float. Returns 0.0 on parse error or empty string.
    """
    return float(parse_quantity(cpu_str))


def cpu_to_millicores(cpu_str: Any) -> int:
    """Parse a CPU quantity to whole millicores, rounding up."""
    return math.ceil(parse_quantity(cpu_str) * 1000)


def memory_str_to_bytes(memory_str: Any) -> int:
    """Convert a memory or storage quantity to whole bytes, rounding up.

    - Ki: "1024Ki" -> 1048576 bytes
    - Mi: "512Mi" -> 536870912 bytes
    - G: "1G" -> 1000000000 bytes

    Returns:
        Bytes as int. Returns 0 on parse error or empty string.
    """
    return math.ceil(parse_quantity(memory_str))


def quantity_to_int(quantity: Any) -> int:
    """Parse a countable quantity (e.g. accelerator count) to an int, rounding up."""
    return math.ceil(parse_quantity(quantity))
