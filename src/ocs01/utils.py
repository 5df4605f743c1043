from __future__ import annotations

import base64
from decimal import Decimal

MICRO_UNITS = 1_000_000


def b64encode(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii")


def b64decode(value: str) -> bytes:
    return base64.b64decode(value, validate=True)


def from_micro_units(raw: int | str) -> Decimal:
    return Decimal(raw) / MICRO_UNITS


def format_amount(amount: Decimal, places: int = 6) -> str:
    return f"{amount:.{places}f}"
