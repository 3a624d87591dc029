# flowershop/domain/entities/color.py
from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime
from typing import Optional
from uuid import UUID

from flowershop.domain.errors import InvalidInput

HEX_CODE_RE = re.compile(r"^#[0-9a-f]{6}$")


def normalize_hex(value: str) -> str:
    """'FF00aa' / '#ff00AA' -> '#ff00aa'. Short '#abc' forms are expanded."""
    s = (value or "").strip().lower()
    if not s.startswith("#"):
        s = "#" + s
    if len(s) == 4:
        s = "#" + "".join(ch * 2 for ch in s[1:])
    if not HEX_CODE_RE.match(s):
        raise InvalidInput(f"not a hex color: {value!r}", field="hex_code")
    return s


@dataclass
class Color:
    """A named flower color; `hex_code` is '#rrggbb'."""
    id: Optional[UUID] = None
    name: str = ""
    hex_code: str = "#000000"
    date_created: Optional[datetime] = None
    last_updated: Optional[datetime] = None

    def __post_init__(self):
        if not self.name or not self.name.strip():
            raise InvalidInput("color name is required", field="name")
        if not HEX_CODE_RE.match(self.hex_code or ""):
            raise InvalidInput(f"not a hex color: {self.hex_code!r}", field="hex_code")
