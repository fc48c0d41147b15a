from __future__ import annotations
import logging
from typing import Dict, Optional
from .models import SizeUnit

logger = logging.getLogger(__name__)

BYTES = SizeUnit(divisor=1e0, label="B")
KILOBYTES = SizeUnit(divisor=1e3, label="KB")
MEGABYTES = SizeUnit(divisor=1e6, label="MB")
GIGABYTES = SizeUnit(divisor=1e9, label="GB")

# Десятичные единицы (1 KB = 1000 B), не 1024.
UNIT_TOKENS: Dict[str, SizeUnit] = {
    "b": BYTES,
    "k": KILOBYTES,
    "kb": KILOBYTES,
    "m": MEGABYTES,
    "mb": MEGABYTES,
    "g": GIGABYTES,
    "gb": GIGABYTES,
}

def resolve_unit(token: Optional[str]) -> SizeUnit:
    key = (token or "").strip().lower()
    unit = UNIT_TOKENS.get(key)
    if unit is None:
        # Неизвестный формат -> байты, без ошибки.
        if key:
            logger.debug("Unknown size format %r, falling back to bytes", token)
        return BYTES
    return unit
