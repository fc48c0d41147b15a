from __future__ import annotations
from .models import SizeUnit

def format_magnitude(value: float) -> str:
    return f"{value:.2f}"

def format_size(num_bytes: int, unit: SizeUnit) -> str:
    return f"{format_magnitude(unit.convert(num_bytes))} {unit.label}"

def format_elapsed(seconds: float) -> str:
    if seconds < 0:
        seconds = 0.0
    return f"{seconds:.2f}s"
