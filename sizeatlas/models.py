from __future__ import annotations
from dataclasses import dataclass, field
from typing import List

@dataclass(frozen=True)
class FileRecord:
    path: str
    size: int  # bytes

@dataclass(frozen=True)
class SizeUnit:
    divisor: float
    label: str

    def convert(self, num_bytes: int) -> float:
        return num_bytes / self.divisor

@dataclass
class AggregateTotals:
    files: int = 0
    total_bytes: int = 0
    elapsed_sec: float = 0.0

    def add(self, size: int):
        self.files += 1
        self.total_bytes += size

@dataclass
class ScanResult:
    records: List[FileRecord] = field(default_factory=list)
    totals: AggregateTotals = field(default_factory=AggregateTotals)
