from __future__ import annotations
import logging
import os
import time
import stat as statmod
from typing import Callable, List, Optional
from .models import AggregateTotals, FileRecord, ScanResult

logger = logging.getLogger(__name__)

READ_CHUNK = 1024 * 1024  # 1MB

ProgressCb = Callable[[str, int, int], None]  # (current_path, files, total_bytes)

def file_size(path: str) -> int:
    # Размер считаем чтением содержимого, а не через st_size.
    n = 0
    try:
        with open(path, "rb") as f:
            while True:
                chunk = f.read(READ_CHUNK)
                if not chunk:
                    break
                n += len(chunk)
    except OSError as e:
        logger.debug("Cannot read %s (%s), counting as 0 bytes", path, e)
        return 0
    return n

def traverse(path: str,
             recursive: bool,
             totals: Optional[AggregateTotals] = None,
             progress: Optional[ProgressCb] = None) -> List[FileRecord]:
    if totals is None:
        totals = AggregateTotals()
    records: List[FileRecord] = []
    stack: List[str] = []  # каталоги, ожидающие обхода

    def add_file(file_path: str):
        rec = FileRecord(path=file_path, size=file_size(file_path))
        records.append(rec)
        totals.add(rec.size)
        if progress:
            progress(file_path, totals.files, totals.total_bytes)

    def list_dir(dir_path: str) -> list:
        # Список читается целиком, до первой записи.
        with os.scandir(dir_path) as it:
            return list(it)

    def scan_dir(entries: list):
        subdirs: List[str] = []
        for entry in entries:
            try:
                if entry.is_symlink():
                    continue
                is_file = entry.is_file(follow_symlinks=False)
                is_dir = not is_file and entry.is_dir(follow_symlinks=False)
            except OSError:
                continue

            if is_file:
                add_file(entry.path)
            elif is_dir and recursive:
                subdirs.append(entry.path)
        stack.extend(reversed(subdirs))

    # Ошибки верхнего уровня (нет пути, нет доступа) пробрасываются как есть.
    st = os.stat(path)
    mode = st.st_mode
    if statmod.S_ISDIR(mode):
        scan_dir(list_dir(path))
        while stack:
            dir_path = stack.pop()
            try:
                entries = list_dir(dir_path)
            except OSError as e:
                logger.debug("Skipping subtree %s: %s", dir_path, e)
                continue
            scan_dir(entries)
    elif statmod.S_ISREG(mode):
        add_file(path)
    else:
        logger.debug("%s is neither a regular file nor a directory, nothing to measure", path)
    return records

def scan_path(path: str,
              recursive: bool = False,
              progress: Optional[ProgressCb] = None) -> ScanResult:
    totals = AggregateTotals()
    t0 = time.perf_counter()
    records = traverse(path, recursive, totals=totals, progress=progress)
    totals.elapsed_sec = time.perf_counter() - t0
    logger.debug("Scanned %s: %d files, %d bytes in %.3fs",
                 path, totals.files, totals.total_bytes, totals.elapsed_sec)
    return ScanResult(records=records, totals=totals)
