import os, re
from datetime import datetime
from pathlib import Path
from typing import List, Union
from dateutil.tz import tzlocal
from core.models import FILE_TYPES, UNKNOWN, FileEntry

# fixed English names, strftime %b/%p follow the process locale
MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")

_DIGITS = re.compile(r"(\d+)")

def detect_type(filename: str) -> str:
    ext = os.path.splitext(filename)[1].lower().lstrip(".")
    if not ext:
        return UNKNOWN
    for kind, exts in FILE_TYPES.items():
        if ext in exts:
            return kind
    return UNKNOWN

def natural_key(name: str):
    """Sort key comparing digit runs by value, case-insensitively.

    The raw name is appended so names that compare equal ("a01", "a1")
    still come out in a fixed order.
    """
    parts = _DIGITS.split(name.casefold())
    # split() alternates text/digits starting with text, so types line up
    parts[1::2] = [int(p) for p in parts[1::2]]
    return (parts, name)

def format_mtime(ts: float, tz=None) -> str:
    """Format a timestamp as ``DD Mon YYYY, hh:mm AM/PM``."""
    dt = datetime.fromtimestamp(ts, tz or tzlocal())
    hour = dt.hour % 12 or 12
    ampm = "AM" if dt.hour < 12 else "PM"
    return f"{dt.day:02d} {MONTHS[dt.month - 1]} {dt.year}, {hour:02d}:{dt.minute:02d} {ampm}"

def media_path(full: Union[str, Path], content_root: Union[str, Path], prefix: str) -> str:
    rel = os.path.relpath(str(full), str(content_root)).replace(os.sep, "/")
    return f"{prefix}/{rel}" if prefix else rel

def subdirs(directory: Union[str, Path]) -> List[Path]:
    try:
        return [p for p in Path(directory).iterdir() if p.is_dir()]
    except (FileNotFoundError, NotADirectoryError):
        return []

def list_files(directory: Union[str, Path], content_root: Union[str, Path], prefix: str) -> List[FileEntry]:
    directory = Path(directory)
    if not directory.is_dir():
        return []
    tz = tzlocal()
    rows = []
    with os.scandir(directory) as it:
        for entry in it:
            try:
                if not entry.is_file():
                    continue
                kind = detect_type(entry.name)
                if kind == UNKNOWN:
                    continue
                st = entry.stat()
            except OSError:
                continue
            rows.append(FileEntry(
                name=entry.name,
                path=media_path(entry.path, content_root, prefix),
                type=kind,
                date=format_mtime(st.st_mtime, tz),
            ))
    rows.sort(key=lambda r: natural_key(r.name))
    return rows
