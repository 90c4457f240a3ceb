import os
import re
from pathlib import Path
from typing import Union

# separators of the host filesystem; a "\" is an ordinary name character on POSIX
_SEPARATORS = re.compile("[" + re.escape("/" + os.sep + (os.altsep or "")) + "]")

def safe_name(value) -> str:
    """Reduce a client supplied identifier to a bare directory name.

    Only the last path component survives, so ``../../etc`` becomes ``etc``.
    Dot names come back empty. Whitespace is kept, it is part of the name.
    """
    parts = [p for p in _SEPARATORS.split(str(value or "")) if p]
    name = parts[-1] if parts else ""
    if name in (".", ".."):
        return ""
    return name

def resolve_child(root: Union[str, Path], *names: str) -> Path:
    path = Path(root)
    for n in names:
        clean = safe_name(n)
        if not clean:
            raise ValueError(f"invalid path component: {n!r}")
        path = path / clean
    return path

def is_under_root(path: Union[str, Path], root: Union[str, Path]) -> bool:
    try:
        return Path(path).resolve().is_relative_to(Path(root).resolve())
    except (OSError, ValueError):
        p = os.path.abspath(path)
        r = os.path.abspath(root)
        return os.path.commonpath([p, r]) == r
