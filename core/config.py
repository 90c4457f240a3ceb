# -*- coding: utf-8 -*-
import os
from pathlib import Path
try:
    import tomllib  # py3.11+
except Exception:
    import tomli as tomllib

BASE_DIR = Path(__file__).resolve().parents[1]

def load_config():
    cfg_path = BASE_DIR / "config.toml"
    if not cfg_path.exists():
        cfg_path = BASE_DIR / "config_example.toml"
    if not cfg_path.exists():
        return {}
    with open(cfg_path, "rb") as f:
        return tomllib.load(f)

def resolve_root(value: str) -> str:
    p = Path(value).expanduser()
    if not p.is_absolute():
        p = BASE_DIR / p
    return str(p.resolve())

CFG = load_config()
CONTENT_ROOT = resolve_root(os.environ.get("CONTENT_ROOT") or CFG.get("content_root", "content"))
MEDIA_PREFIX = str(CFG.get("media_prefix", "content")).strip("/") or "content"
PORT = int(CFG.get("port", 5005))
LOG_LEVEL = str(CFG.get("log_level", "INFO")).upper()
ARCHIVE_TMP_DIR = CFG.get("archive_tmp_dir") or None
THUMB_SIZE = tuple(CFG.get("thumb_size", (320, 240)))
HEADERS = CFG.get("headers", {"allow_origin": "*", "no_cache": True})
ALLOW_ORIGIN = HEADERS.get("allow_origin", "*")
NO_CACHE = bool(HEADERS.get("no_cache", True))
