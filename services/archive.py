# -*- coding: utf-8 -*-
"""Project download archives.

Archives are written to a temporary file and closed before anything is sent,
so the response can carry a Content-Length. The caller owns the returned file
and must hand it to :func:`discard` once the response is finished.
"""
from __future__ import annotations

import logging
import os
import tempfile
import zipfile
from pathlib import Path
from typing import Optional, Protocol

from core.errors import ArchiveError
from core.utils.pathguard import is_under_root
from services.catalog import Catalog

logger = logging.getLogger(__name__)


class ArchiveBuilder(Protocol):
    def build(self, source: Path, root: Optional[Path] = None) -> Path: ...


def discard(path: Optional[Path]) -> None:
    if path is None:
        return
    try:
        os.unlink(path)
    except FileNotFoundError:
        pass
    except OSError as e:
        logger.warning("could not remove temporary archive %s: %s", path, e)


def iter_tree(source: Path, root: Optional[Path] = None):
    """Yield every file below ``source`` with its ``/`` separated relative name.

    Dangling links and links resolving outside ``root`` (default ``source``)
    are skipped.
    """
    root = root or source
    for parent, dirs, files in os.walk(source):
        dirs.sort()
        for fn in sorted(files):
            full = Path(parent) / fn
            if not full.is_file():
                logger.debug("skipping %s: not a regular file", full)
                continue
            if not is_under_root(full, root):
                logger.warning("skipping %s: resolves outside %s", full, root)
                continue
            yield full, full.relative_to(source).as_posix()


class ZipArchiveBuilder:
    """Writes the whole tree under a directory into a temporary zip file."""

    def __init__(self, tmp_dir: Optional[str] = None, compression: int = zipfile.ZIP_DEFLATED):
        self.tmp_dir = tmp_dir
        self.compression = compression

    def build(self, source: Path, root: Optional[Path] = None) -> Path:
        source = Path(source)
        if self.tmp_dir:
            Path(self.tmp_dir).mkdir(parents=True, exist_ok=True)
        try:
            fd, tmp = tempfile.mkstemp(prefix="catalog-", suffix=".zip", dir=self.tmp_dir)
        except OSError as e:
            raise ArchiveError(f"Cannot create zip file: {e}") from e
        os.close(fd)
        path = Path(tmp)
        count = 0
        try:
            with zipfile.ZipFile(path, "w", compression=self.compression) as zf:
                for full, arcname in iter_tree(source, root):
                    zf.write(full, arcname)
                    count += 1
        except (OSError, zipfile.BadZipFile, zipfile.LargeZipFile) as e:
            discard(path)
            raise ArchiveError(f"Cannot write zip file: {e}") from e
        except BaseException:
            discard(path)
            raise
        logger.info("built archive for %s: %d files, %d bytes", source.name, count, path.stat().st_size)
        return path


def export_project(catalog: Catalog, category: str, project: str,
                   builder: Optional[ArchiveBuilder] = None) -> Path:
    """Build the download archive for ``category/project`` and return its path."""
    catalog.ensure_root()
    project_dir = catalog.project_dir(category, project)
    return (builder or ZipArchiveBuilder()).build(project_dir, root=catalog.root)


def stream_archive(path: Path, chunk_size: int = 64 * 1024):
    """Yield the archive in chunks and remove it once iteration stops."""
    try:
        with open(path, "rb") as f:
            for chunk in iter(lambda: f.read(chunk_size), b""):
                yield chunk
    finally:
        discard(path)
