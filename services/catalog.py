# -*- coding: utf-8 -*-
"""Catalog views over the content directory.

Categories are the folders directly under the content root, projects the
folders directly under a category. Nothing is cached: every call walks the
filesystem again.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

from core.errors import BadRequest, ConfigError, NotFound
from core.models import FINAL_DIR, TAGS_FILE, Category, Preview, Project
from core.utils.iterfiles import list_files, natural_key, subdirs
from core.utils.pathguard import resolve_child, safe_name

logger = logging.getLogger(__name__)


def read_tags(project_dir: Path) -> List[str]:
    tags_file = Path(project_dir) / TAGS_FILE
    if not tags_file.is_file():
        return []
    with open(tags_file, "r", encoding="utf-8-sig", errors="replace") as f:
        raw = f.read()
    # duplicates are kept in file order
    return [t.strip() for t in raw.split(",") if t.strip()]


class Catalog:
    """Builds category and project listings for one content root."""

    def __init__(self, content_root: str | Path, media_prefix: str = "content"):
        self.root = Path(content_root)
        self.prefix = media_prefix

    def ensure_root(self) -> None:
        if not self.root.is_dir():
            raise ConfigError("Content directory not found.")

    def files_in(self, directory: Path):
        return list_files(directory, self.root, self.prefix)

    def find_preview(self, category_dir: Path) -> Optional[Preview]:
        final_dir = Path(category_dir) / FINAL_DIR
        if not final_dir.is_dir():
            return None
        for f in self.files_in(final_dir):
            if f.type == "video":
                return Preview(path=f.path, date=f.date)
        return None

    def list_categories(self) -> List[Category]:
        self.ensure_root()
        out = []
        for d in subdirs(self.root):
            preview = self.find_preview(d)
            out.append(Category(
                name=d.name,
                preview=preview.path if preview else None,
                date=preview.date if preview else None,
            ))
        out.sort(key=lambda c: natural_key(c.name))
        return out

    def category_dir(self, category: str) -> Path:
        if not category:
            raise BadRequest("Category is required.")
        if not safe_name(category):
            raise NotFound("Category not found.")
        path = resolve_child(self.root, category)
        if not path.is_dir():
            raise NotFound("Category not found.")
        return path

    def project_dir(self, category: str, project: str) -> Path:
        if not category or not project:
            raise BadRequest("Category and Project required.")
        if not safe_name(category) or not safe_name(project):
            raise NotFound("Project not found.")
        path = resolve_child(self.root, category, project)
        if not path.is_dir():
            raise NotFound("Project not found.")
        return path

    def list_projects(self, category: str) -> List[Project]:
        self.ensure_root()
        cat_dir = self.category_dir(category)
        out = []
        for d in subdirs(cat_dir):
            out.append(Project(name=d.name, files=self.files_in(d), tags=read_tags(d)))
        out.sort(key=lambda p: natural_key(p.name))
        logger.debug("category %s: %d projects", cat_dir.name, len(out))
        return out
