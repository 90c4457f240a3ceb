import logging
import re
from dataclasses import asdict

from flask import Blueprint, current_app, jsonify, request
from werkzeug.exceptions import HTTPException

from core.errors import CatalogError, NotFound
from core.utils.pathguard import safe_name
from services.archive import ZipArchiveBuilder, discard, export_project, stream_archive
from services.catalog import Catalog

bp = Blueprint("catalog", __name__)
logger = logging.getLogger(__name__)

JSON_MIMETYPE = "application/json; charset=UTF-8"

def _catalog() -> Catalog:
    return Catalog(current_app.config["CONTENT_ROOT"], current_app.config["MEDIA_PREFIX"])

def _json(payload, status=200):
    resp = jsonify(payload)
    resp.status_code = status
    resp.headers["Content-Type"] = JSON_MIMETYPE
    return resp

def _success(rows):
    return _json({"status": "success", "data": [asdict(r) for r in rows]})

@bp.get("/api")
def api():
    mode = request.args.get("mode", "")
    catalog = _catalog()
    catalog.ensure_root()

    if mode == "categories":
        return _success(catalog.list_categories())

    if mode == "projects":
        return _success(catalog.list_projects(request.args.get("category", "")))

    if mode == "download":
        return _download(catalog, request.args.get("category", ""), request.args.get("project", ""))

    raise NotFound("Invalid mode.")

def _download(catalog: Catalog, category: str, project: str):
    builder = ZipArchiveBuilder(tmp_dir=current_app.config.get("ARCHIVE_TMP_DIR"))
    archive = export_project(catalog, category, project, builder)
    try:
        size = archive.stat().st_size
        resp = current_app.response_class(stream_archive(archive), mimetype="application/zip")
    except Exception:
        discard(archive)
        raise
    # covers a client that disconnects before the first chunk is read
    resp.call_on_close(lambda: discard(archive))
    resp.headers["Content-Disposition"] = f'attachment; filename="{archive_name(project)}"'
    resp.headers["Content-Length"] = str(size)
    return resp

def archive_name(project: str) -> str:
    name = safe_name(project)
    return re.sub(r'["\r\n]', "", name) + ".zip"

@bp.errorhandler(Exception)
def handle_error(e):
    if isinstance(e, HTTPException):
        return e
    if isinstance(e, CatalogError):
        message = e.message
        logger.warning("%s %s: %s", request.path, request.args.get("mode", ""), message)
    else:
        message = str(e) or e.__class__.__name__
        logger.exception("unhandled error in %s", request.path)

    if request.args.get("mode") == "download":
        return current_app.response_class(f"Error: {message}", status=500, mimetype="text/plain")
    return _json({"status": "error", "message": message}, 500)
