import io
from pathlib import Path

from flask import Blueprint, abort, current_app, request, send_file, send_from_directory
from PIL import Image

from core.utils.iterfiles import detect_type
from core.utils.pathguard import is_under_root

bp = Blueprint("media", __name__)

def _media_file(media_path: str) -> Path:
    prefix = current_app.config["MEDIA_PREFIX"] + "/"
    if not media_path.startswith(prefix):
        abort(404)
    root = current_app.config["CONTENT_ROOT"]
    p = Path(root) / media_path[len(prefix):]
    if not is_under_root(p, root):
        abort(403)
    return p

@bp.get("/<prefix>/<path:filename>")
def serve_file(prefix, filename):
    if prefix != current_app.config["MEDIA_PREFIX"]:
        abort(404)
    return send_from_directory(current_app.config["CONTENT_ROOT"], filename, as_attachment=False)

@bp.get("/thumb")
def thumb():
    path = request.args.get("path") or ""
    p = _media_file(path)
    if detect_type(p.name) != "image" or not p.is_file():
        abort(404)
    try:
        with Image.open(p) as im:
            im.thumbnail(tuple(current_app.config["THUMB_SIZE"]))
            buf = io.BytesIO()
            im.convert("RGB").save(buf, format="JPEG")
            buf.seek(0)
    except (OSError, ValueError):
        abort(404)
    return send_file(buf, mimetype="image/jpeg")
