# -*- coding: utf-8 -*-
from flask import Flask, request, redirect, jsonify

from api.blueprints import register_blueprints
from core import config

# 旧版前端直接请求 PHP 脚本，这里统一做 307 → /api 的兼容重写
LEGACY_API_PATHS = {"/api.php", "/api/"}

DEFAULT_CONFIG = {
    "CONTENT_ROOT": config.CONTENT_ROOT,
    "MEDIA_PREFIX": config.MEDIA_PREFIX,
    "ARCHIVE_TMP_DIR": config.ARCHIVE_TMP_DIR,
    "THUMB_SIZE": config.THUMB_SIZE,
    "ALLOW_ORIGIN": config.ALLOW_ORIGIN,
    "NO_CACHE": config.NO_CACHE,
}

def create_app(test_config: dict | None = None) -> Flask:
    app = Flask(__name__, static_folder=None)
    app.config.update(DEFAULT_CONFIG)
    if test_config:
        app.config.update(test_config)
    app.config["MEDIA_PREFIX"] = str(app.config["MEDIA_PREFIX"]).strip("/")
    # keep field order of the catalog records in the JSON output
    app.json.sort_keys = False

    register_blueprints(app)

    # --------------------------- Response Headers ---------------------------
    @app.after_request
    def _common_headers(resp):
        if app.config.get("ALLOW_ORIGIN"):
            resp.headers["Access-Control-Allow-Origin"] = app.config["ALLOW_ORIGIN"]
        if app.config.get("NO_CACHE"):
            resp.headers["Cache-Control"] = "no-cache, no-store, must-revalidate"
            resp.headers["Pragma"] = "no-cache"
            resp.headers["Expires"] = "0"
        return resp

    # --------------------------- Legacy Fallback Rewrites ---------------------------
    @app.before_request
    def _rewrite_legacy_api_paths():
        """
        兼容旧前端：fetch('api.php?mode=...') 307 重定向到 /api，保留查询参数。
        """
        if request.path in LEGACY_API_PATHS:
            target = "/api"
            if request.query_string:
                return redirect(target + "?" + request.query_string.decode("utf-8", errors="ignore"), code=307)
            return redirect(target, code=307)
        return None

    # --------------------------- 简单健康检查 ---------------------------
    @app.get("/healthz")
    def health():
        return jsonify({"ok": True})

    return app


if __name__ == "__main__":
    app = create_app()
    app.run(host="0.0.0.0", port=config.PORT, debug=False)
