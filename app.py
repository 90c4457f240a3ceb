# -*- coding: utf-8 -*-
# 默认仅本机访问（localhost）；--lan 允许局域网访问
import argparse
import logging

from app_unified import create_app
from core import config

def main(argv=None):
    ap = argparse.ArgumentParser(description="Serve a media content directory as a browsable catalog.")
    ap.add_argument("--content-root", help="directory holding one folder per category")
    ap.add_argument("--port", type=int, default=config.PORT)
    ap.add_argument("--lan", action="store_true", help="listen on 0.0.0.0 instead of 127.0.0.1")
    ap.add_argument("--debug", action="store_true")
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else getattr(logging, config.LOG_LEVEL, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    overrides = {}
    if args.content_root:
        overrides["CONTENT_ROOT"] = config.resolve_root(args.content_root)
    app = create_app(overrides)
    logging.getLogger(__name__).info("serving %s", app.config["CONTENT_ROOT"])
    app.run(host="0.0.0.0" if args.lan else "127.0.0.1", port=args.port, debug=args.debug)

if __name__ == "__main__":
    main()
