def register_blueprints(app):
    from .catalog import bp as catalog_bp
    from .media import bp as media_bp

    app.register_blueprint(catalog_bp)
    # files are served under the same prefix their listed paths start with
    app.register_blueprint(media_bp)
