from flask import Flask

from literarycorner.modules.catalog.routes import bp as catalog_bp
from literarycorner.modules.blog.routes import bp as blog_bp
from literarycorner.modules.contact.routes import bp as contact_bp


def register_api_blueprints(app: Flask) -> None:
    app.register_blueprint(catalog_bp, url_prefix="/api")
    app.register_blueprint(blog_bp, url_prefix="/api")
    app.register_blueprint(contact_bp, url_prefix="/api")

    # Root API document
    @app.get("/api")
    def api_index():
        return {
            "name": "The Literary Corner API",
            "version": "0.1.0",
            "endpoints": {
                "catalog": ["/books", "/books/<id>", "/tags"],
                "blog": ["/posts", "/posts/<id>"],
                "contact": ["/contact", "/newsletter"],
            },
        }, 200
