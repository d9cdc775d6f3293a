from __future__ import annotations

from flask import Flask

from css_inliner.config import InlinerConfig
from css_inliner.inliner import CssToInlineStyles


def create_app(
    config: InlinerConfig | None = None,
    flask_config: dict | None = None,
) -> Flask:
    """Create and configure the Flask app."""
    app = Flask(__name__)
    app.config.update(flask_config or {})

    config = config or InlinerConfig()
    app.extensions["inliner_config"] = config
    app.extensions["inliner"] = CssToInlineStyles(config)

    from css_inliner.web.routes.api import api_bp

    app.register_blueprint(api_bp, url_prefix="/api")

    return app
