from __future__ import annotations

import logging

from flask import Blueprint, current_app, jsonify, request

from css_inliner import __version__
from css_inliner.errors import DocumentError

api_bp = Blueprint("api", __name__)

logger = logging.getLogger(__name__)


@api_bp.after_request
def add_cors_headers(response):
    """Allow cross-origin requests to the API."""
    response.headers["Access-Control-Allow-Origin"] = "*"
    response.headers["Access-Control-Allow-Headers"] = "Content-Type"
    response.headers["Access-Control-Allow-Methods"] = "GET, POST, OPTIONS"
    return response


@api_bp.route("/convert", methods=["OPTIONS"])
def convert_preflight():
    """Handle CORS preflight for conversion."""
    return "", 204


@api_bp.route("/convert", methods=["POST"])
def convert():
    """Inline the CSS of a posted HTML document."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict) or not isinstance(data.get("html"), str):
        return jsonify({"error": "html (string) required"}), 400

    css = data.get("css")
    if css is not None and not isinstance(css, str):
        return jsonify({"error": "css must be a string"}), 400

    inliner = current_app.extensions["inliner"]
    try:
        html = inliner.convert(data["html"], css)
    except DocumentError as exc:
        logger.info("Rejected document: %s", exc)
        return jsonify({"error": str(exc)}), 422

    return jsonify({"html": html})


@api_bp.route("/health")
def health():
    return jsonify({"status": "ok", "version": __version__})
