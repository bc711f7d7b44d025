"""
app.py — Flask application factory for the COE Generator backend.
"""

import logging
from datetime import datetime, timezone
from flask import Flask, jsonify, request, g
from config import get_config


def create_app(config_object=None):
    app = Flask(__name__)
    app.config.from_object(config_object or get_config())

    _configure_logging(app)
    _register_blueprints(app)
    _register_error_handlers(app)
    _register_hooks(app)
    _register_health_check(app)

    return app


# ─── Logging ──────────────────────────────────────────────────────────────────

def _configure_logging(app):
    level = logging.DEBUG if app.config.get("DEBUG") else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    app.logger.setLevel(level)


# ─── Blueprints ───────────────────────────────────────────────────────────────

def _register_blueprints(app):
    from routes.coe import coe_bp

    app.register_blueprint(coe_bp, url_prefix="/api")


# ─── Error handlers ───────────────────────────────────────────────────────────

def _register_error_handlers(app):

    @app.errorhandler(400)
    def bad_request(e):
        return jsonify({"error": "Bad request."}), 400

    @app.errorhandler(404)
    def not_found(e):
        return jsonify({"error": f"Route not found: {request.path}"}), 404

    @app.errorhandler(405)
    def method_not_allowed(e):
        return jsonify({"error": "Method not allowed."}), 405

    @app.errorhandler(413)
    def body_too_large(e):
        return jsonify({"error": "Request body too large."}), 413

    @app.errorhandler(500)
    def internal_error(e):
        # Flask has already logged the traceback of an unhandled exception
        app.logger.error(f"500 on {request.method} {request.path}: {e}")
        return jsonify({"error": "An internal server error occurred."}), 500


# ─── Request / response hooks ─────────────────────────────────────────────────

def _register_hooks(app):

    @app.before_request
    def log_request():
        g.request_start = datetime.now(timezone.utc)
        app.logger.debug(f"--> {request.method} {request.path}")

    @app.after_request
    def add_headers(response):
        # Security headers
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"

        # CORS — the form is served from a different origin than this API
        origin = _allowed_origin(app, request.headers.get("Origin"))
        if origin:
            response.headers["Access-Control-Allow-Origin"] = origin
            response.headers["Access-Control-Allow-Headers"] = "Content-Type"
            response.headers["Access-Control-Allow-Methods"] = "GET, POST, OPTIONS"
            # Browsers hide Content-Disposition from scripts unless exposed
            response.headers["Access-Control-Expose-Headers"] = "Content-Disposition"
            if origin != "*":
                response.headers["Vary"] = "Origin"

        if hasattr(g, "request_start"):
            elapsed = (datetime.now(timezone.utc) - g.request_start).total_seconds() * 1000
            app.logger.debug(f"<-- {response.status_code}  ({elapsed:.1f}ms)")

        return response

    @app.after_request
    def handle_options(response):
        """Answer CORS preflight requests."""
        if request.method == "OPTIONS":
            response.status_code = 200
        return response


def _allowed_origin(app, request_origin):
    allowed = [o.strip() for o in app.config.get("CORS_ALLOWED_ORIGINS", "").split(",") if o.strip()]
    if "*" in allowed:
        return "*"
    if request_origin and request_origin in allowed:
        return request_origin
    return None


# ─── Health check ─────────────────────────────────────────────────────────────

def _register_health_check(app):

    @app.route("/api/health")
    def health():
        """
        GET /api/health
        Liveness probe; no dependencies are checked.
        """
        return jsonify({
            "status": "ok",
            "timestamp": datetime.now(timezone.utc).isoformat(),
        })

    @app.route("/")
    def index():
        return jsonify({
            "service": "COE Generator",
            "status": "running",
            "endpoints": ["POST /api/generate-coe", "GET /api/offices", "GET /api/health"],
        })


# ─── Entry point ──────────────────────────────────────────────────────────────

if __name__ == "__main__":
    app = create_app()
    app.logger.info(f"COE Generator backend running on http://localhost:{app.config['PORT']}")
    app.run(debug=app.config.get("DEBUG", False), port=app.config["PORT"], host="0.0.0.0")
