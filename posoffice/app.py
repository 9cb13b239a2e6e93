# posoffice/app.py
import logging

from flask import Flask, jsonify, request
from werkzeug.exceptions import MethodNotAllowed, NotFound

from posoffice.config import Config

# Extensions
from posoffice.extensions import db, bcrypt, migrate, init_cors

from posoffice.api.routing import build_api_blueprint
from posoffice.cli import register_cli
from posoffice import models as _models  # noqa: F401

# Show INFO logs even outside the werkzeug access log
logging.basicConfig(level=logging.INFO)


def create_app(config_object=Config) -> Flask:
    app = Flask(__name__)
    app.config.from_object(config_object)
    app.logger.setLevel(logging.INFO)

    # Init extensions
    db.init_app(app)
    migrate.init_app(app, db)
    bcrypt.init_app(app)
    init_cors(app)

    app.register_blueprint(build_api_blueprint())
    register_cli(app)

    @app.before_request
    def _log_request():
        app.logger.info(
            "Received request: %s %s %s",
            request.method,
            request.path,
            request.args.to_dict(flat=False),
        )

    @app.errorhandler(NotFound)
    def _not_found(_e):
        return jsonify({"error": "Route not found"}), 404

    @app.errorhandler(MethodNotAllowed)
    def _method_not_allowed(e):
        resp = jsonify({"error": f"Method {request.method} Not Allowed"})
        resp.status_code = 405
        resp.headers["Allow"] = ", ".join(sorted(e.valid_methods or []))
        return resp

    @app.errorhandler(500)
    def _server_error(_e):
        return jsonify({"error": "An error occurred while processing your request"}), 500

    return app


# For gunicorn
app = create_app()


if __name__ == "__main__":
    app.run(debug=True)
