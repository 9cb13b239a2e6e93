# posoffice/extensions.py
from flask_sqlalchemy import SQLAlchemy
from flask_bcrypt import Bcrypt
from flask_migrate import Migrate
from flask_cors import CORS

# Keep extension instances in one place to avoid circular imports
db = SQLAlchemy()
bcrypt = Bcrypt()
migrate = Migrate()
cors = CORS()


def init_cors(app):
    """Allow the dashboard origins to call /api/* with the bearer header."""
    origins = app.config.get("CORS_ORIGINS") or []
    cors.init_app(
        app,
        resources={
            r"/api/*": {
                "origins": origins,
                "supports_credentials": True,
            }
        },
    )
    app.logger.info("CORS cfg -> origins=%s", ",".join(origins) or "-")
