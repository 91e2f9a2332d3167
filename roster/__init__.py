from flask import Flask, jsonify
from flask_sqlalchemy import SQLAlchemy
from flask_migrate import Migrate
from flask_marshmallow import Marshmallow
import os

# Extensions
db = SQLAlchemy()
migrate = Migrate()
ma = Marshmallow()


def create_app(config_name=None, overrides=None):
    if config_name is None:
        config_name = os.environ.get("FLASK_CONFIG", "default")

    app = Flask(__name__)

    from config import config

    app.config.from_object(config[config_name])
    if overrides:
        app.config.update(overrides)
    app.logger.setLevel(app.config.get("LOG_LEVEL", "INFO"))

    # Envelope keys keep the order the service builds them in
    app.json.sort_keys = False

    db.init_app(app)
    migrate.init_app(app, db)
    ma.init_app(app)

    # Import models so Flask-Migrate picks them up
    from roster.models import Student  # noqa: F401

    from roster.api.students_bp import students_bp

    app.register_blueprint(students_bp)

    from roster.cli import register_commands

    register_commands(app)

    @app.route("/health")
    def health():
        return jsonify({"status": "ok"}), 200

    app.logger.debug(f"[create_app] Application created with '{config_name}' config")

    return app
