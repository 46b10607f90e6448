from flask import Flask
from flask_migrate import Migrate
from mamaalert.extensions import db, cors
from mamaalert.routes import register_routes
from mamaalert.services.session_service import SessionRegistry


def create_app(config_object="config.Config"):
    app = Flask(__name__)
    app.config.from_object(config_object)

    uri = app.config.get("SQLALCHEMY_DATABASE_URI") or ""
    if uri.startswith("postgres"):
        app.config.setdefault("SQLALCHEMY_ENGINE_OPTIONS", app.config["POSTGRES_ENGINE_OPTIONS"])

    # Initialize database
    db.init_app(app)

    # Initialize Flask-Migrate
    Migrate(app, db)

    # CORS Configuration
    cors.init_app(app,
                  origins=app.config.get("CORS_ORIGINS"),
                  supports_credentials=True,
                  allow_headers=["Content-Type", "Authorization"],
                  methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
                  expose_headers=["Content-Type", "Authorization"])

    # Per-user session state (mode store, roadmap flags)
    SessionRegistry(app)

    register_routes(app)

    return app
