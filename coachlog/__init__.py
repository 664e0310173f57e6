from pathlib import Path
from flask import Flask
from sqlalchemy import text


def create_app(test_config: dict | None = None) -> Flask:
    app = Flask(__name__, instance_relative_config=True)

    # Basis-Konfiguration (Defaults aus coachlog/config.py)
    app.config.from_object("coachlog.config")
    app.config.from_pyfile("config.py", silent=True)
    app.config.from_prefixed_env("COACHLOG")

    # Test-Config überschreibt alles (z. B. für Tests)
    if test_config:
        app.config.update(test_config)

    # Instance-Ordner sicherstellen
    Path(app.instance_path).mkdir(parents=True, exist_ok=True)

    if not app.config.get("SQLALCHEMY_DATABASE_URI"):
        db_path = Path(app.instance_path) / "coachlog.db"
        app.config["SQLALCHEMY_DATABASE_URI"] = "sqlite:///" + db_path.as_posix()

    from .log import configure_logging
    configure_logging(app)

    # DB-Initialisierung / CLI
    from .db import db, register_cli
    db.init_app(app)
    register_cli(app)

    from .errors import register_error_handlers
    register_error_handlers(app)

    # Healthcheck
    @app.get("/health")
    def health():
        db.session.execute(text("SELECT 1"))
        return {"status": "ok"}

    # Blueprints registrieren
    from .blueprints.workouts import bp as workouts_bp
    app.register_blueprint(workouts_bp)

    from .blueprints.exercises import bp as exercises_bp
    app.register_blueprint(exercises_bp)

    return app
