# coachlog/db.py
from __future__ import annotations

import uuid
from datetime import datetime, timezone

import click
from flask import Flask
from flask_sqlalchemy import SQLAlchemy

db = SQLAlchemy()


def new_id() -> str:
    return str(uuid.uuid4())


def utcnow() -> datetime:
    """Naive UTC timestamp (seconds), passend zu den DateTime-Spalten."""
    return datetime.now(timezone.utc).replace(tzinfo=None, microsecond=0)


def utcnow_iso() -> str:
    """UTC timestamp ISO (seconds) für JSON-Dokumente (exercise_completions)."""
    return utcnow().isoformat(timespec="seconds")


def init_db() -> None:
    """Erzeugt alle Tabellen, falls sie nicht existieren."""
    # Modelle importieren, damit sie in db.metadata registriert sind
    from . import models  # noqa: F401
    db.create_all()


def register_cli(app: Flask) -> None:
    @app.cli.command("init-db")
    def init_db_command() -> None:
        """Create the database tables."""
        init_db()
        click.echo("Datenbank initialisiert.")

    @app.cli.command("seed-exercises")
    @click.argument("trainer_id")
    def seed_exercises_command(trainer_id: str) -> None:
        """Seed the default exercise catalogue for TRAINER_ID."""
        from .seed import seed_default_exercises
        created = seed_default_exercises(trainer_id)
        click.echo(f"{created} Übungen angelegt.")
