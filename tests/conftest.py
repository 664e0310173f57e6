"""
Test fixtures for coachlog.

Each test gets a fresh SQLite file in tmp_path and an active app context.
"""

import pytest

from coachlog import create_app
from coachlog.db import db, init_db
from coachlog.models.tenant import create_customer, create_trainer
from coachlog.models.workout import create_workout


@pytest.fixture
def app(tmp_path):
    app = create_app({
        "TESTING": True,
        "SQLALCHEMY_DATABASE_URI": "sqlite:///" + (tmp_path / "test.db").as_posix(),
    })
    with app.app_context():
        init_db()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def trainer(app):
    return create_trainer("Coach Carter")


@pytest.fixture
def customer(trainer):
    return create_customer(trainer.id, "Alex", "alex@example.com")


@pytest.fixture
def workout(customer):
    return create_workout(
        customer.id,
        "2024-05-01",
        "Leg Day",
        [
            "Squats 4x8-10 @ 60kg - felt heavy",
            "Plank 3x45s",
            "[CARDIO] Running | 30min | 5km | Moderate - easy pace",
        ],
    )
