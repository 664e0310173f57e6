"""
CoachLog – Completion- und PB-Tracking für Trainer und ihre Kunden
------------------------------------------------------------------
Einstiegspunkt für `python app.py` bzw. `flask --app app run`.

Vor dem ersten Start:
    flask --app coachlog init-db
"""

from coachlog import create_app
from coachlog.db import init_db

app = create_app()


if __name__ == "__main__":
    with app.app_context():
        init_db()  # Tabellen anlegen, falls nicht vorhanden
    app.run(debug=True)
