"""
CoachLog – Standardkonfiguration
--------------------------------
Defaults, die `create_app()` per `app.config.from_object("coachlog.config")`
lädt. Überschreiben lässt sich alles über:

  1. `instance/config.py` (lokale bzw. sensible Einstellungen)
  2. Umgebungsvariablen mit Präfix `COACHLOG_`, z. B. `COACHLOG_LOG_LEVEL=DEBUG`
  3. das `test_config`-Mapping beim Aufruf der Factory
"""

# ⚙️ Flask-Grundeinstellungen
SECRET_KEY = "dev"                  # Bitte ändern für Produktivbetrieb!
TESTING = False

# 💾 Datenbank
# Leer = SQLite-Datei `coachlog.db` im Instance-Ordner
SQLALCHEMY_DATABASE_URI = None
SQLALCHEMY_TRACK_MODIFICATIONS = False

# 📝 Logging
LOG_LEVEL = "INFO"
