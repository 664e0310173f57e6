from __future__ import annotations

import logging

from flask import Flask

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] %(name)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(app: Flask) -> logging.Logger:
    """
    Richtet den Paket-Logger `coachlog` ein (Level aus LOG_LEVEL).
    Handler wird nur einmal angehängt, auch wenn create_app() mehrfach läuft (Tests).
    """
    level = str(app.config.get("LOG_LEVEL", "INFO")).upper()

    logger = logging.getLogger("coachlog")
    logger.setLevel(level)

    if not logger.handlers:
        console = logging.StreamHandler()
        console.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
        logger.addHandler(console)

    app.logger.setLevel(level)
    return logger
