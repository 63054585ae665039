import logging
import sys


def setup_logging(level: str = "INFO") -> None:
    """Configure le logger racine (une seule fois, au démarrage de l'app)."""
    root = logging.getLogger()
    root.setLevel(level.upper())

    # éviter les doublons si uvicorn --reload recharge le module
    for h in list(root.handlers):
        root.removeHandler(h)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(
        fmt="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    ))
    root.addHandler(handler)

    # sqlalchemy est très bavard en DEBUG
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
