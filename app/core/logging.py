# app/core/logging.py
import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

def setup_logging(level: str = "INFO") -> None:
    """Configura o logger raiz uma única vez (handler em stdout)."""
    root = logging.getLogger()
    root.setLevel(level.upper())
    if any(getattr(h, "_enrollment_api", False) for h in root.handlers):
        return
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler._enrollment_api = True  # type: ignore[attr-defined]
    root.addHandler(handler)
