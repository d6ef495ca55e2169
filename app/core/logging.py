import logging
import sys

import colorlog

from app.core.config import Settings

LOG_FORMAT = "%(log_color)s%(asctime)s %(levelname)-8s [%(name)s]%(reset)s %(message)s"


def configure_logging(settings: Settings) -> None:
    """Route everything through one coloured stdout handler; DEBUG when settings.DEBUG."""
    handler = colorlog.StreamHandler(sys.stdout)
    handler.setFormatter(colorlog.ColoredFormatter(LOG_FORMAT, datefmt="%H:%M:%S"))

    root = logging.getLogger()
    root.setLevel(logging.DEBUG if settings.DEBUG else logging.INFO)
    root.handlers = [handler]

    # motor/pymongo log every heartbeat at DEBUG
    logging.getLogger("pymongo").setLevel(logging.WARNING)
