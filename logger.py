# logger.py
import logging
import os
import sys

# stderr is unbuffered, which keeps log lines in order under gunicorn/flask run
logging.basicConfig(
    level=os.getenv("THINKBOT_LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    handlers=[logging.StreamHandler(sys.stderr)]
)

# werkzeug logs every request at INFO
logging.getLogger("werkzeug").setLevel(logging.WARNING)

logger = logging.getLogger("thinkbot")


def set_level(level: str) -> None:
    logger.setLevel(level.upper())
