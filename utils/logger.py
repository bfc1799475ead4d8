import logging
import os
from logging.handlers import TimedRotatingFileHandler

LOG_DIR = os.path.join("assets", "logs")
LOG_FILE = "cooktime.log"

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(message)s"

# uvicorn logs every request on its own; keep the file to our tagged lines
QUIET_LOGGERS = ("uvicorn.access",)


def setup_logging(level: int = logging.INFO, log_dir: str = LOG_DIR) -> str:
    """Route the root logger to a daily log file and the console.

    Returns the log file path. Safe to call more than once.
    """
    os.makedirs(log_dir, exist_ok=True)
    log_path = os.path.join(log_dir, LOG_FILE)
    formatter = logging.Formatter(LOG_FORMAT)

    root = logging.getLogger()
    root.setLevel(level)
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()

    # one file per day, two weeks kept
    file_handler = TimedRotatingFileHandler(
        log_path, when="midnight", backupCount=14, encoding="utf-8"
    )
    console_handler = logging.StreamHandler()

    for handler in (file_handler, console_handler):
        handler.setLevel(level)
        handler.setFormatter(formatter)
        root.addHandler(handler)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logging.info(f"[LOG] Logging initialized → {log_path}")
    return log_path
