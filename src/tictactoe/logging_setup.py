import logging
import os


def setup_logging() -> None:
    log_level = (os.getenv("TICTACTOE_LOG_LEVEL", "INFO") or "INFO").upper()

    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(log_level)

    fmt = logging.Formatter("%(asctime)s | %(levelname)s | %(name)s | %(message)s")
    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(fmt)
    root.addHandler(stream_handler)
