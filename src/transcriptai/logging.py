import logging
import os
import sys

from pythonjsonlogger import jsonlogger

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s %(trace_id)s %(span_id)s"
SERVER_LOGGERS = ("uvicorn", "uvicorn.access", "uvicorn.error")


def setup_logging(level: str | None = None):
    """
    Configures structured JSON logging on stdout and returns the root logger.

    Uvicorn's loggers are routed through the same handler so request logs and
    transcription logs share one format. trace_id and span_id are filled in by
    ddtrace log injection when tracing is enabled and are null otherwise.

    Args:
        level: Log level name; defaults to the LOG_LEVEL environment variable,
            then INFO.

    Returns:
        logging.Logger: The configured root logger instance.
    """
    level = (level or os.getenv("LOG_LEVEL", "INFO")).upper()

    stream_handler = logging.StreamHandler(sys.stdout)
    stream_handler.setFormatter(jsonlogger.JsonFormatter(LOG_FORMAT))

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers = [stream_handler]

    for logger_name in SERVER_LOGGERS:
        server_logger = logging.getLogger(logger_name)
        server_logger.setLevel(level)
        server_logger.handlers = [stream_handler]
        server_logger.propagate = False

    return root_logger
