"""
Logging setup for the Jobly API.

JSON records (python-json-logger) in production, one plain line per record
in development. SQL sent through the store client is logged by the
``jobly.core.store`` logger at DEBUG and is switched on separately with
``log_sql`` so the rest of the app can stay at INFO.
"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict

from pythonjsonlogger import jsonlogger

from jobly import __version__

STORE_LOGGER = "jobly.core.store"

PLAIN_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """
    JSON formatter stamping every record with service, level and source.
    """

    def __init__(self, *args, service: str = "jobly-api", **kwargs):
        super().__init__(*args, **kwargs)
        self.service = service

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)

        log_record['timestamp'] = datetime.fromtimestamp(record.created, timezone.utc).isoformat()
        log_record['service'] = self.service
        log_record['version'] = __version__
        log_record['level'] = record.levelname
        log_record['logger'] = record.name
        log_record['function'] = record.funcName

        # Source location only where someone will go looking for it
        if record.levelno >= logging.WARNING:
            log_record['line'] = record.lineno
            log_record['pathname'] = record.pathname


def setup_logging(log_level: str = "INFO", json_logs: bool = True, log_sql: bool = False) -> None:
    """
    Configure the root logger with a single stdout handler.

    Args:
        log_level: Root level name (DEBUG, INFO, WARNING, ...)
        json_logs: JSON records when True, plain lines otherwise
        log_sql: Log every statement run through the store client
    """
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    if json_logs:
        handler.setFormatter(CustomJsonFormatter('%(timestamp)s %(level)s %(logger)s %(message)s'))
    else:
        handler.setFormatter(logging.Formatter(PLAIN_FORMAT, datefmt='%Y-%m-%d %H:%M:%S'))

    root_logger.setLevel(log_level.upper())
    root_logger.addHandler(handler)

    logging.getLogger(STORE_LOGGER).setLevel(logging.DEBUG if log_sql else logging.INFO)

    # SQLAlchemy's own echo would duplicate the store client's statement log
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("passlib").setLevel(logging.ERROR)
