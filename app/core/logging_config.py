"""
Structured logging configuration for the Vestibular API.

JSON logs carry the service name and, for repository and endpoint modules,
the layer the record came from, so enrollment writes can be traced from
the route down to the commit.
"""

import logging
import sys
from typing import Any, Dict
from datetime import datetime
from pythonjsonlogger import jsonlogger

# Logger name prefix -> layer reported in JSON logs
APP_LAYERS = {
    "app.api": "api",
    "app.crud": "repository",
    "app.core": "core",
    "main": "app",
}


def layer_for(logger_name: str) -> str:
    for prefix, layer in APP_LAYERS.items():
        if logger_name == prefix or logger_name.startswith(prefix + "."):
            return layer
    return "external"


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """
    JSON formatter that stamps every record with the service, the
    application layer and source location.
    """

    def __init__(self, *args, service: str = "vestibular-api", **kwargs):
        super().__init__(*args, **kwargs)
        self.service = service

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)

        log_record['timestamp'] = datetime.utcnow().isoformat() + 'Z'
        log_record['service'] = self.service
        log_record['layer'] = layer_for(record.name)
        log_record['level'] = record.levelname
        log_record['logger'] = record.name
        log_record['module'] = record.module
        log_record['function'] = record.funcName

        # Add line number for errors/warnings
        if record.levelno >= logging.WARNING:
            log_record['line'] = record.lineno
            log_record['pathname'] = record.pathname


def setup_logging(log_level: str = "INFO", json_logs: bool = True, service: str = "vestibular-api") -> None:
    """
    Configure logging for the API process.

    Args:
        log_level: Level for the application's own loggers (DEBUG, INFO, ...)
        json_logs: JSON formatting (production) or plain text (development)
        service: Service name stamped on JSON records
    """
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)

    if json_logs:
        formatter = CustomJsonFormatter(
            '%(timestamp)s %(level)s %(logger)s %(module)s %(funcName)s %(message)s',
            service=service,
        )
    else:
        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )

    console_handler.setFormatter(formatter)

    level = getattr(logging, log_level.upper())
    root_logger.setLevel(level)
    root_logger.addHandler(console_handler)

    for prefix in APP_LAYERS:
        logging.getLogger(prefix).setLevel(level)

    # SQL echo is controlled by DB_ECHO, keep the engine logger quiet otherwise
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("alembic").setLevel(logging.INFO)
    logging.getLogger("uvicorn.access").setLevel(logging.INFO)
