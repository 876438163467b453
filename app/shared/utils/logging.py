# 📄 File: app/shared/utils/logging.py

# 🧭 Purpose (Layman Explanation):
# This file sets up the logging system that records what happens in the app in a structured way,
# so every line about a request can be traced back to that request.

# 🧪 Purpose (Technical Summary):
# Structured logging with JSON formatting (python-json-logger), request-scoped context
# variables, and a single idempotent setup entry point called at application startup.

# 🔗 Dependencies:
# - python-json-logger: JSON log formatting
# - logging: Python standard logging
# - contextvars: Request context tracking

# 🔄 Connected Modules / Calls From:
# Used by: app.main (startup), app.api.middleware.logging (request context),
# every module that logs through logging.getLogger(__name__)

import logging
import sys
from contextlib import contextmanager
from contextvars import ContextVar
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional
from uuid import uuid4

from pythonjsonlogger import jsonlogger

from app.shared.config.settings import get_settings

# Context variables for request tracking
request_id_var: ContextVar[str] = ContextVar('request_id', default='')

SERVICE_NAME = 'plantsbyjulie-api'

_logging_configured = False


class ContextualFormatter(logging.Formatter):
    """
    Plain-text formatter that adds request context to every record.
    """

    def format(self, record):
        record.request_id = request_id_var.get('')
        record.service = SERVICE_NAME
        record.timestamp = datetime.now(timezone.utc).isoformat()
        return super().format(record)


class JSONFormatter(jsonlogger.JsonFormatter):
    """
    JSON formatter for structured logging.

    Outputs logs in JSON format with consistent structure for
    log aggregation and analysis tools.
    """

    def add_fields(self, log_record, record, message_dict):
        super().add_fields(log_record, record, message_dict)
        log_record['timestamp'] = datetime.now(timezone.utc).isoformat()
        log_record['level'] = record.levelname
        log_record['logger'] = record.name
        log_record['service'] = SERVICE_NAME

        if request_id_var.get():
            log_record['request_id'] = request_id_var.get()


def setup_logging(
    log_level: Optional[str] = None,
    log_format: Optional[str] = None,
    log_file: Optional[str] = None,
    enable_console: bool = True
) -> logging.Logger:
    """
    Setup application logging configuration.

    Safe to call more than once; only the first call configures handlers.

    Args:
        log_level: Overrides LOG_LEVEL
        log_format: 'json' or 'text', overrides LOG_FORMAT
        log_file: Optional file to mirror console output into
        enable_console: Attach a stdout handler

    Returns:
        The startup logger
    """
    global _logging_configured

    if _logging_configured:
        return logging.getLogger("startup")

    settings = get_settings()
    log_level = log_level or settings.LOG_LEVEL
    log_format = log_format or settings.LOG_FORMAT
    log_file = log_file or settings.LOG_FILE

    numeric_level = getattr(logging, log_level.upper(), logging.INFO)

    if log_format.lower() == 'json':
        formatter = JSONFormatter('%(message)s')
    else:
        formatter = ContextualFormatter(
            '%(timestamp)s - %(name)s - %(levelname)s - [%(request_id)s] %(message)s'
        )

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    if enable_console:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(numeric_level)
        console_handler.setFormatter(formatter)
        root_logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(numeric_level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    logging.getLogger('httpx').setLevel(logging.WARNING)
    logging.getLogger('httpcore').setLevel(logging.WARNING)
    logging.getLogger('hpack').setLevel(logging.WARNING)

    _logging_configured = True
    return logging.getLogger("startup")


@contextmanager
def log_context(request_id: Optional[str] = None):
    """
    Context manager binding a request id to every log line inside it.

    Args:
        request_id: Request identifier, generated when omitted
    """
    if request_id is None:
        request_id = str(uuid4())

    request_token = request_id_var.set(request_id)

    try:
        yield request_id
    finally:
        request_id_var.reset(request_token)
