"""Application-wide logging initialization

Log records are written to stdout as one JSON object per line:
{
    "timestamp": "2025-12-26T12:00:00.000Z",
    "level": "INFO",
    "logger": "shortlinks.store",
    "message": "Short URL created",
    "shortCode": "abc123"
}
"""

import json
import logging
import logging.config
import time
from datetime import datetime, timezone

from flask import g, request


class JsonFormatter(logging.Formatter):
    """JSON formatter that includes LogRecord extras"""

    STANDARD_ATTRS = frozenset(
        {
            'args',
            'asctime',
            'created',
            'exc_info',
            'exc_text',
            'filename',
            'funcName',
            'levelname',
            'levelno',
            'lineno',
            'module',
            'msecs',
            'msg',
            'name',
            'pathname',
            'process',
            'processName',
            'relativeCreated',
            'stack_info',
            'thread',
            'threadName',
            'taskName',
        }
    )

    def format(self, record: logging.LogRecord) -> str:
        # fmt: off
        timestamp = datetime.fromtimestamp(record.created, tz=timezone.utc) \
                            .isoformat(timespec="milliseconds") \
                            .replace("+00:00", "Z")
        # fmt: on

        log = {
            'timestamp': timestamp,
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
        }

        for key, value in record.__dict__.items():
            if key not in self.STANDARD_ATTRS:
                log[key] = value

        if record.exc_info:
            log['exc_info'] = self.formatException(record.exc_info)

        return json.dumps(log, default=str)


def initialize_logging(level: str = 'INFO') -> None:
    logging.config.dictConfig(
        {
            'version': 1,
            'disable_existing_loggers': False,
            'formatters': {
                'json': {
                    '()': JsonFormatter,
                }
            },
            'handlers': {
                'stdout': {
                    'class': 'logging.StreamHandler',
                    'formatter': 'json',
                    'stream': 'ext://sys.stdout',
                }
            },
            'root': {
                'level': level,
                'handlers': ['stdout'],
            },
        }
    )


def register_request_logging(app, logger: logging.Logger = None) -> None:
    """Log every request on arrival and on completion."""
    logger = logger or logging.getLogger('shortlinks.web')

    @app.before_request
    def log_request():
        g.request_started = time.perf_counter()
        logger.info(
            'Incoming request',
            extra={
                'method': request.method,
                'path': request.path,
                'userAgent': request.headers.get('User-Agent'),
                'ip': request.remote_addr,
            },
        )

    @app.after_request
    def log_response(response):
        duration_ms = (time.perf_counter() - g.get('request_started', time.perf_counter())) * 1000
        logger.info(
            'Request completed',
            extra={
                'method': request.method,
                'path': request.path,
                'statusCode': response.status_code,
                'durationMs': round(duration_ms, 2),
                'success': response.status_code < 400,
            },
        )
        return response
