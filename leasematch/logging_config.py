"""
Logging setup for the scoring service.

configure_logging() runs once from create_app(). Scoring and breaker log
calls attach their subject through ``extra=`` (tenant_id, error_kind,
breaker); the JSON formatter lifts those onto the line so a single tenant's
scoring attempts can be filtered in the aggregator.
"""
import json
import logging
import os
import sys
from datetime import datetime, timezone

# LogRecord attributes promoted to top-level JSON keys when present
CONTEXT_FIELDS = ('tenant_id', 'error_kind', 'breaker')

# SDK and HTTP transport loggers, WARNING and above only
QUIET_LOGGERS = ('urllib3', 'openai', 'httpcore', 'httpx', 'apify_client')

TEXT_FORMAT = '[%(asctime)s] %(levelname)s %(name)s: %(message)s'


class JSONFormatter(logging.Formatter):

    def format(self, record):
        entry = {
            'timestamp': datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
        }
        for field in CONTEXT_FIELDS:
            value = getattr(record, field, None)
            if value is not None:
                entry[field] = value
        if record.exc_info and record.exc_info[0] is not None:
            entry['exception'] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


def _level_from_env():
    level = logging.getLevelName(os.getenv('LOG_LEVEL', 'INFO').upper())
    return level if isinstance(level, int) else logging.INFO


def configure_logging(app=None):
    """
    Replace root handlers with one stderr handler.

    LOG_LEVEL picks the level (unknown names fall back to INFO) and
    LOG_FORMAT=json switches to JSONFormatter. When a Flask app is given,
    its logger is routed through the root handler.
    """
    level = _level_from_env()
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    if os.getenv('LOG_FORMAT', 'text').lower() == 'json':
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(TEXT_FORMAT, datefmt='%Y-%m-%d %H:%M:%S'))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    if app is not None:
        app.logger.handlers.clear()
        app.logger.propagate = True
