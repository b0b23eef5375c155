import logging
import re
import sys

from pythonjsonlogger import jsonlogger

SECRET_PATTERNS = [
    r"OPENAI_API_KEY=[^,\s]+",
    r"sk-[A-Za-z0-9_\-]{20,}",
]


def redact(text):
    for pattern in SECRET_PATTERNS:
        text = re.sub(pattern, "***REDACTED***", text)
    return text


class RedactingFilter(logging.Filter):
    def filter(self, record):
        record.msg = redact(record.getMessage())
        record.args = ()
        return True


class RedactingJsonFormatter(jsonlogger.JsonFormatter):
    """JSON formatter that also masks secrets inside logged tracebacks."""

    def formatException(self, ei):
        return redact(super().formatException(ei))


def configure_logging(level="INFO"):
    """Send JSON log lines to stdout. Safe to call more than once."""
    root = logging.getLogger()
    root.setLevel(level)
    if any(getattr(h, "_ctc_handler", False) for h in root.handlers):
        return

    handler = logging.StreamHandler(sys.stdout)
    handler._ctc_handler = True
    handler.setFormatter(
        RedactingJsonFormatter(
            "%(asctime)s %(levelname)s %(name)s %(message)s",
            rename_fields={"asctime": "timestamp", "levelname": "level", "name": "logger_name"},
            datefmt="%Y-%m-%dT%H:%M:%S%z",
        )
    )
    handler.addFilter(RedactingFilter())
    root.addHandler(handler)

    for noisy in ("openai", "httpx", "urllib3", "werkzeug"):
        logging.getLogger(noisy).setLevel(logging.WARNING)
