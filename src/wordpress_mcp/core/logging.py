import logging
from typing import Any, Iterable, Optional, TextIO

LOG_EXTRA_FIELDS = (
    "site",
    "resource",
    "tool",
    "method",
    "url",
    "status",
    "duration_ms",
    "error_kind",
)

# httpx logs every request URL at INFO, query-string credentials included
QUIET_LOGGERS = ("httpx", "httpcore")


def logfmt_value(val: Any) -> str:
    if isinstance(val, (bool, int, float)):
        return str(val)
    text = str(val).replace("\n", "\\n")
    if not text or any(c in text for c in ' ="'):
        text = '"' + text.replace('"', '\\"') + '"'
    return text


class LogfmtFormatter(logging.Formatter):
    """
    One `key=value` line per record: level, logger, event (the message),
    then whichever of `fields` the record carries.
    """

    def __init__(self, fields: Iterable[str] = LOG_EXTRA_FIELDS):
        super().__init__()
        self.fields = tuple(fields)

    def format(self, record: logging.LogRecord) -> str:
        pairs = [
            ("level", record.levelname.lower()),
            ("logger", record.name),
        ]
        msg = record.getMessage()
        if msg:
            pairs.append(("event", msg))
        pairs.extend(
            (key, getattr(record, key))
            for key in self.fields
            if getattr(record, key, None) is not None
        )
        if record.exc_info and record.exc_info[0] is not None:
            pairs.append(("exc_type", record.exc_info[0].__name__))

        return " ".join(f"{key}={logfmt_value(val)}" for key, val in pairs)


def setup_logging(level: str = "INFO", stream: Optional[TextIO] = None) -> None:
    """Route root logging through a single logfmt handler."""
    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)

    # stdout belongs to the stdio transport; StreamHandler defaults to stderr
    handler = logging.StreamHandler(stream)
    handler.setFormatter(LogfmtFormatter())
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


__all__ = ["setup_logging", "LogfmtFormatter", "LOG_EXTRA_FIELDS", "logfmt_value"]
