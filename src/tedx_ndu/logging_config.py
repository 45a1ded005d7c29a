"""
Logging setup shared by the API server, uvicorn and the CLI.

Records below WARNING go to stdout, WARNING and above to stderr. The same
dictConfig is handed to ``uvicorn.run`` so uvicorn's error and access loggers
follow that split instead of installing their own handlers. Per-request lines
come from ``RequestLoggingMiddleware``, so uvicorn's access log stays quiet
unless ACCESS_LOG is switched on.
"""

import logging
import logging.config
from typing import Optional

from tedx_ndu.config import config

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
ACCESS_FORMAT = '%(asctime)s %(levelname)s uvicorn.access: %(client_addr)s "%(request_line)s" %(status_code)s'


class BelowWarningFilter(logging.Filter):
    """Keep DEBUG/INFO records; WARNING and above belong on stderr"""

    def filter(self, record):
        return record.levelno < logging.WARNING


def build_log_config(
    log_level: Optional[str] = None,
    sql_log_level: Optional[str] = None,
    access_log: Optional[bool] = None,
) -> dict:
    """
    Build the dictConfig used by the app and by uvicorn.

    Args:
        log_level: Root and uvicorn level, defaults to LOG_LEVEL
        sql_log_level: Level for ``sqlalchemy.engine`` (INFO echoes SQL)
        access_log: Emit uvicorn's per-request access lines
    """
    level = (log_level or config["log_level"]).upper()
    sql_level = (sql_log_level or config["sql_log_level"]).upper()
    if access_log is None:
        access_log = config["access_log"]

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "filters": {"below_warning": {"()": BelowWarningFilter}},
        "formatters": {
            "default": {"format": LOG_FORMAT},
            "access": {
                "()": "uvicorn.logging.AccessFormatter",
                "fmt": ACCESS_FORMAT,
                "use_colors": False,
            },
        },
        "handlers": {
            "stdout": {
                "class": "logging.StreamHandler",
                "stream": "ext://sys.stdout",
                "filters": ["below_warning"],
                "formatter": "default",
            },
            "stderr": {
                "class": "logging.StreamHandler",
                "stream": "ext://sys.stderr",
                "level": "WARNING",
                "formatter": "default",
            },
            "access": {
                "class": "logging.StreamHandler",
                "stream": "ext://sys.stdout",
                "formatter": "access",
            },
        },
        "root": {"level": level, "handlers": ["stdout", "stderr"]},
        "loggers": {
            # uvicorn's own loggers propagate to the root handlers
            "uvicorn": {"level": level, "handlers": [], "propagate": True},
            "uvicorn.error": {"level": level, "handlers": [], "propagate": True},
            "uvicorn.access": {
                "level": "INFO" if access_log else "WARNING",
                "handlers": ["access"],
                "propagate": False,
            },
            "sqlalchemy.engine": {"level": sql_level, "propagate": True},
        },
    }


def setup_logging(
    log_level: Optional[str] = None, sql_log_level: Optional[str] = None
) -> dict:
    """Apply the logging config and return it for reuse by uvicorn"""
    log_config = build_log_config(log_level, sql_log_level)
    logging.config.dictConfig(log_config)
    return log_config
