"""
Logging setup for the Catalog API.

``setup_logging`` attaches a console handler and, when a path is
given, a file handler to the root logger.  Format strings come from
``Settings`` (``LOG_FORMAT`` and ``LOG_DATE_FORMAT``).  Uvicorn's own
loggers propagate to the root logger, so access logs share the same
format.

SQLAlchemy logs every statement at INFO on ``sqlalchemy.engine``.  That
logger gets its own level (``SQL_LOG_LEVEL``) so an application running
at INFO is not flooded with SQL.
"""

import logging
from pathlib import Path
from typing import Optional

from .config import settings

SQL_LOGGER = "sqlalchemy.engine"


def _level(name: str) -> int:
    return getattr(logging, name.upper(), logging.INFO)


def setup_logging(
    level: str = "INFO",
    logfile: Optional[str] = None,
    fmt: Optional[str] = None,
    datefmt: Optional[str] = None,
    sql_level: Optional[str] = None,
) -> None:
    """Configure the root and SQL loggers.

    Handlers are only attached when the root logger has none, so a
    second ``create_app`` call does not duplicate output.  Levels are
    always applied.

    Parameters
    ----------
    level : str
        Root level name (e.g. ``"DEBUG"``).  Case insensitive; unknown
        names fall back to ``INFO``.
    logfile : Optional[str]
        Path of an additional log file.
    fmt, datefmt : Optional[str]
        Record and timestamp formats; default to ``settings``.
    sql_level : Optional[str]
        Level of the ``sqlalchemy.engine`` logger; defaults to
        ``settings.sql_log_level``.
    """
    root = logging.getLogger()
    root.setLevel(_level(level))
    logging.getLogger(SQL_LOGGER).setLevel(_level(sql_level or settings.sql_log_level))

    if root.handlers:
        return

    formatter = logging.Formatter(
        fmt=fmt or settings.log_format,
        datefmt=datefmt or settings.log_date_format,
    )

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    root.addHandler(console_handler)

    if logfile:
        file_handler = logging.FileHandler(Path(logfile).resolve(), encoding="utf-8")
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)
