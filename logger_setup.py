"""
logging for applications built on impl_date

the library itself only emits records (debug level, when a transition has
no representable result), handlers are attached here

# usage
```python
import logging

from impl_date import LOG_NAME
from logger_setup import configure_logs


def main():
    configure_logs(LOG_NAME, level=logging.DEBUG)
    ...
```
"""

import logging
import logging.handlers
from pathlib import Path
import sys
from typing import Optional


MB = 1<<20
DATE_FMT = "%Y-%m-%d %H:%M:%S"
LOG_FMT = "{name} [{asctime}] {levelname} ({funcName}) - {message}"


def configure_logs(app_name: str, log_dir: Optional[Path] = None, level: int = logging.INFO) -> logging.Logger:
    """ stdout + rotating file, safe to call more than once """
    app_log = logging.getLogger(app_name)
    app_log.setLevel(level)
    if app_log.handlers:
        return app_log

    log_path = log_dir or Path(__file__).parent / "logs"
    log_path.mkdir(parents=True, exist_ok=True)

    stream_h = logging.StreamHandler(stream=sys.stdout)
    rotating_file_h = logging.handlers.RotatingFileHandler(
        filename = log_path / f"{app_name}.log",
        maxBytes = MB * 10,
        backupCount = 6
    )

    fmter = logging.Formatter(fmt=LOG_FMT, style="{", datefmt=DATE_FMT)
    stream_h.setFormatter(fmter)
    rotating_file_h.setFormatter(fmter)

    app_log.addHandler(stream_h)
    app_log.addHandler(rotating_file_h)
    return app_log
